from django.contrib import admin

from events.models import Attendee, Event


class AttendeeInline(admin.TabularInline):
    model = Attendee
    extra = 1
    autocomplete_fields = ["user"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "start_at", "end_at", "user", "created_at"]
    list_select_related = ["user"]
    search_fields = ["name", "description"]
    date_hierarchy = "start_at"
    inlines = [AttendeeInline]


@admin.register(Attendee)
class AttendeeAdmin(admin.ModelAdmin):
    list_display = ["event", "user", "created_at"]
    list_filter = ["event"]
    list_select_related = ["event", "user"]
