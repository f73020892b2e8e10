"""Serializers for request validation and for rendering domain models.

Output serializers leave out relations that were not loaded: the key is
absent, not null or an empty list.
"""

from rest_framework import serializers


class StrictCharField(serializers.CharField):
    """CharField that rejects numbers and other non-string JSON values."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class EventInputSerializer(serializers.Serializer):
    """Validates the body of a create request.

    Pass ``partial=True`` for updates, where every field is optional.
    """

    name = StrictCharField(max_length=255)
    description = StrictCharField(required=False, allow_null=True, allow_blank=True)
    start_at = serializers.DateTimeField()
    end_at = serializers.DateTimeField()

    def validate(self, attrs):
        start_at = attrs.get("start_at")
        end_at = attrs.get("end_at")
        if start_at is not None and end_at is not None and end_at <= start_at:
            raise serializers.ValidationError(
                {"end_at": ["The end at field must be a date after start at."]}
            )
        return attrs


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.CharField()


class _ConditionalRelationsMixin:
    """Drops declared relation fields whose value was never loaded."""

    relation_fields: tuple[str, ...] = ()

    def to_representation(self, instance):
        data = super().to_representation(instance)
        for name in self.relation_fields:
            if getattr(instance, name) is None:
                data.pop(name, None)
        return data


class AttendeeSerializer(_ConditionalRelationsMixin, serializers.Serializer):
    """Serializer for Attendee domain model."""

    relation_fields = ("user",)

    id = serializers.IntegerField()
    event_id = serializers.IntegerField(source="event_id.value")
    user_id = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
    user = UserSerializer()


class EventSerializer(_ConditionalRelationsMixin, serializers.Serializer):
    """Serializer for Event domain model."""

    relation_fields = ("user", "attendees")

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    start_at = serializers.DateTimeField()
    end_at = serializers.DateTimeField()
    user_id = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
    user = UserSerializer()
    attendees = AttendeeSerializer(many=True)
