"""Conditional relation loading driven by the ``include`` query parameter.

Clients ask for related data by name; the policy keeps only the names on
its allow-list. Unknown names are dropped silently.
"""

from collections.abc import Iterable
from dataclasses import dataclass

USER = "user"
ATTENDEES = "attendees"
ATTENDEES_USER = "attendees.user"


def parse_include(values: Iterable[str]) -> tuple[str, ...]:
    """Flatten comma-form and array-form include values into relation names."""
    names: list[str] = []
    for value in values:
        for name in value.split(","):
            name = name.strip()
            if name and name not in names:
                names.append(name)
    return tuple(names)


@dataclass(frozen=True)
class RelationPolicy:
    """Allow-list of relations a client may ask to have loaded."""

    allowed: frozenset[str]

    def resolve(self, requested: Iterable[str]) -> frozenset[str]:
        resolved = set()
        for name in requested:
            if name not in self.allowed:
                continue
            resolved.add(name)
            # Loading a nested relation loads every parent on its path.
            parts = name.split(".")
            for depth in range(1, len(parts)):
                resolved.add(".".join(parts[:depth]))
        return frozenset(resolved)


DEFAULT_POLICY = RelationPolicy(allowed=frozenset({USER, ATTENDEES, ATTENDEES_USER}))
