"""Apply modes."""

from enum import StrEnum


class ApplyMode(StrEnum):
    """Whether roles are granted to or taken from the user."""

    ASSIGN = "assign"
    UNASSIGN = "unassign"
