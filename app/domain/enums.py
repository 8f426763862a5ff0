"""Domain enumerations for checklist evaluation.

Enums represent fixed sets of domain values (item kinds, missing-item reasons).
"""

from enum import Enum


class ChecklistItemKind(str, Enum):
    """Kind of a checklist item; selects how the item is satisfied."""

    FILE = "file"
    DATA = "data"
    MODAL = "modal"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid kind values as strings."""
        return [kind.value for kind in cls]


class MissingReason(str, Enum):
    """Why a required checklist item does not count toward completion.

    File items are NOT_UPLOADED or NOT_REVIEWED; data items are NOT_FILLED;
    modal items are VALIDATION_FAILED.
    """

    NOT_UPLOADED = "not_uploaded"
    NOT_REVIEWED = "not_reviewed"
    NOT_FILLED = "not_filled"
    VALIDATION_FAILED = "validation_failed"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid reason values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [reason.value for reason in cls]
