"""Domain value objects for checklist gating.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass

# Entity type slug: lowercase alphanumeric with optional underscores or hyphens (e.g. wcb_claims).
_ENTITY_TYPE_RE = re.compile(r"^[a-z0-9]+([_-][a-z0-9]+)*$")

# Separators accepted when parsing "from → to" (config files may use ASCII).
_TRANSITION_SEPARATORS = ("→", "->")


@dataclass(frozen=True)
class EntityType:
    """Value object for an entity type (SRP: entity type validation).

    Entity types are lowercase alphanumeric with optional underscores or
    hyphens, max 64 characters (e.g. 'employees', 'wcb_claims').
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Entity type must be a non-empty string")
        if len(self.value) > 64:
            raise ValueError("Entity type must not exceed 64 characters")
        if not _ENTITY_TYPE_RE.match(self.value):
            raise ValueError(
                "Entity type must be lowercase alphanumeric with optional "
                "underscores or hyphens (e.g., 'employees', 'wcb_claims')"
            )


@dataclass(frozen=True)
class TransitionKey:
    """Ordered (from_status, to_status) pair identifying a status transition.

    Renders as 'from → to'; parse() accepts that form and the ASCII 'from -> to'.
    """

    from_status: str
    to_status: str

    def __post_init__(self) -> None:
        """Validate both statuses are non-empty.

        Raises:
            ValueError: If either status is empty or blank.
        """
        if not self.from_status or not self.from_status.strip():
            raise ValueError("from_status must be a non-empty string")
        if not self.to_status or not self.to_status.strip():
            raise ValueError("to_status must be a non-empty string")

    @classmethod
    def parse(cls, value: str) -> "TransitionKey":
        """Parse 'from → to' (or 'from -> to') into a TransitionKey.

        Raises:
            ValueError: If no separator is present or a side is empty.
        """
        for separator in _TRANSITION_SEPARATORS:
            if separator in value:
                from_status, _, to_status = value.partition(separator)
                return cls(from_status.strip(), to_status.strip())
        raise ValueError(
            f"Transition must look like 'from → to', got: {value!r}"
        )

    def __str__(self) -> str:
        return f"{self.from_status} → {self.to_status}"
