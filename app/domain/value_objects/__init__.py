"""Domain value objects and shared value types."""

from app.domain.value_objects.core import EntityType, TransitionKey

__all__ = [
    "EntityType",
    "TransitionKey",
]
