"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    ChecklistDefinition,
    ChecklistItem,
    DataItem,
    FileItem,
    ModalItem,
    StatusWorkflow,
)
from app.domain.enums import ChecklistItemKind, MissingReason
from app.domain.exceptions import (
    ChecklistConfigurationException,
    EntityVersionConflictException,
    FleetGateException,
    ResourceNotFoundException,
    StatusTransitionNotPermittedException,
    TransitionBlockedException,
)
from app.domain.value_objects import EntityType, TransitionKey

__all__ = [
    # Entities
    "ChecklistDefinition",
    "ChecklistItem",
    "DataItem",
    "FileItem",
    "ModalItem",
    "StatusWorkflow",
    # Enums
    "ChecklistItemKind",
    "MissingReason",
    # Exceptions
    "ChecklistConfigurationException",
    "EntityVersionConflictException",
    "FleetGateException",
    "ResourceNotFoundException",
    "StatusTransitionNotPermittedException",
    "TransitionBlockedException",
    # Value objects
    "EntityType",
    "TransitionKey",
]
