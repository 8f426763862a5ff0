"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.checklist import (
    ChecklistDefinition,
    ChecklistItem,
    DataItem,
    FileItem,
    ModalItem,
)
from app.domain.entities.status_workflow import StatusWorkflow

__all__ = [
    "ChecklistDefinition",
    "ChecklistItem",
    "DataItem",
    "FileItem",
    "ModalItem",
    "StatusWorkflow",
]
