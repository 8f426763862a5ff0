"""Application use cases: one entry point per workflow."""

from app.application.use_cases.checklists import GetChecklistProgressUseCase
from app.application.use_cases.entities import (
    ChangeEntityStatusUseCase,
    PreviewStatusChangeUseCase,
)

__all__ = [
    "ChangeEntityStatusUseCase",
    "GetChecklistProgressUseCase",
    "PreviewStatusChangeUseCase",
]
