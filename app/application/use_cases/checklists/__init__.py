"""Checklist use cases: per-entity progress."""

from app.application.use_cases.checklists.get_checklist_progress import (
    GetChecklistProgressUseCase,
)

__all__ = ["GetChecklistProgressUseCase"]
