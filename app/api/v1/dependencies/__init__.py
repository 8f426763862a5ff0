"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the checklist registry and the
application use cases. Routes depend only on these, not on infrastructure.
"""

from app.api.v1.dependencies.checklists import (
    get_change_entity_status_use_case,
    get_checklist_progress_use_case,
    get_checklist_registry,
    get_completion_evaluator,
    get_gate_evaluator,
    get_preview_status_change_use_case,
)
from app.api.v1.dependencies.db import (
    get_document_repo,
    get_document_repo_for_write,
    get_entity_repo,
    get_entity_repo_for_write,
)

__all__ = [
    "get_change_entity_status_use_case",
    "get_checklist_progress_use_case",
    "get_checklist_registry",
    "get_completion_evaluator",
    "get_document_repo",
    "get_document_repo_for_write",
    "get_entity_repo",
    "get_entity_repo_for_write",
    "get_gate_evaluator",
    "get_preview_status_change_use_case",
]
