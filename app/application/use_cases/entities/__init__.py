"""Entity use cases: status change preview and gated status change."""

from app.application.use_cases.entities.status_change import (
    ChangeEntityStatusUseCase,
    PreviewStatusChangeUseCase,
)

__all__ = [
    "ChangeEntityStatusUseCase",
    "PreviewStatusChangeUseCase",
]
