"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, checklist loader).
"""

from app.application.interfaces import (
    ICompletionEvaluator,
    IDocumentRepository,
    IEntityRepository,
    ITransitionGateEvaluator,
)
from app.application.services import (
    ChecklistCompletionEvaluator,
    ChecklistRegistry,
    TransitionGateEvaluator,
)
from app.application.use_cases import (
    ChangeEntityStatusUseCase,
    GetChecklistProgressUseCase,
    PreviewStatusChangeUseCase,
)

__all__ = [
    "ChangeEntityStatusUseCase",
    "ChecklistCompletionEvaluator",
    "ChecklistRegistry",
    "GetChecklistProgressUseCase",
    "ICompletionEvaluator",
    "IDocumentRepository",
    "IEntityRepository",
    "ITransitionGateEvaluator",
    "PreviewStatusChangeUseCase",
    "TransitionGateEvaluator",
]
