"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IDocumentRepository,
    IEntityRepository,
)
from app.application.interfaces.services import (
    ICompletionEvaluator,
    ITransitionGateEvaluator,
)

__all__ = [
    "ICompletionEvaluator",
    "IDocumentRepository",
    "IEntityRepository",
    "ITransitionGateEvaluator",
]
