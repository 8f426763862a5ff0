"""Application services: checklist registry, completion and transition gate evaluation."""

from app.application.services.checklist_completion_evaluator import (
    ChecklistCompletionEvaluator,
    percent_rounded,
)
from app.application.services.checklist_registry import (
    ChecklistRegistry,
    get_required_document_types,
)
from app.application.services.item_validators import (
    DEFAULT_ITEM_VALIDATORS,
    ItemValidator,
    activity_period_covered,
    find_activity_gaps,
    non_empty,
)
from app.application.services.transition_gate_evaluator import (
    TransitionGateEvaluator,
)

__all__ = [
    "DEFAULT_ITEM_VALIDATORS",
    "ChecklistCompletionEvaluator",
    "ChecklistRegistry",
    "ItemValidator",
    "TransitionGateEvaluator",
    "activity_period_covered",
    "find_activity_gaps",
    "get_required_document_types",
    "non_empty",
    "percent_rounded",
]
