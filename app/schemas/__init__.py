"""Pydantic request/response schemas for the API."""

from app.schemas.checklist import (
    ChecklistDefinitionResponse,
    ChecklistItemResponse,
    ChecklistProgressResponse,
    CompletionResultResponse,
    EntityChecklistsResponse,
    MissingItemResponse,
    StatusWorkflowResponse,
)
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.status_transition import (
    EntityStatusResponse,
    StatusChangeRequest,
    StatusTransitionEvaluateRequest,
    TransitionDecisionResponse,
)

__all__ = [
    "ChecklistDefinitionResponse",
    "ChecklistItemResponse",
    "ChecklistProgressResponse",
    "CompletionResultResponse",
    "EntityChecklistsResponse",
    "EntityStatusResponse",
    "HealthResponse",
    "MissingItemResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "StatusChangeRequest",
    "StatusTransitionEvaluateRequest",
    "StatusWorkflowResponse",
    "TransitionDecisionResponse",
]
