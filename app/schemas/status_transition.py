"""Status transition API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.checklist import CompletionResultResponse


class _ToStatusRequest(BaseModel):
    to_status: str = Field(..., min_length=1, max_length=64)

    @field_validator("to_status", mode="before")
    @classmethod
    def _strip_to_status(cls, v: object) -> object:
        """Strip surrounding whitespace so a blank status fails min_length."""
        return v.strip() if isinstance(v, str) else v


class StatusTransitionEvaluateRequest(_ToStatusRequest):
    """Request body for POST .../evaluate (advisory, no write)."""


class StatusChangeRequest(_ToStatusRequest):
    """Request body for PATCH (gated status write)."""

    expected_version: int | None = Field(
        default=None,
        ge=1,
        description="Version last read by the client; 409 if the entity changed since.",
    )


class TransitionDecisionResponse(BaseModel):
    """Decision for a (from_status, to_status) pair."""

    model_config = ConfigDict(from_attributes=True)

    from_status: str
    to_status: str
    allowed: bool
    reason: str | None
    checklist_results: list[CompletionResultResponse]
    blocking_checklists: list[str]


class EntityStatusResponse(BaseModel):
    """Entity after a status change."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    entity_type: str
    status: str
    version: int
    attributes: dict[str, Any]
    updated_at: datetime | None = None
