"""Checklist definition and progress API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import ChecklistItemKind, MissingReason


class ChecklistItemResponse(BaseModel):
    """One configured checklist item."""

    key: str
    label: str
    kind: ChecklistItemKind
    required: bool
    document_type: str | None = Field(default=None, description="File items only")
    validator: str | None = Field(default=None, description="Modal items only")
    reviewable: bool | None = Field(default=None, description="File items only; false means upload alone counts")


class ChecklistDefinitionResponse(BaseModel):
    """Configured checklist with the transitions it gates ('from → to')."""

    key: str
    name: str
    entity_type: str
    items: list[ChecklistItemResponse]
    gates: list[str]
    required_document_types: list[str]


class StatusWorkflowResponse(BaseModel):
    """Permitted status transitions for an entity type."""

    statuses: list[str]
    transitions: dict[str, list[str]]


class EntityChecklistsResponse(BaseModel):
    """GET /checklists/{entity_type}."""

    entity_type: str
    checklists: list[ChecklistDefinitionResponse]
    workflow: StatusWorkflowResponse | None = None


class MissingItemResponse(BaseModel):
    """Required item not counted as complete."""

    model_config = ConfigDict(from_attributes=True)

    key: str
    label: str
    reason: MissingReason


class CompletionResultResponse(BaseModel):
    """Completion of one checklist for one entity."""

    model_config = ConfigDict(from_attributes=True)

    checklist_key: str
    checklist_name: str
    is_complete: bool
    missing_items: list[MissingItemResponse]
    uploaded_count: int
    reviewed_count: int
    total_required: int
    percent_complete: int = Field(..., ge=0, le=100)


class ChecklistProgressResponse(BaseModel):
    """GET /checklists/{entity_type}/{entity_id}/progress."""

    entity_type: str
    entity_id: str
    checklists: list[CompletionResultResponse]
