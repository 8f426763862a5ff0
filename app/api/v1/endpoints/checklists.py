"""Checklist endpoints: configured definitions and per-entity progress."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import (
    get_checklist_progress_use_case,
    get_checklist_registry,
)
from app.application.services import ChecklistRegistry, get_required_document_types
from app.application.use_cases import GetChecklistProgressUseCase
from app.domain.entities import ChecklistDefinition, FileItem, ModalItem, StatusWorkflow
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.checklist import (
    ChecklistDefinitionResponse,
    ChecklistItemResponse,
    ChecklistProgressResponse,
    CompletionResultResponse,
    EntityChecklistsResponse,
    StatusWorkflowResponse,
)

router = APIRouter()


def _definition_response(definition: ChecklistDefinition) -> ChecklistDefinitionResponse:
    return ChecklistDefinitionResponse(
        key=definition.key,
        name=definition.name,
        entity_type=definition.entity_type,
        items=[
            ChecklistItemResponse(
                key=item.key,
                label=item.label,
                kind=item.kind,
                required=item.required,
                document_type=item.document_type if isinstance(item, FileItem) else None,
                validator=item.validator if isinstance(item, ModalItem) else None,
                reviewable=item.reviewable if isinstance(item, FileItem) else None,
            )
            for item in definition.items
        ],
        gates=sorted(str(g) for g in definition.gates),
        required_document_types=get_required_document_types(definition),
    )


def _workflow_response(workflow: StatusWorkflow) -> StatusWorkflowResponse:
    return StatusWorkflowResponse(
        statuses=list(workflow.statuses),
        transitions={
            status: workflow.next_statuses(status)
            for status in workflow.statuses
            if workflow.next_statuses(status)
        },
    )


@router.get("/{entity_type}", response_model=EntityChecklistsResponse)
async def list_checklists(
    entity_type: str,
    registry: Annotated[ChecklistRegistry, Depends(get_checklist_registry)],
):
    """Return the checklists (and status workflow) configured for an entity type."""
    if not registry.is_known_entity_type(entity_type):
        raise ResourceNotFoundException("entity type", entity_type)
    workflow = registry.workflow_for(entity_type)
    return EntityChecklistsResponse(
        entity_type=entity_type,
        checklists=[_definition_response(d) for d in registry.definitions_for(entity_type)],
        workflow=_workflow_response(workflow) if workflow else None,
    )


@router.get(
    "/{entity_type}/{entity_id}/progress",
    response_model=ChecklistProgressResponse,
)
async def get_checklist_progress(
    entity_type: str,
    entity_id: str,
    use_case: Annotated[
        GetChecklistProgressUseCase, Depends(get_checklist_progress_use_case)
    ],
    checklist_key: Annotated[str | None, Query(max_length=128)] = None,
):
    """Return completion of the entity's checklists (or only checklist_key)."""
    results = await use_case.execute(
        entity_type=entity_type,
        entity_id=entity_id,
        checklist_key=checklist_key,
    )
    return ChecklistProgressResponse(
        entity_type=entity_type,
        entity_id=entity_id,
        checklists=[CompletionResultResponse.model_validate(r) for r in results],
    )
