"""Status transition endpoints: advisory evaluation and the gated status write."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import (
    get_change_entity_status_use_case,
    get_preview_status_change_use_case,
)
from app.application.use_cases import (
    ChangeEntityStatusUseCase,
    PreviewStatusChangeUseCase,
)
from app.schemas.status_transition import (
    EntityStatusResponse,
    StatusChangeRequest,
    StatusTransitionEvaluateRequest,
    TransitionDecisionResponse,
)

router = APIRouter()


@router.post(
    "/{entity_type}/{entity_id}/evaluate",
    response_model=TransitionDecisionResponse,
)
async def evaluate_status_transition(
    entity_type: str,
    entity_id: str,
    body: StatusTransitionEvaluateRequest,
    use_case: Annotated[
        PreviewStatusChangeUseCase, Depends(get_preview_status_change_use_case)
    ],
):
    """Return whether the entity may move to to_status now. Never writes; 200 even when blocked."""
    decision = await use_case.execute(
        entity_type=entity_type,
        entity_id=entity_id,
        to_status=body.to_status,
    )
    return TransitionDecisionResponse.model_validate(decision)


@router.patch(
    "/{entity_type}/{entity_id}",
    response_model=EntityStatusResponse,
    responses={
        409: {"description": "Version conflict or incomplete gating checklist"},
        422: {"description": "Transition not permitted by the status workflow"},
    },
)
async def change_entity_status(
    entity_type: str,
    entity_id: str,
    body: StatusChangeRequest,
    use_case: Annotated[
        ChangeEntityStatusUseCase, Depends(get_change_entity_status_use_case)
    ],
):
    """Write the new status if the workflow and every gating checklist allow it."""
    entity = await use_case.execute(
        entity_type=entity_type,
        entity_id=entity_id,
        to_status=body.to_status,
        expected_version=body.expected_version,
    )
    return EntityStatusResponse.model_validate(entity)
