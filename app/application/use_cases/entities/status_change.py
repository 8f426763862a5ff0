"""Status change use cases: advisory preview and the gated, transactional write."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.application.dtos.checklist import CompletionResult, TransitionDecision
from app.application.dtos.entity import EntityRecord
from app.application.interfaces.repositories import IEntityRepository
from app.application.interfaces.services import ITransitionGateEvaluator
from app.domain.exceptions import (
    EntityVersionConflictException,
    ResourceNotFoundException,
    StatusTransitionNotPermittedException,
    TransitionBlockedException,
)
from app.domain.value_objects import TransitionKey

if TYPE_CHECKING:
    from app.application.services.checklist_registry import ChecklistRegistry

logger = logging.getLogger(__name__)


def _result_details(result: CompletionResult) -> dict[str, Any]:
    """JSON-safe summary of a completion result for error details."""
    return {
        "checklist_key": result.checklist_key,
        "percent_complete": result.percent_complete,
        "missing_items": [
            {"key": m.key, "label": m.label, "reason": m.reason.value}
            for m in result.missing_items
        ],
    }


class PreviewStatusChangeUseCase:
    """Answers 'may this entity move to to_status now?' without writing."""

    def __init__(
        self,
        entity_repo: IEntityRepository,
        gate_evaluator: ITransitionGateEvaluator,
        registry: ChecklistRegistry,
    ) -> None:
        self._entity_repo = entity_repo
        self._gate_evaluator = gate_evaluator
        self._registry = registry

    async def execute(
        self, entity_type: str, entity_id: str, to_status: str
    ) -> TransitionDecision:
        """Return the decision for entity.status → to_status.

        A transition the status workflow forbids is reported as not allowed
        without evaluating checklists.

        Raises:
            ResourceNotFoundException: If the entity is not found.
        """
        entity = await self._entity_repo.get_by_id(entity_type, entity_id)
        if not entity:
            raise ResourceNotFoundException(entity_type, entity_id)
        if entity.status != to_status:
            workflow = self._registry.workflow_for(entity_type)
            if workflow and not workflow.permits(TransitionKey(entity.status, to_status)):
                return TransitionDecision(
                    from_status=entity.status,
                    to_status=to_status,
                    allowed=False,
                    reason=StatusTransitionNotPermittedException(
                        entity_type, entity.status, to_status
                    ).message,
                )
        return await self._gate_evaluator.evaluate(
            entity.status,
            to_status,
            entity.id,
            entity_type,
            self._registry.definitions_for(entity_type),
            attributes=entity.attributes,
        )


class ChangeEntityStatusUseCase:
    """Writes a new entity status only if the workflow and checklist gates allow it.

    Must run inside one database transaction (see get_db_transactional): the
    entity row is locked while the gates are evaluated and the write is
    guarded by the entity version, so two requests cannot both pass the gate
    on stale data.
    """

    def __init__(
        self,
        entity_repo: IEntityRepository,
        gate_evaluator: ITransitionGateEvaluator,
        registry: ChecklistRegistry,
    ) -> None:
        self._entity_repo = entity_repo
        self._gate_evaluator = gate_evaluator
        self._registry = registry

    async def execute(
        self,
        entity_type: str,
        entity_id: str,
        to_status: str,
        *,
        expected_version: int | None = None,
    ) -> EntityRecord:
        """Change the entity status.

        Args:
            entity_type: Entity type (e.g. 'employees').
            entity_id: Entity id.
            to_status: Requested status.
            expected_version: Version the caller last read; None skips the check.

        Returns:
            The updated entity (unchanged when already in to_status).

        Raises:
            ResourceNotFoundException: If the entity is not found.
            EntityVersionConflictException: If the entity changed since expected_version
                or a concurrent write won.
            StatusTransitionNotPermittedException: If the workflow has no such edge.
            TransitionBlockedException: If a gating checklist is incomplete.
        """
        entity = await self._entity_repo.get_by_id(
            entity_type, entity_id, for_update=True
        )
        if not entity:
            raise ResourceNotFoundException(entity_type, entity_id)
        if expected_version is not None and entity.version != expected_version:
            raise EntityVersionConflictException(
                entity_type, entity_id, expected_version, entity.version
            )
        if entity.status == to_status:
            return entity

        transition = TransitionKey(entity.status, to_status)
        workflow = self._registry.workflow_for(entity_type)
        if workflow and not workflow.permits(transition):
            raise StatusTransitionNotPermittedException(
                entity_type, entity.status, to_status
            )

        decision = await self._gate_evaluator.evaluate(
            entity.status,
            to_status,
            entity.id,
            entity_type,
            self._registry.definitions_for(entity_type),
            attributes=entity.attributes,
        )
        if not decision.allowed:
            raise TransitionBlockedException(
                decision.reason or "Transition blocked by an incomplete checklist",
                entity.status,
                to_status,
                list(decision.blocking_checklists),
                checklist_results=[
                    _result_details(r)
                    for r in decision.checklist_results
                    if not r.is_complete
                ],
            )

        updated = await self._entity_repo.update_status_if_version(
            entity_type, entity.id, entity.version, to_status
        )
        if updated is None:
            raise EntityVersionConflictException(
                entity_type, entity_id, entity.version
            )
        logger.info(
            "Status of %s %s changed %s (version %d)",
            entity_type,
            entity_id,
            transition,
            updated.version,
        )
        return updated
