"""Get checklist progress use case: completion of every checklist for one entity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.checklist import CompletionResult
from app.application.interfaces.repositories import IEntityRepository
from app.application.interfaces.services import ICompletionEvaluator
from app.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from app.application.services.checklist_registry import ChecklistRegistry


class GetChecklistProgressUseCase:
    """Computes completion of an entity's checklists (all, or one by key)."""

    def __init__(
        self,
        entity_repo: IEntityRepository,
        completion_evaluator: ICompletionEvaluator,
        registry: ChecklistRegistry,
    ) -> None:
        self._entity_repo = entity_repo
        self._completion_evaluator = completion_evaluator
        self._registry = registry

    async def execute(
        self,
        entity_type: str,
        entity_id: str,
        checklist_key: str | None = None,
    ) -> list[CompletionResult]:
        """Return completion results in configured checklist order.

        Args:
            entity_type: Entity type (e.g. 'employees').
            entity_id: Entity id.
            checklist_key: Optional single checklist to evaluate.

        Returns:
            One CompletionResult per evaluated checklist.

        Raises:
            ResourceNotFoundException: If the entity (or the requested checklist) is not found.
        """
        entity = await self._entity_repo.get_by_id(entity_type, entity_id)
        if not entity:
            raise ResourceNotFoundException(entity_type, entity_id)
        if checklist_key is not None:
            definitions = (self._registry.get_definition(entity_type, checklist_key),)
        else:
            definitions = self._registry.definitions_for(entity_type)
        return [
            await self._completion_evaluator.evaluate(
                entity.id, entity_type, definition, attributes=entity.attributes
            )
            for definition in definitions
        ]
