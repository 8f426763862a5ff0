"""Checklist definition registry.

Immutable, explicitly constructed configuration: checklist definitions and
status workflows per entity type. Built once at startup (see app.core.lifespan)
and injected into evaluators and use cases; safe for concurrent reads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from app.application.services.item_validators import (
    DEFAULT_ITEM_VALIDATORS,
    ItemValidator,
)
from app.domain.entities import (
    ChecklistDefinition,
    FileItem,
    ModalItem,
    StatusWorkflow,
)
from app.domain.exceptions import (
    ChecklistConfigurationException,
    ResourceNotFoundException,
)
from app.domain.value_objects import EntityType, TransitionKey

logger = logging.getLogger(__name__)


def get_required_document_types(definition: ChecklistDefinition) -> list[str]:
    """Return document type keys of the required file items, in item order."""
    return [
        item.document_type
        for item in definition.items
        if isinstance(item, FileItem) and item.required
    ]


def _validate_definition(
    definition: ChecklistDefinition,
    validators: Mapping[str, ItemValidator],
) -> None:
    """Raise ChecklistConfigurationException if the definition is malformed."""
    try:
        EntityType(definition.entity_type)
    except ValueError as e:
        raise ChecklistConfigurationException(
            str(e), checklist=definition.key, entity_type=definition.entity_type
        ) from e
    if not definition.key:
        raise ChecklistConfigurationException(
            "Checklist key must be non-empty", entity_type=definition.entity_type
        )
    seen: set[str] = set()
    for item in definition.items:
        if item.key in seen:
            raise ChecklistConfigurationException(
                f"Duplicate item key '{item.key}' in checklist '{definition.key}'",
                checklist=definition.key,
                item=item.key,
            )
        seen.add(item.key)
        if isinstance(item, ModalItem) and item.validator not in validators:
            raise ChecklistConfigurationException(
                f"Unknown validator '{item.validator}' for item '{item.key}'",
                checklist=definition.key,
                item=item.key,
                validator=item.validator,
            )


class ChecklistRegistry:
    """Read-only lookup of checklist definitions and status workflows by entity type."""

    def __init__(
        self,
        definitions: Iterable[ChecklistDefinition] = (),
        workflows: Iterable[StatusWorkflow] = (),
        *,
        validators: Mapping[str, ItemValidator] = DEFAULT_ITEM_VALIDATORS,
    ) -> None:
        by_type: dict[str, list[ChecklistDefinition]] = {}
        for definition in definitions:
            _validate_definition(definition, validators)
            bucket = by_type.setdefault(definition.entity_type, [])
            if any(d.key == definition.key for d in bucket):
                raise ChecklistConfigurationException(
                    f"Duplicate checklist '{definition.key}' for {definition.entity_type}",
                    checklist=definition.key,
                    entity_type=definition.entity_type,
                )
            bucket.append(definition)

        workflow_map: dict[str, StatusWorkflow] = {}
        for workflow in workflows:
            if workflow.entity_type in workflow_map:
                raise ChecklistConfigurationException(
                    f"Duplicate status workflow for {workflow.entity_type}",
                    entity_type=workflow.entity_type,
                )
            workflow_map[workflow.entity_type] = workflow

        self._definitions: Mapping[str, tuple[ChecklistDefinition, ...]] = (
            MappingProxyType({k: tuple(v) for k, v in by_type.items()})
        )
        self._workflows: Mapping[str, StatusWorkflow] = MappingProxyType(workflow_map)
        self._validators = validators
        logger.debug(
            "Checklist registry built: %d entity types, %d checklists, %d workflows",
            len(self._definitions),
            sum(len(v) for v in self._definitions.values()),
            len(self._workflows),
        )

    @property
    def validators(self) -> Mapping[str, ItemValidator]:
        """Validators modal items were checked against."""
        return self._validators

    def entity_types(self) -> list[str]:
        """Return entity types with checklists or a workflow, sorted."""
        return sorted(set(self._definitions) | set(self._workflows))

    def definitions_for(self, entity_type: str) -> tuple[ChecklistDefinition, ...]:
        """Return checklists for the entity type in configured order (empty if none)."""
        return self._definitions.get(entity_type, ())

    def get_definition(self, entity_type: str, key: str) -> ChecklistDefinition:
        """Return one checklist.

        Raises:
            ResourceNotFoundException: If no checklist with key exists for the entity type.
        """
        for definition in self.definitions_for(entity_type):
            if definition.key == key:
                return definition
        raise ResourceNotFoundException("checklist", f"{entity_type}/{key}")

    def gating_definitions(
        self, entity_type: str, transition: TransitionKey
    ) -> list[ChecklistDefinition]:
        """Return checklists of the entity type that gate the transition, in order."""
        return [
            d for d in self.definitions_for(entity_type) if d.gates_transition(transition)
        ]

    def workflow_for(self, entity_type: str) -> StatusWorkflow | None:
        """Return the status workflow for the entity type, or None if unrestricted."""
        return self._workflows.get(entity_type)

    def is_known_entity_type(self, entity_type: str) -> bool:
        """Return whether any checklist or workflow is configured for the entity type."""
        return entity_type in self._definitions or entity_type in self._workflows
