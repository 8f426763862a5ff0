"""Built-in checklist catalog.

Checklist definitions and status workflows shipped with the service, one
module per entity type. build_default_registry() validates them into an
immutable ChecklistRegistry; app.core.lifespan merges in any JSON
configuration before building the registry used by requests.
"""

from collections.abc import Mapping

from app.application.services.checklist_registry import ChecklistRegistry
from app.application.services.item_validators import (
    DEFAULT_ITEM_VALIDATORS,
    ItemValidator,
)
from app.core.checklists import (
    drivers,
    employees,
    equipment,
    incidents,
    trucks,
    violations,
    wcb_claims,
)
from app.domain.entities import ChecklistDefinition, StatusWorkflow

DEFAULT_DEFINITIONS: tuple[ChecklistDefinition, ...] = (
    *employees.DEFINITIONS,
    *wcb_claims.DEFINITIONS,
    *trucks.DEFINITIONS,
    *equipment.DEFINITIONS,
    *drivers.DEFINITIONS,
    *incidents.DEFINITIONS,
    *violations.DEFINITIONS,
)

DEFAULT_WORKFLOWS: tuple[StatusWorkflow, ...] = (
    employees.WORKFLOW,
    trucks.WORKFLOW,
    equipment.WORKFLOW,
    drivers.WORKFLOW,
)


def build_default_registry(
    validators: Mapping[str, ItemValidator] = DEFAULT_ITEM_VALIDATORS,
) -> ChecklistRegistry:
    """Return a registry of the built-in catalog."""
    return ChecklistRegistry(
        DEFAULT_DEFINITIONS, DEFAULT_WORKFLOWS, validators=validators
    )


__all__ = [
    "DEFAULT_DEFINITIONS",
    "DEFAULT_WORKFLOWS",
    "build_default_registry",
]
