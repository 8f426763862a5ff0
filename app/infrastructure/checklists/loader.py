"""JSON checklist configuration loader.

Reads extra checklist definitions and status workflows from the file named by
CHECKLIST_CONFIG_PATH. The file is validated with pydantic and converted to
domain entities; merge_* apply it on top of the built-in catalog.

File shape::

    {
      "checklists": [
        {"key": "orientation", "name": "Orientation", "entity_type": "drivers",
         "gates": ["TR -> AC"],
         "items": [{"kind": "file", "key": "orientation_form", "label": "Orientation Form"}]}
      ],
      "workflows": [
        {"entity_type": "wcb_claims", "statuses": ["new", "submitted"],
         "transitions": {"new": ["submitted"]}}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.domain.entities import (
    ChecklistDefinition,
    ChecklistItem,
    DataItem,
    FileItem,
    ModalItem,
    StatusWorkflow,
)
from app.domain.exceptions import ChecklistConfigurationException
from app.domain.value_objects import EntityType, TransitionKey

logger = logging.getLogger(__name__)


class _ItemConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: str = Field(..., min_length=1, max_length=128)
    label: str = Field(default="", max_length=255)
    required: bool = True


class FileItemConfig(_ItemConfig):
    """File item: satisfied by a reviewed (or, if not reviewable, any) document of document_type."""

    kind: Literal["file"]
    document_type: str | None = Field(default=None, max_length=128)
    reviewable: bool = True


class DataItemConfig(_ItemConfig):
    """Data item: satisfied by a non-empty entity attribute."""

    kind: Literal["data"]


class ModalItemConfig(_ItemConfig):
    """Modal item: satisfied when the named validator accepts the attribute."""

    kind: Literal["modal"]
    validator: str = Field(..., min_length=1)


ItemConfig = Annotated[
    FileItemConfig | DataItemConfig | ModalItemConfig, Field(discriminator="kind")
]


class ChecklistConfig(BaseModel):
    """One checklist definition as written in the configuration file."""

    model_config = ConfigDict(extra="forbid")

    key: str = Field(..., min_length=1, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)
    entity_type: str = Field(..., min_length=1, max_length=64)
    items: list[ItemConfig] = Field(default_factory=list)
    gates: list[str] = Field(
        default_factory=list,
        description="Transitions that require this checklist, as 'from → to' or 'from -> to'.",
    )

    @field_validator("entity_type")
    @classmethod
    def entity_type_slug(cls, v: str) -> str:
        return EntityType(v).value

    @field_validator("gates")
    @classmethod
    def gates_parse(cls, v: list[str]) -> list[str]:
        for gate in v:
            TransitionKey.parse(gate)
        return v


def _require_status(value: str) -> str:
    if not value.strip():
        raise ValueError("status must be a non-empty string")
    return value


class WorkflowConfig(BaseModel):
    """Permitted status transitions for one entity type."""

    model_config = ConfigDict(extra="forbid")

    entity_type: str = Field(..., min_length=1, max_length=64)
    statuses: list[str] = Field(default_factory=list)
    transitions: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("entity_type")
    @classmethod
    def entity_type_slug(cls, v: str) -> str:
        return EntityType(v).value

    @field_validator("statuses")
    @classmethod
    def statuses_not_blank(cls, v: list[str]) -> list[str]:
        return [_require_status(s) for s in v]

    @field_validator("transitions")
    @classmethod
    def transitions_not_blank(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        for src, targets in v.items():
            _require_status(src)
            for dst in targets:
                _require_status(dst)
        return v


class ChecklistConfigFile(BaseModel):
    """Top-level configuration file."""

    model_config = ConfigDict(extra="forbid")

    checklists: list[ChecklistConfig] = Field(default_factory=list)
    workflows: list[WorkflowConfig] = Field(default_factory=list)


def _to_item(config: FileItemConfig | DataItemConfig | ModalItemConfig) -> ChecklistItem:
    label = config.label or config.key
    match config:
        case FileItemConfig():
            return FileItem(
                config.key,
                label,
                required=config.required,
                document_type=config.document_type or "",
                reviewable=config.reviewable,
            )
        case DataItemConfig():
            return DataItem(config.key, label, required=config.required)
        case ModalItemConfig():
            return ModalItem(
                config.key, label, validator=config.validator, required=config.required
            )
        case _:
            assert_never(config)


def _to_definition(config: ChecklistConfig) -> ChecklistDefinition:
    return ChecklistDefinition(
        key=config.key,
        name=config.name,
        entity_type=config.entity_type,
        items=tuple(_to_item(i) for i in config.items),
        gates=frozenset(TransitionKey.parse(g) for g in config.gates),
    )


def parse_checklist_config(
    raw: str | bytes,
) -> tuple[list[ChecklistDefinition], list[StatusWorkflow]]:
    """Parse configuration JSON into checklist definitions and workflows.

    Raises:
        ChecklistConfigurationException: If the JSON is malformed or fails validation.
    """
    try:
        config = ChecklistConfigFile.model_validate_json(raw)
    except ValidationError as e:
        raise ChecklistConfigurationException(
            f"Invalid checklist configuration: {e.error_count()} error(s)",
            errors=json.loads(e.json(include_url=False, include_context=False)),
        ) from e
    try:
        definitions = [_to_definition(c) for c in config.checklists]
        workflows = [
            StatusWorkflow.from_edges(w.entity_type, w.statuses, w.transitions)
            for w in config.workflows
        ]
    except ValueError as e:
        raise ChecklistConfigurationException(
            f"Invalid checklist configuration: {e}", errors=[{"msg": str(e)}]
        ) from e
    return definitions, workflows


def load_checklist_config(
    path: str | Path,
) -> tuple[list[ChecklistDefinition], list[StatusWorkflow]]:
    """Read and parse the configuration file at path.

    Raises:
        ChecklistConfigurationException: If the file cannot be read or is invalid.
    """
    config_path = Path(path)
    try:
        raw = config_path.read_bytes()
    except OSError as e:
        raise ChecklistConfigurationException(
            f"Cannot read checklist configuration: {config_path}", path=str(config_path)
        ) from e
    definitions, workflows = parse_checklist_config(raw)
    logger.info(
        "Loaded %d checklists and %d workflows from %s",
        len(definitions),
        len(workflows),
        config_path,
    )
    return definitions, workflows


def merge_definitions(
    base: Iterable[ChecklistDefinition], extra: Iterable[ChecklistDefinition]
) -> list[ChecklistDefinition]:
    """Return base with extra applied: same (entity_type, key) replaces in place, new ones append."""
    merged = list(base)
    index = {(d.entity_type, d.key): i for i, d in enumerate(merged)}
    for definition in extra:
        slot = index.get((definition.entity_type, definition.key))
        if slot is None:
            index[(definition.entity_type, definition.key)] = len(merged)
            merged.append(definition)
        else:
            logger.info(
                "Checklist %s/%s replaced by configuration file",
                definition.entity_type,
                definition.key,
            )
            merged[slot] = definition
    return merged


def merge_workflows(
    base: Iterable[StatusWorkflow], extra: Iterable[StatusWorkflow]
) -> list[StatusWorkflow]:
    """Return base with extra applied: a workflow for the same entity type replaces the built-in one."""
    by_type = {w.entity_type: w for w in base}
    for workflow in extra:
        by_type[workflow.entity_type] = workflow
    return list(by_type.values())
