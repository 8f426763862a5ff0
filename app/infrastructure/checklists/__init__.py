"""Checklist configuration loading (JSON file → domain entities)."""

from app.infrastructure.checklists.loader import (
    load_checklist_config,
    merge_definitions,
    merge_workflows,
    parse_checklist_config,
)

__all__ = [
    "load_checklist_config",
    "merge_definitions",
    "merge_workflows",
    "parse_checklist_config",
]
