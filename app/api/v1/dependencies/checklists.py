"""Checklist registry, evaluator and use case dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.services import (
    ChecklistCompletionEvaluator,
    ChecklistRegistry,
    TransitionGateEvaluator,
)
from app.application.use_cases import (
    ChangeEntityStatusUseCase,
    GetChecklistProgressUseCase,
    PreviewStatusChangeUseCase,
)
from app.core.config import get_settings
from app.domain.exceptions import ChecklistConfigurationException
from app.infrastructure.persistence.repositories import (
    DocumentRepository,
    EntityRepository,
)

from . import db


def get_checklist_registry(request: Request) -> ChecklistRegistry:
    """Registry built at startup (app.core.lifespan) and stored on app.state."""
    registry = getattr(request.app.state, "checklist_registry", None)
    if registry is None:
        raise ChecklistConfigurationException("Checklist registry is not initialized")
    return registry


def _gate_evaluator(
    document_repo: DocumentRepository, registry: ChecklistRegistry
) -> TransitionGateEvaluator:
    return TransitionGateEvaluator(
        ChecklistCompletionEvaluator(document_repo, registry.validators),
        report_all_failures=get_settings().checklist_gate_report_all_failures,
    )


async def get_completion_evaluator(
    document_repo: Annotated[DocumentRepository, Depends(db.get_document_repo)],
    registry: Annotated[ChecklistRegistry, Depends(get_checklist_registry)],
) -> ChecklistCompletionEvaluator:
    """Completion evaluator over the read session."""
    return ChecklistCompletionEvaluator(document_repo, registry.validators)


async def get_gate_evaluator(
    document_repo: Annotated[DocumentRepository, Depends(db.get_document_repo)],
    registry: Annotated[ChecklistRegistry, Depends(get_checklist_registry)],
) -> TransitionGateEvaluator:
    """Advisory gate evaluator over the read session."""
    return _gate_evaluator(document_repo, registry)


async def get_checklist_progress_use_case(
    entity_repo: Annotated[EntityRepository, Depends(db.get_entity_repo)],
    completion_evaluator: Annotated[
        ChecklistCompletionEvaluator, Depends(get_completion_evaluator)
    ],
    registry: Annotated[ChecklistRegistry, Depends(get_checklist_registry)],
) -> GetChecklistProgressUseCase:
    """Per-entity checklist progress use case."""
    return GetChecklistProgressUseCase(
        entity_repo=entity_repo,
        completion_evaluator=completion_evaluator,
        registry=registry,
    )


async def get_preview_status_change_use_case(
    entity_repo: Annotated[EntityRepository, Depends(db.get_entity_repo)],
    gate_evaluator: Annotated[TransitionGateEvaluator, Depends(get_gate_evaluator)],
    registry: Annotated[ChecklistRegistry, Depends(get_checklist_registry)],
) -> PreviewStatusChangeUseCase:
    """Advisory status change use case (no write)."""
    return PreviewStatusChangeUseCase(
        entity_repo=entity_repo,
        gate_evaluator=gate_evaluator,
        registry=registry,
    )


async def get_change_entity_status_use_case(
    entity_repo: Annotated[EntityRepository, Depends(db.get_entity_repo_for_write)],
    document_repo: Annotated[
        DocumentRepository, Depends(db.get_document_repo_for_write)
    ],
    registry: Annotated[ChecklistRegistry, Depends(get_checklist_registry)],
) -> ChangeEntityStatusUseCase:
    """Gated status change; every repository shares the request transaction."""
    return ChangeEntityStatusUseCase(
        entity_repo=entity_repo,
        gate_evaluator=_gate_evaluator(document_repo, registry),
        registry=registry,
    )
