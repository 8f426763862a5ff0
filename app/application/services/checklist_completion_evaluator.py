"""Computes checklist completion for one entity (implements ICompletionEvaluator)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, assert_never

from app.application.dtos.checklist import CompletionResult, MissingItem
from app.application.services.checklist_registry import get_required_document_types
from app.application.services.item_validators import (
    DEFAULT_ITEM_VALIDATORS,
    ItemValidator,
    non_empty,
)
from app.domain.entities import (
    ChecklistDefinition,
    ChecklistItem,
    DataItem,
    FileItem,
    ModalItem,
)
from app.domain.enums import MissingReason
from app.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from app.application.dtos.document import StoredDocument
    from app.application.interfaces.repositories import IDocumentRepository

logger = logging.getLogger(__name__)


def percent_rounded(part: int, total: int) -> int:
    """Return part/total as a whole percent, rounding halves up (100 when total is 0)."""
    if total <= 0:
        return 100
    return (part * 200 + total) // (total * 2)


def _latest_by_type(documents: list[StoredDocument]) -> dict[str, StoredDocument]:
    """Keep the highest version per document_type; on equal versions the first row wins."""
    latest: dict[str, StoredDocument] = {}
    for doc in documents:
        current = latest.get(doc.document_type)
        if current is None or doc.version > current.version:
            latest[doc.document_type] = doc
    return latest


def _label(definition: ChecklistDefinition, item: ChecklistItem, key: str) -> str:
    if item.label:
        return item.label
    logger.warning(
        "Checklist '%s' has no label for '%s'; using the key", definition.key, key
    )
    return key


class ChecklistCompletionEvaluator:
    """Evaluates required items against stored documents and entity attributes."""

    def __init__(
        self,
        document_repo: IDocumentRepository,
        validators: Mapping[str, ItemValidator] = DEFAULT_ITEM_VALIDATORS,
    ) -> None:
        self._document_repo = document_repo
        self._validators = validators

    @traced("checklist.evaluate_completion")
    async def evaluate(
        self,
        entity_id: str,
        entity_type: str,
        definition: ChecklistDefinition,
        *,
        attributes: Mapping[str, Any] | None = None,
    ) -> CompletionResult:
        """Return completion of definition for the entity.

        A checklist with no required items is complete without reading storage.
        Document store errors propagate unchanged.

        Args:
            entity_id: Entity id.
            entity_type: Entity type (e.g. 'employees').
            definition: Checklist to evaluate.
            attributes: Entity data fields for data/modal items (None means empty).

        Returns:
            CompletionResult with missing items in checklist order.
        """
        required = definition.required_items()
        if not required:
            return CompletionResult(
                checklist_key=definition.key,
                checklist_name=definition.name,
                is_complete=True,
                missing_items=(),
                uploaded_count=0,
                reviewed_count=0,
                total_required=0,
                percent_complete=100,
            )

        attrs = attributes or {}
        required_types = get_required_document_types(definition)
        latest: dict[str, StoredDocument] = {}
        if required_types:
            documents = await self._document_repo.list_for_entity(
                entity_type, entity_id, required_types
            )
            latest = _latest_by_type(documents)

        missing: list[MissingItem] = []
        satisfied = 0
        for item in required:
            reason = self._missing_reason(item, latest, attrs)
            if reason is None:
                satisfied += 1
            else:
                key = item.document_type if isinstance(item, FileItem) else item.key
                missing.append(MissingItem(key=key, label=_label(definition, item, key), reason=reason))

        uploaded = sum(1 for t in required_types if t in latest)
        result = CompletionResult(
            checklist_key=definition.key,
            checklist_name=definition.name,
            is_complete=not missing,
            missing_items=tuple(missing),
            uploaded_count=uploaded,
            reviewed_count=satisfied,
            total_required=len(required),
            percent_complete=percent_rounded(satisfied, len(required)),
        )
        logger.debug(
            "Checklist %s/%s for %s: %d/%d satisfied",
            entity_type,
            definition.key,
            entity_id,
            satisfied,
            len(required),
        )
        return result

    def _missing_reason(
        self,
        item: FileItem | DataItem | ModalItem,
        latest: Mapping[str, StoredDocument],
        attributes: Mapping[str, Any],
    ) -> MissingReason | None:
        """Return why the required item is not satisfied, or None when it is."""
        match item:
            case FileItem():
                doc = latest.get(item.document_type)
                if doc is None:
                    return MissingReason.NOT_UPLOADED
                if item.reviewable and not doc.was_reviewed:
                    return MissingReason.NOT_REVIEWED
                return None
            case DataItem():
                return None if non_empty(attributes.get(item.key)) else MissingReason.NOT_FILLED
            case ModalItem():
                validator = self._validators.get(item.validator)
                if validator is not None and validator(attributes.get(item.key)):
                    return None
                return MissingReason.VALIDATION_FAILED
            case _:
                assert_never(item)
