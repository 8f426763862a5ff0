"""Service interfaces (ports) for the application layer.

Protocols for checklist completion and transition gate evaluation. Use cases
depend on these, not on concrete evaluators (DIP).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.checklist import CompletionResult, TransitionDecision
    from app.domain.entities import ChecklistDefinition


class ICompletionEvaluator(Protocol):
    """Computes completion of one checklist for one entity."""

    async def evaluate(
        self,
        entity_id: str,
        entity_type: str,
        definition: ChecklistDefinition,
        *,
        attributes: Mapping[str, Any] | None = None,
    ) -> CompletionResult:
        """Return completion (missing items, counts, percent) for the checklist."""


class ITransitionGateEvaluator(Protocol):
    """Decides whether gating checklists allow a status transition."""

    async def evaluate(
        self,
        from_status: str,
        to_status: str,
        entity_id: str,
        entity_type: str,
        definitions: Sequence[ChecklistDefinition],
        *,
        attributes: Mapping[str, Any] | None = None,
    ) -> TransitionDecision:
        """Return an advisory decision; never writes."""
