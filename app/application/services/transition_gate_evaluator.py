"""Decides whether checklist gates allow a status transition (implements ITransitionGateEvaluator)."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from app.application.dtos.checklist import CompletionResult, TransitionDecision
from app.domain.value_objects import TransitionKey
from app.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from app.application.interfaces.services import ICompletionEvaluator
    from app.domain.entities import ChecklistDefinition

logger = logging.getLogger(__name__)


def _blocked_reason(names: list[str]) -> str:
    """Human-readable reason naming the incomplete checklist(s)."""
    return (
        f"{', '.join(names)} must be 100% complete "
        "(all required documents uploaded and reviewed)"
    )


class TransitionGateEvaluator:
    """Evaluates gating checklists for a (from_status, to_status) pair.

    By default stops at the first incomplete gating checklist (definition
    order). With report_all_failures=True every gating checklist is evaluated
    and the reason names all incomplete ones.
    """

    def __init__(
        self,
        completion_evaluator: ICompletionEvaluator,
        *,
        report_all_failures: bool = False,
    ) -> None:
        self._completion_evaluator = completion_evaluator
        self._report_all_failures = report_all_failures

    @traced("checklist.evaluate_transition")
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
        """Return whether the transition is allowed by its gating checklists.

        Transitions no checklist gates are always allowed. Completion results of
        every evaluated checklist are returned, including complete ones.
        """
        transition = TransitionKey(from_status, to_status)
        results: list[CompletionResult] = []
        blocking: list[CompletionResult] = []

        for definition in definitions:
            if not definition.gates_transition(transition):
                continue
            result = await self._completion_evaluator.evaluate(
                entity_id, entity_type, definition, attributes=attributes
            )
            results.append(result)
            if not result.is_complete:
                blocking.append(result)
                if not self._report_all_failures:
                    break

        add_span_attributes(
            transition=str(transition),
            gating_checklists=len(results),
            blocked=bool(blocking),
        )
        if blocking:
            logger.info(
                "Transition %s blocked for %s %s by %s",
                transition,
                entity_type,
                entity_id,
                ", ".join(r.checklist_key for r in blocking),
            )
            return TransitionDecision(
                from_status=from_status,
                to_status=to_status,
                allowed=False,
                reason=_blocked_reason([r.checklist_name for r in blocking]),
                checklist_results=tuple(results),
                blocking_checklists=tuple(r.checklist_key for r in blocking),
            )

        logger.debug(
            "Transition %s allowed for %s %s (%d gating checklists)",
            transition,
            entity_type,
            entity_id,
            len(results),
        )
        return TransitionDecision(
            from_status=from_status,
            to_status=to_status,
            allowed=True,
            reason=None,
            checklist_results=tuple(results),
        )
