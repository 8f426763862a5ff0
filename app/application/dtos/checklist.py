"""DTOs for checklist completion and transition gate decisions.

Computed per request and discarded; never persisted.
"""

from dataclasses import dataclass, field

from app.domain.enums import MissingReason


@dataclass(frozen=True)
class MissingItem:
    """A required checklist item that does not count toward completion."""

    key: str
    label: str
    reason: MissingReason


@dataclass(frozen=True)
class CompletionResult:
    """Completion of one checklist for one entity."""

    checklist_key: str
    checklist_name: str
    is_complete: bool
    missing_items: tuple[MissingItem, ...]
    uploaded_count: int
    reviewed_count: int
    total_required: int
    percent_complete: int  # 0..100, rounded half up


@dataclass(frozen=True)
class TransitionDecision:
    """Advisory answer to 'may this entity move from_status → to_status?'."""

    from_status: str
    to_status: str
    allowed: bool
    reason: str | None
    checklist_results: tuple[CompletionResult, ...] = ()
    blocking_checklists: tuple[str, ...] = field(default=())
