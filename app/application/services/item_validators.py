"""Named validators for modal checklist items.

A modal item stores the validator name; the registry checks names at load
time and the completion evaluator calls the function with the entity
attribute value. Validators return True when the item is satisfied.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime, timedelta
from types import MappingProxyType
from typing import Any

from app.shared.utils import utc_now

logger = logging.getLogger(__name__)

ItemValidator = Callable[[Any], bool]


def _parse_date(value: Any) -> date:
    """Return a date from a date, datetime or ISO string. Raises ValueError otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    raise ValueError(f"Not a date: {value!r}")


def _is_deleted(entry: Mapping[str, Any]) -> bool:
    return bool(entry.get("delete") or entry.get("is_deleted") or entry.get("deleted_at"))


def find_activity_gaps(
    history: list[Mapping[str, Any]],
    years: int,
    *,
    now: date | None = None,
) -> list[tuple[date, date]]:
    """Return uncovered periods within the last `years` years.

    Each history entry has start_date, end_date and optional till_now (ongoing).
    Deleted entries are ignored. Gaps of one day or less between entries are
    tolerated, also at the trailing edge; a history ending earlier than
    yesterday leaves a trailing gap.

    Args:
        history: Activity history entries (employment, school, unemployment...).
        years: Look-back period in years (365-day years).
        now: Reference day; defaults to today (UTC).

    Returns:
        List of (gap_start, gap_end) pairs, oldest first.

    Raises:
        ValueError: If an entry is not a mapping or has a missing or malformed date.
    """
    today = now or utc_now().date()
    window_start = today - timedelta(days=years * 365)

    periods: list[tuple[date, date]] = []
    for entry in history:
        if not isinstance(entry, Mapping):
            raise ValueError(f"Activity entry must be an object, got: {entry!r}")
        if _is_deleted(entry):
            continue
        start = _parse_date(entry.get("start_date"))
        end = today if entry.get("till_now") else _parse_date(entry.get("end_date"))
        if start >= window_start or end > window_start:
            periods.append((start, end))
    periods.sort(key=lambda p: p[0])

    gaps: list[tuple[date, date]] = []
    last_end = window_start
    for start, end in periods:
        if start > last_end + timedelta(days=1):
            gaps.append((last_end, start))
        if end > last_end:
            last_end = end
    if last_end + timedelta(days=1) < today:
        gaps.append((last_end, today))
    return gaps


def activity_period_covered(years: int) -> ItemValidator:
    """Build a validator accepting an activity history with no gaps in the last `years` years."""

    def validate(value: Any) -> bool:
        if not isinstance(value, list) or not value:
            return False
        try:
            gaps = find_activity_gaps(value, years)
        except ValueError as e:
            logger.debug("Activity history rejected: %s", e)
            return False
        return not gaps

    return validate


def non_empty(value: Any) -> bool:
    """Return True when value is present and not an empty string or collection."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True


DEFAULT_ITEM_VALIDATORS: Mapping[str, ItemValidator] = MappingProxyType(
    {
        "activity_period_10y": activity_period_covered(10),
        "activity_period_3y": activity_period_covered(3),
        "non_empty": non_empty,
    }
)
