"""Expand bills and incomes into the dates they fall due.

Every function here is pure: entries are read, never mutated, and the
reference date is always passed in. Results are lists of 'YYYY-MM-DD' keys in
ascending order.
"""
from datetime import date, datetime, timedelta

from models.bill import Bill
from models.income import Income
from models.recurrence import Recurrence, advance, fixed_step_days, income_rule
from utils.constants import MAX_RECURRENCE_STEPS, NEXT_DUE_LOOKAHEAD_DAYS
from utils.date_helpers import (
    add_days, add_months, month_bounds, months_between,
    normalize, parse_date, to_key,
)

Entry = Bill | Income


def occurrences_in_range(
    entry: Entry, range_start: date | datetime, range_end: date | datetime
) -> list[str]:
    """Date keys of every occurrence within [range_start, range_end], inclusive."""
    if isinstance(entry, Bill) and not entry.active:
        return []
    if isinstance(entry, Bill):
        anchor_str, rule = entry.first_due_date, entry.recurrence
    else:
        anchor_str, rule = entry.date, income_rule(entry.recurrence)

    anchor = parse_date(anchor_str)
    if anchor is None:
        return []
    return _expand(anchor, rule, normalize(range_start), normalize(range_end))


def occurrences_in_month(entry: Entry, month_date: date | datetime) -> list[str]:
    start, end = month_bounds(month_date)
    return occurrences_in_range(entry, start, end)


def next_due(entry: Entry, from_date: date | datetime) -> str | None:
    """First occurrence on or after from_date, looking one year ahead."""
    start = normalize(from_date)
    end = min(date.max - start, timedelta(days=NEXT_DUE_LOOKAHEAD_DAYS))
    found = occurrences_in_range(entry, start, start + end)
    return found[0] if found else None


def is_overdue(date_key: str, reference: date | datetime) -> bool:
    d = parse_date(date_key)
    if d is None:
        return False
    return d < normalize(reference)


def _expand(anchor: date, rule: Recurrence | None, start: date, end: date) -> list[str]:
    if anchor > end:
        return []

    # One-time entries never step
    if rule is None:
        return [to_key(anchor)] if start <= anchor <= end else []

    occurrences = []
    current = _rewind_to_start(anchor, start, rule)
    guard = 0
    while current is not None and current <= end and guard < MAX_RECURRENCE_STEPS:
        if current >= start:
            occurrences.append(to_key(current))
        current = _step(current, rule)
        if current is None:
            break
        guard += 1
    return occurrences


def _rewind_to_start(anchor: date, start: date, rule: Recurrence) -> date | None:
    """Move from the anchor to the first occurrence on or after start.

    None when the series cannot reach start before date.max.
    """
    current = anchor
    if current >= start:
        return current

    step = fixed_step_days(rule)
    if step > 0:
        steps = (start - anchor).days // step
        if steps > 0:
            current = add_days(anchor, steps * step)
    elif anchor.day <= 28:
        # No month is shorter than 28 days, so the day never clamps and
        # k single steps equal one jump of k * step_months.
        steps = months_between(anchor, start) // rule.step_months
        if steps > 0:
            current = add_months(anchor, steps * rule.step_months)

    guard = 0
    while current < start and guard < MAX_RECURRENCE_STEPS:
        current = _step(current, rule)
        if current is None:
            return None
        guard += 1
    return current


def _step(current: date, rule: Recurrence) -> date | None:
    """Successor of current, or None once the series runs past date.max."""
    try:
        return advance(current, rule)
    except (OverflowError, ValueError):
        return None
