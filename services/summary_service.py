"""Totals, per-day grouping and overdue detection built on occurrence lists."""
import math
from dataclasses import dataclass, field
from datetime import date

from models.bill import Bill
from models.income import Income
from services.occurrences import (
    Entry, is_overdue, occurrences_in_month, occurrences_in_range,
)
from utils.constants import UNCATEGORIZED
from utils.date_helpers import days_in_month, from_key, month_bounds


@dataclass
class DayItems:
    bills: list[Bill] = field(default_factory=list)
    incomes: list[Income] = field(default_factory=list)


def accumulate_totals(totals: dict[str, float], currency: str, amount: float, occurrences: int):
    totals[currency] = round(totals.get(currency, 0.0) + amount * occurrences, 2)


def totals_in_range(entries: list[Entry], start: date, end: date) -> dict[str, float]:
    """Per-currency sum of amount x occurrence count within [start, end]."""
    totals: dict[str, float] = {}
    for entry in entries:
        count = len(occurrences_in_range(entry, start, end))
        if count:
            accumulate_totals(totals, entry.currency, entry.amount, count)
    return totals


def totals_in_month(entries: list[Entry], month_date: date) -> dict[str, float]:
    start, end = month_bounds(month_date)
    return totals_in_range(entries, start, end)


def group_by_day(
    bills: list[Bill], incomes: list[Income], start: date, end: date
) -> dict[str, DayItems]:
    """Bucket every occurrence in [start, end] under its date key."""
    groups: dict[str, DayItems] = {}
    for bill in bills:
        for key in occurrences_in_range(bill, start, end):
            groups.setdefault(key, DayItems()).bills.append(bill)
    for income in incomes:
        for key in occurrences_in_range(income, start, end):
            groups.setdefault(key, DayItems()).incomes.append(income)
    return dict(sorted(groups.items()))


def day_counts(groups: dict[str, DayItems]) -> dict[str, tuple[int, int]]:
    return {key: (len(items.bills), len(items.incomes)) for key, items in groups.items()}


def overdue_dates(groups: dict[str, DayItems], reference: date) -> set[str]:
    """Keys holding at least one bill that fell due before the reference date."""
    return {key for key, items in groups.items() if items.bills and is_overdue(key, reference)}


def bills_due_on(bills: list[Bill], day: date) -> list[Bill]:
    return [b for b in bills if occurrences_in_range(b, day, day)]


def weekly_points(bills: list[Bill], month_date: date) -> list[tuple[str, float]]:
    """Bill totals per week of the month: W1 covers days 1-7, the last week absorbs the tail."""
    weeks = math.ceil(days_in_month(month_date) / 7)
    totals = [0.0] * weeks
    for bill in bills:
        for key in occurrences_in_month(bill, month_date):
            d = from_key(key)
            if d is None:
                continue
            index = min(weeks - 1, (d.day - 1) // 7)
            totals[index] += bill.amount
    return [(f"W{i + 1}", round(total, 2)) for i, total in enumerate(totals)]


def totals_by_frequency(bills: list[Bill], month_date: date) -> dict[str, dict[str, float]]:
    """{recurrence tag: {currency: total}} for bills due in the month."""
    result: dict[str, dict[str, float]] = {}
    for bill in bills:
        count = len(occurrences_in_month(bill, month_date))
        if not count:
            continue
        totals = result.setdefault(bill.recurrence.tag, {})
        accumulate_totals(totals, bill.currency, bill.amount, count)
    return result


def income_totals_by_category(
    incomes: list[Income], month_date: date
) -> list[tuple[str, dict[str, float]]]:
    by_category: dict[str, dict[str, float]] = {}
    for income in incomes:
        count = len(occurrences_in_month(income, month_date))
        if not count:
            continue
        totals = by_category.setdefault(income.category or "", {})
        accumulate_totals(totals, income.currency, income.amount, count)
    return sorted(by_category.items(), key=lambda item: item[0] or UNCATEGORIZED)


def net_by_currency(
    income_totals: dict[str, float], bill_totals: dict[str, float]
) -> list[dict]:
    """[{currency, income, expenses, net}] sorted by currency, all-zero rows dropped."""
    rows = []
    for currency in sorted(set(income_totals) | set(bill_totals)):
        income = income_totals.get(currency, 0.0)
        expenses = bill_totals.get(currency, 0.0)
        net = round(income - expenses, 2)
        if income or expenses or net:
            rows.append({"currency": currency, "income": income, "expenses": expenses, "net": net})
    return rows


def matches_query(entry: Entry, query: str) -> bool:
    """Case-insensitive search over name, notes and category or source."""
    query = query.strip().lower()
    if not query:
        return True
    extra = entry.source if isinstance(entry, Income) else entry.category
    haystack = " ".join(part for part in (entry.name, entry.notes, extra) if part)
    return query in haystack.lower()
