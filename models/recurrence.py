"""Recurrence rules for bills and the simpler income cadence.

A bill rule is one of six frozen dataclasses. Fixed-step variants advance by a
constant number of days; calendar variants advance by whole months with the day
clamped to the target month's last day.
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import ClassVar, Optional, Union

from utils.date_helpers import add_days, add_months


@dataclass(frozen=True)
class Weekly:
    tag: ClassVar[str] = "WEEKLY"
    step_days: ClassVar[int] = 7
    step_months: ClassVar[int] = 0


@dataclass(frozen=True)
class Every30Days:
    tag: ClassVar[str] = "EVERY_30_DAYS"
    step_days: ClassVar[int] = 30
    step_months: ClassVar[int] = 0


@dataclass(frozen=True)
class Monthly:
    tag: ClassVar[str] = "MONTHLY"
    step_days: ClassVar[int] = 0
    step_months: ClassVar[int] = 1


@dataclass(frozen=True)
class Quarterly:
    tag: ClassVar[str] = "QUARTERLY"
    step_days: ClassVar[int] = 0
    step_months: ClassVar[int] = 3


@dataclass(frozen=True)
class Annually:
    tag: ClassVar[str] = "ANNUALLY"
    step_days: ClassVar[int] = 0
    step_months: ClassVar[int] = 12


@dataclass(frozen=True)
class CustomDays:
    interval_days: int = 1
    tag: ClassVar[str] = "CUSTOM_DAYS"
    step_months: ClassVar[int] = 0

    def __post_init__(self):
        # Zero, negative or fractional intervals collapse to a whole day >= 1
        try:
            interval = int(self.interval_days)
        except (TypeError, ValueError, OverflowError):
            interval = 1
        object.__setattr__(self, "interval_days", max(1, interval))

    @property
    def step_days(self) -> int:
        return self.interval_days


Recurrence = Union[Weekly, Every30Days, Monthly, Quarterly, Annually, CustomDays]

_RULES_BY_TAG = {
    cls.tag: cls for cls in (Weekly, Every30Days, Monthly, Quarterly, Annually, CustomDays)
}


class IncomeRecurrence(str, Enum):
    ONE_TIME = "ONE_TIME"
    BIWEEKLY = "BIWEEKLY"
    MONTHLY = "MONTHLY"


def fixed_step_days(rule: Recurrence) -> int:
    """Day count of a fixed-step rule, 0 for calendar-month rules."""
    return rule.step_days


def advance(d: date, rule: Recurrence) -> date:
    """Single-step successor of d under rule."""
    if rule.step_months:
        return add_months(d, rule.step_months)
    return add_days(d, rule.step_days)


def recurrence_from_tag(tag: str, interval_days: Optional[int] = None) -> Optional[Recurrence]:
    """Rebuild a rule from its persisted tag; None when the tag is unknown."""
    if not isinstance(tag, str):
        return None
    cls = _RULES_BY_TAG.get(tag.strip().upper())
    if cls is None:
        return None
    if cls is CustomDays:
        return CustomDays(interval_days if interval_days is not None else 1)
    return cls()


def to_record(rule: Recurrence) -> dict:
    record = {"type": rule.tag}
    if isinstance(rule, CustomDays):
        record["intervalDays"] = rule.interval_days
    return record


def income_recurrence_from_tag(tag) -> IncomeRecurrence:
    """Unknown or missing income tags fall back to ONE_TIME."""
    if isinstance(tag, str):
        try:
            return IncomeRecurrence(tag.strip().upper())
        except ValueError:
            pass
    return IncomeRecurrence.ONE_TIME


def income_rule(recurrence: IncomeRecurrence) -> Optional[Recurrence]:
    """Equivalent bill rule for an income cadence; None for ONE_TIME."""
    if recurrence == IncomeRecurrence.BIWEEKLY:
        return CustomDays(14)
    if recurrence == IncomeRecurrence.MONTHLY:
        return Monthly()
    return None
