"""Turn untrusted records (database rows, imported JSON) into typed entries.

Records use the persisted camelCase shape:

    bill:   {"id", "name", "amount", "currency", "firstDueDate",
             "recurrence": {"type": "MONTHLY", "intervalDays": 10},
             "active", "notes", "category"}
    income: {"id", "name", "amount", "currency", "date",
             "recurrence": "BIWEEKLY", "notes", "category", "source"}
"""
import math
from typing import Any, Mapping

from models.bill import Bill
from models.income import Income
from models.recurrence import income_recurrence_from_tag, recurrence_from_tag, to_record
from utils.constants import CURRENCIES, MAX_INTERVAL_DAYS


class InvalidRecordError(ValueError):
    """Raised when a record cannot be turned into a valid entry."""


def _require_text(record: Mapping, key: str, kind: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecordError(f"Invalid {kind} entry: '{key}' must be a non-empty string.")
    return value


def _require_amount(record: Mapping, kind: str) -> float:
    value = record.get("amount")
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRecordError(f"Invalid {kind} entry: 'amount' must be a number.")
    try:
        amount = float(value)
    except OverflowError:
        raise InvalidRecordError(f"Invalid {kind} entry: 'amount' is out of range.") from None
    if not math.isfinite(amount) or amount < 0:
        raise InvalidRecordError(f"Invalid {kind} entry: 'amount' must be finite and non-negative.")
    return round(amount, 2)


def _require_currency(record: Mapping, kind: str) -> str:
    value = record.get("currency")
    if value not in CURRENCIES:
        raise InvalidRecordError(
            f"Invalid {kind} entry: 'currency' must be one of {', '.join(CURRENCIES)}."
        )
    return value


def _optional_text(record: Mapping, key: str):
    value = record.get(key)
    return value if isinstance(value, str) else None


def normalize_bill(record: Any) -> Bill:
    if not isinstance(record, Mapping):
        raise InvalidRecordError("Invalid bill entry: expected an object.")

    recurrence_raw = record.get("recurrence")
    if not isinstance(recurrence_raw, Mapping):
        raise InvalidRecordError("Invalid bill entry: 'recurrence' must be an object.")
    interval = recurrence_raw.get("intervalDays")
    if isinstance(interval, bool) or not isinstance(interval, (int, float)):
        interval = None
    elif isinstance(interval, float) and not math.isfinite(interval):
        interval = None
    elif interval > MAX_INTERVAL_DAYS:
        raise InvalidRecordError(
            f"Invalid bill entry: 'intervalDays' must be at most {MAX_INTERVAL_DAYS}."
        )
    recurrence = recurrence_from_tag(recurrence_raw.get("type"), interval)
    if recurrence is None:
        raise InvalidRecordError(
            f"Invalid bill entry: unknown recurrence {recurrence_raw.get('type')!r}."
        )

    active = record.get("active")
    return Bill(
        id=_require_text(record, "id", "bill"),
        name=_require_text(record, "name", "bill"),
        amount=_require_amount(record, "bill"),
        currency=_require_currency(record, "bill"),
        first_due_date=_require_text(record, "firstDueDate", "bill"),
        recurrence=recurrence,
        active=active if isinstance(active, bool) else True,
        notes=_optional_text(record, "notes"),
        category=_optional_text(record, "category"),
    )


def normalize_income(record: Any) -> Income:
    if not isinstance(record, Mapping):
        raise InvalidRecordError("Invalid income entry: expected an object.")

    return Income(
        id=_require_text(record, "id", "income"),
        name=_require_text(record, "name", "income"),
        amount=_require_amount(record, "income"),
        currency=_require_currency(record, "income"),
        date=_require_text(record, "date", "income"),
        recurrence=income_recurrence_from_tag(record.get("recurrence")),
        notes=_optional_text(record, "notes"),
        category=_optional_text(record, "category"),
        source=_optional_text(record, "source"),
    )


def bill_to_record(bill: Bill) -> dict:
    record = {
        "id": bill.id,
        "name": bill.name,
        "amount": bill.amount,
        "currency": bill.currency,
        "firstDueDate": bill.first_due_date,
        "recurrence": to_record(bill.recurrence),
        "active": bill.active,
    }
    for key in ("notes", "category"):
        value = getattr(bill, key)
        if value is not None:
            record[key] = value
    return record


def income_to_record(income: Income) -> dict:
    record = {
        "id": income.id,
        "name": income.name,
        "amount": income.amount,
        "currency": income.currency,
        "date": income.date,
        "recurrence": income.recurrence.value,
    }
    for key in ("notes", "category", "source"):
        value = getattr(income, key)
        if value is not None:
            record[key] = value
    return record
