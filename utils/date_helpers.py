from datetime import date, datetime, timedelta
import calendar
from utils.constants import DATE_FORMAT, MONTH_FORMAT


def today() -> date:
    return date.today()


def normalize(value: date | datetime) -> date:
    """Strip the time of day, leaving a plain calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def to_key(d: date | datetime) -> str:
    d = normalize(d)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def from_key(key: str) -> date | None:
    """Parse a YYYY-MM-DD key, returning None on malformed input."""
    if not isinstance(key, str):
        return None
    parts = key.strip().split("-")
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(date_str: str) -> date | None:
    """Tolerant anchor parse: missing month or day default to 1.

    '2024-06' parses as 2024-06-01. Returns None when the year is missing or any
    component is not a number or is out of range.
    """
    if not isinstance(date_str, str) or not date_str.strip():
        return None
    parts = date_str.strip().split("-")
    if len(parts) > 3 or not parts[0]:
        return None
    try:
        values = [int(p) for p in parts]
    except ValueError:
        return None
    values += [1] * (3 - len(values))
    try:
        return date(*values)
    except ValueError:
        return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_month(d: date) -> str:
    return d.strftime(MONTH_FORMAT)


def add_days(d: date, n: int) -> date:
    return normalize(d) + timedelta(days=n)


def clamp_day_to_month(year: int, month: int, day: int) -> int:
    """Clamp day to valid range for the given year/month."""
    max_day = calendar.monthrange(year, month)[1]
    return min(day, max_day)


def add_months(d: date, n: int) -> date:
    """Add n months to date d (n may be negative), clamping day to month end."""
    d = normalize(d)
    month = d.month - 1 + n
    year = d.year + month // 12
    month = month % 12 + 1
    day = clamp_day_to_month(year, month, d.day)
    return date(year, month, day)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start's month to end's month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def month_bounds(d: date | datetime) -> tuple[date, date]:
    """Return (first_day, last_day) of the month containing d."""
    d = normalize(d)
    last_day = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=1), d.replace(day=last_day)


def days_in_month(d: date) -> int:
    return calendar.monthrange(d.year, d.month)[1]


def friendly_month(d: date) -> str:
    """Convert a date to e.g. 'February 2026'."""
    return d.strftime("%B %Y")
