from utils.constants import CURRENCY_SYMBOLS, DEFAULT_CURRENCY


def format_currency(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format a float as currency string, e.g. '$1,234.56' or 'US$5.00'."""
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        return f"{currency} {amount:.2f}"
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_totals_map(totals: dict[str, float]) -> str:
    """Join per-currency totals, e.g. '$120.00 · US$5.00'."""
    if not totals:
        return format_currency(0.0, DEFAULT_CURRENCY)
    return " · ".join(
        format_currency(value, currency)
        for currency, value in totals.items()
        if isinstance(value, (int, float)) and value == value
    )
