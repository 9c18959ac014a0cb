APP_NAME = "Bill Tracker"
DB_FILE = "bills.db"
CHART_FILE = "weekly_summary.png"
DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

CURRENCIES = ("CAD", "USD", "EUR")
DEFAULT_CURRENCY = "CAD"

CURRENCY_SYMBOLS = {
    "CAD": "$",
    "USD": "US$",
    "EUR": "€",
}

# Hard cap on stepping iterations per phase of a single occurrence query
MAX_RECURRENCE_STEPS = 500
NEXT_DUE_LOOKAHEAD_DAYS = 365
# Wider than the whole date range; a larger custom interval never repeats
MAX_INTERVAL_DAYS = 3_652_059
UPCOMING_REMINDER_DAYS = 7
NEXT_WEEK_DAYS = 7
NEXT_MONTH_DAYS = 30
FORECAST_MONTHS = 12

UNCATEGORIZED = "Uncategorized"

SEVERITY_ORDER = {"error": 0, "warning": 1, "info": 2}
