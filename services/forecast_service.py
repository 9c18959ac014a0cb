from datetime import date
from services.bill_service import BillService
from services.income_service import IncomeService
from services.summary_service import totals_in_month
from utils.constants import FORECAST_MONTHS
from utils.date_helpers import add_months, format_month


class ForecastService:
    def __init__(self, bill_service: BillService, income_service: IncomeService):
        self._bill_svc = bill_service
        self._income_svc = income_service

    def get_monthly_forecast(self, reference: date, months: int = FORECAST_MONTHS) -> list[dict]:
        """
        [{month:'YYYY-MM', income:{cur: amt}, expense:{cur: amt}, net:{cur: amt}}]
        from the reference month forward, one row per month.
        """
        bills = self._bill_svc.get_active()
        incomes = self._income_svc.get_all()
        first = reference.replace(day=1)

        result = []
        for offset in range(months):
            month_start = add_months(first, offset)
            income = totals_in_month(incomes, month_start)
            expense = totals_in_month(bills, month_start)
            net = {
                currency: round(income.get(currency, 0.0) - expense.get(currency, 0.0), 2)
                for currency in sorted(set(income) | set(expense))
            }
            result.append({
                "month": format_month(month_start),
                "income": income,
                "expense": expense,
                "net": net,
            })
        return result

    def get_totals(self, forecast: list[dict]) -> dict[str, float]:
        """Sum of the net column across every forecast month, per currency."""
        totals: dict[str, float] = {}
        for row in forecast:
            for currency, amount in row["net"].items():
                totals[currency] = round(totals.get(currency, 0.0) + amount, 2)
        return totals
