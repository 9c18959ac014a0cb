import logging
import os
import sys

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.bill_dao import BillDAO
from database.income_dao import IncomeDAO

from services.bill_service import BillService
from services.income_service import IncomeService
from services.data_service import DataService
from services.reminder_service import ReminderService
from services.forecast_service import ForecastService
from services.summary_service import net_by_currency, totals_in_month, totals_in_range, weekly_points
from services.chart_service import save_weekly_chart

from utils.app_config import configure_logging, get_data_folder
from utils.constants import APP_NAME, CHART_FILE, NEXT_MONTH_DAYS, NEXT_WEEK_DAYS
from utils.currency import format_totals_map
from utils.date_helpers import add_days, friendly_month, today

logger = logging.getLogger(__name__)


def main():
    configure_logging()
    logger.info(f"Starting {APP_NAME}")
    ref = today()

    # ── Bootstrap: read data folder from pre-DB config ────────────────────────
    data_folder = get_data_folder()

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.open(data_folder=data_folder)
    bill_dao = BillDAO(db)
    income_dao = IncomeDAO(db)

    # ── Services ─────────────────────────────────────────────────────────────
    bill_svc = BillService(bill_dao)
    income_svc = IncomeService(income_dao)
    data_svc = DataService(db, bill_dao, income_dao)
    reminder_svc = ReminderService(bill_svc)
    forecast_svc = ForecastService(bill_svc, income_svc)

    try:
        data_svc.seed_demo_data_once(ref)

        bills = bill_svc.get_active()
        incomes = income_svc.get_all()

        # ── Summary for the current month ────────────────────────────────────
        bill_totals = totals_in_month(bills, ref)
        income_totals = totals_in_month(incomes, ref)
        logger.info(f"{friendly_month(ref)} bills: {format_totals_map(bill_totals)}")
        logger.info(f"{friendly_month(ref)} income: {format_totals_map(income_totals)}")
        for row in net_by_currency(income_totals, bill_totals):
            logger.info(f"Net {row['currency']}: {row['net']:,.2f}")
        logger.info(
            "Next 7 days: "
            + format_totals_map(totals_in_range(bills, ref, add_days(ref, NEXT_WEEK_DAYS - 1)))
        )
        logger.info(
            "Next 30 days: "
            + format_totals_map(totals_in_range(bills, ref, add_days(ref, NEXT_MONTH_DAYS - 1)))
        )

        for reminder in reminder_svc.get_reminders(ref):
            logger.info(f"[{reminder.severity}] {reminder.title}: {reminder.detail}")

        forecast = forecast_svc.get_monthly_forecast(ref)
        logger.info(f"12-month net: {format_totals_map(forecast_svc.get_totals(forecast))}")

        chart_path = os.path.join(data_folder, CHART_FILE) if data_folder else CHART_FILE
        save_weekly_chart(weekly_points(bills, ref), chart_path, title=friendly_month(ref))
    finally:
        db.close()


if __name__ == "__main__":
    main()
