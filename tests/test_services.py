from dataclasses import replace
from datetime import date

import pytest

from conftest import make_bill, make_income
from models.recurrence import CustomDays, IncomeRecurrence, Monthly, Weekly
from services.forecast_service import ForecastService
from services.occurrences import occurrences_in_month
from services.reminder_service import ReminderService


class TestBillService:
    def test_create_assigns_unique_ids(self, bill_service):
        a = bill_service.create("Rent", 1500, "CAD", "2024-01-01")
        b = bill_service.create("Rent", 1500, "CAD", "2024-01-01")
        assert a.id != b.id
        assert a.recurrence == Monthly()
        assert a.active is True

    def test_create_rounds_amount_and_strips_name(self, bill_service):
        bill = bill_service.create("  Phone ", 45.678, "USD", "2024-02-03", Weekly())
        assert bill.name == "Phone"
        assert bill.amount == 45.68

    def test_create_coerces_custom_interval(self, bill_service):
        bill = bill_service.create("Pool", 5, "EUR", "2024-02-03", CustomDays(0))
        assert bill_service.get_by_id(bill.id).recurrence == CustomDays(1)

    @pytest.mark.parametrize("args", [
        ("", 10, "CAD", "2024-01-01"),
        ("Rent", -1, "CAD", "2024-01-01"),
        ("Rent", 10, "GBP", "2024-01-01"),
        ("Rent", 10, "CAD", "soon"),
    ])
    def test_create_rejects_invalid(self, bill_service, args):
        with pytest.raises(ValueError):
            bill_service.create(*args)

    def test_update_replaces_series(self, bill_service):
        bill = bill_service.create("Rent", 1500, "CAD", "2024-01-31")
        updated = bill_service.update(replace(bill, first_due_date="2024-01-15", recurrence=Weekly()))
        assert occurrences_in_month(updated, date(2024, 1, 1)) == [
            "2024-01-15", "2024-01-22", "2024-01-29",
        ]

    def test_update_unknown_bill(self, bill_service):
        with pytest.raises(ValueError):
            bill_service.update(make_bill(id="missing"))

    def test_set_active_and_delete(self, bill_service):
        bill = bill_service.create("Rent", 1500, "CAD", "2024-01-01")
        bill_service.set_active(bill.id, False)
        assert bill_service.get_active() == []
        assert bill_service.get_by_id(bill.id).active is False
        bill_service.delete(bill.id)
        assert bill_service.get_all() == []


class TestIncomeService:
    def test_create_and_update(self, income_service):
        income = income_service.create("Payday", 2850, "CAD", "2024-01-01", IncomeRecurrence.BIWEEKLY)
        assert income_service.get_by_id(income.id).recurrence is IncomeRecurrence.BIWEEKLY
        updated = income_service.update(replace(income, recurrence=IncomeRecurrence.ONE_TIME))
        assert updated.recurrence is IncomeRecurrence.ONE_TIME

    def test_create_rejects_invalid_date(self, income_service):
        with pytest.raises(ValueError):
            income_service.create("Gift", 10, "CAD", "")

    def test_delete(self, income_service):
        income = income_service.create("Gift", 10, "CAD", "2024-01-01")
        income_service.delete(income.id)
        assert income_service.get_all() == []


class TestReminderService:
    def test_due_today_and_upcoming(self, bill_dao, bill_service):
        bill_dao.upsert(make_bill(id="rent", name="Rent", first_due_date="2024-01-15"))
        bill_dao.upsert(make_bill(id="phone", name="Phone", first_due_date="2024-01-17"))
        bill_dao.upsert(make_bill(id="water", name="Water", first_due_date="2024-01-16"))
        bill_dao.upsert(make_bill(id="far", name="Far", first_due_date="2024-01-30"))
        bill_dao.upsert(make_bill(id="off", name="Off", first_due_date="2024-01-15", active=False))

        reminders = ReminderService(bill_service).get_reminders(date(2024, 3, 15))

        assert [r.key for r in reminders] == ["bill:rent", "bill:water", "bill:phone"]
        assert reminders[0].severity == "warning"
        assert reminders[0].title == "Rent is due today"
        assert reminders[1].title == "Water due tomorrow"
        assert reminders[2].title == "Phone due in 2 days"
        assert reminders[2].due == "2024-03-17"

    def test_window_is_configurable(self, bill_dao, bill_service):
        bill_dao.upsert(make_bill(id="far", first_due_date="2024-01-30"))
        svc = ReminderService(bill_service)
        assert svc.get_reminders(date(2024, 3, 15), upcoming_days=15) != []
        assert svc.get_reminders(date(2024, 3, 15), upcoming_days=3) == []


class TestForecastService:
    def test_monthly_forecast(self, bill_dao, income_dao, bill_service, income_service):
        bill_dao.upsert(make_bill(id="rent", amount=1000.0, first_due_date="2024-01-01"))
        bill_dao.upsert(make_bill(id="netflix", amount=10.0, currency="USD", first_due_date="2024-01-05"))
        income_dao.upsert(make_income(id="pay", amount=1500.0, date="2024-01-05",
                                      recurrence=IncomeRecurrence.MONTHLY))

        svc = ForecastService(bill_service, income_service)
        forecast = svc.get_monthly_forecast(date(2024, 11, 20), months=3)

        assert [row["month"] for row in forecast] == ["2024-11", "2024-12", "2025-01"]
        assert forecast[0]["income"] == {"CAD": 1500.0}
        assert forecast[0]["expense"] == {"CAD": 1000.0, "USD": 10.0}
        assert forecast[0]["net"] == {"CAD": 500.0, "USD": -10.0}
        assert svc.get_totals(forecast) == {"CAD": 1500.0, "USD": -30.0}

    def test_forecast_excludes_inactive_bills(self, bill_dao, bill_service, income_service):
        bill_dao.upsert(make_bill(id="rent", active=False))
        forecast = ForecastService(bill_service, income_service).get_monthly_forecast(date(2024, 1, 1), 2)
        assert all(row["expense"] == {} for row in forecast)
