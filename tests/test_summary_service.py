from datetime import date

from conftest import make_bill, make_income
from models.recurrence import CustomDays, IncomeRecurrence, Monthly, Quarterly, Weekly
from services.summary_service import (
    DayItems, accumulate_totals, bills_due_on, day_counts, group_by_day,
    income_totals_by_category, matches_query, net_by_currency, overdue_dates,
    totals_by_frequency, totals_in_month, totals_in_range, weekly_points,
)


def test_accumulate_totals_rounds():
    totals = {}
    accumulate_totals(totals, "CAD", 0.1, 3)
    accumulate_totals(totals, "CAD", 0.2, 1)
    assert totals == {"CAD": 0.5}


def test_totals_in_month_per_currency():
    bills = [
        make_bill(id="a", amount=10.0, currency="CAD", first_due_date="2024-01-01", recurrence=Weekly()),
        make_bill(id="b", amount=99.99, currency="USD", first_due_date="2024-01-15", recurrence=Monthly()),
        make_bill(id="c", amount=500.0, currency="CAD", active=False),
    ]
    # Mondays in April 2024: 1, 8, 15, 22, 29
    assert totals_in_month(bills, date(2024, 4, 1)) == {"CAD": 50.0, "USD": 99.99}


def test_totals_in_range_skips_entries_without_occurrences():
    bills = [make_bill(first_due_date="2025-01-01")]
    assert totals_in_range(bills, date(2024, 1, 1), date(2024, 12, 31)) == {}


def test_group_by_day_and_counts():
    rent = make_bill(id="rent", first_due_date="2024-03-01", recurrence=Monthly())
    gym = make_bill(id="gym", first_due_date="2024-03-01", recurrence=Weekly())
    pay = make_income(date="2024-03-01", recurrence=IncomeRecurrence.BIWEEKLY)

    groups = group_by_day([rent, gym], [pay], date(2024, 3, 1), date(2024, 3, 15))
    assert list(groups) == ["2024-03-01", "2024-03-08", "2024-03-15"]
    assert groups["2024-03-01"].bills == [rent, gym]
    assert groups["2024-03-01"].incomes == [pay]
    assert day_counts(groups) == {
        "2024-03-01": (2, 1),
        "2024-03-08": (1, 0),
        "2024-03-15": (1, 1),
    }


def test_overdue_dates_require_a_bill():
    groups = {
        "2024-03-01": DayItems(bills=[make_bill()]),
        "2024-03-02": DayItems(incomes=[make_income()]),
        "2024-03-20": DayItems(bills=[make_bill()]),
    }
    assert overdue_dates(groups, date(2024, 3, 15)) == {"2024-03-01"}


def test_bills_due_on(weekly_gym):
    rent = make_bill(first_due_date="2024-01-15")
    assert bills_due_on([rent, weekly_gym], date(2024, 4, 15)) == [rent, weekly_gym]
    assert bills_due_on([rent, weekly_gym], date(2024, 4, 16)) == []


def test_weekly_points_bucket_tail_into_last_week():
    bills = [
        make_bill(id="a", amount=10.0, first_due_date="2024-01-03"),
        make_bill(id="b", amount=20.0, first_due_date="2024-01-31"),
        make_bill(id="c", amount=5.5, first_due_date="2024-01-29"),
    ]
    # 31-day month: five buckets, days 29-31 land in W5
    assert weekly_points(bills, date(2024, 1, 1)) == [
        ("W1", 10.0), ("W2", 0.0), ("W3", 0.0), ("W4", 0.0), ("W5", 25.5),
    ]
    # February 2023 has exactly four weeks
    assert len(weekly_points(bills, date(2023, 2, 1))) == 4


def test_totals_by_frequency():
    bills = [
        make_bill(id="a", amount=10.0, first_due_date="2024-01-01", recurrence=Weekly()),
        make_bill(id="b", amount=100.0, first_due_date="2024-01-10", recurrence=Monthly()),
        make_bill(id="c", amount=300.0, first_due_date="2024-01-10", recurrence=Quarterly()),
        make_bill(id="d", amount=1.0, first_due_date="2024-04-01", recurrence=CustomDays(10)),
    ]
    assert totals_by_frequency(bills, date(2024, 4, 1)) == {
        "WEEKLY": {"CAD": 50.0},
        "MONTHLY": {"CAD": 100.0},
        "QUARTERLY": {"CAD": 300.0},
        "CUSTOM_DAYS": {"CAD": 3.0},
    }


def test_income_totals_by_category_sorted():
    incomes = [
        make_income(id="1", category="Salary", amount=100.0, date="2024-05-03"),
        make_income(id="2", category=None, amount=50.0, date="2024-05-10",
                    recurrence=IncomeRecurrence.ONE_TIME),
        make_income(id="3", category="Gifts", amount=20.0, currency="USD", date="2024-05-20",
                    recurrence=IncomeRecurrence.MONTHLY),
        make_income(id="4", category="Bonus", amount=999.0, date="2024-06-20",
                    recurrence=IncomeRecurrence.ONE_TIME),
    ]
    assert income_totals_by_category(incomes, date(2024, 5, 1)) == [
        ("Gifts", {"USD": 20.0}),
        ("Salary", {"CAD": 300.0}),
        ("", {"CAD": 50.0}),
    ]


def test_net_by_currency():
    rows = net_by_currency({"CAD": 3000.0, "EUR": 0.0}, {"CAD": 1200.5, "USD": 10.0})
    assert rows == [
        {"currency": "CAD", "income": 3000.0, "expenses": 1200.5, "net": 1799.5},
        {"currency": "USD", "income": 0.0, "expenses": 10.0, "net": -10.0},
    ]


def test_matches_query():
    bill = make_bill(name="Fiber Internet", notes="1 Gbps plan", category="Utilities")
    income = make_income(name="Payday", source="Employer")
    assert matches_query(bill, "gbps")
    assert matches_query(bill, " utilities ")
    assert matches_query(bill, "")
    assert not matches_query(bill, "netflix")
    assert matches_query(income, "employ")
