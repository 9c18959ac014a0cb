"""Shared fixtures for bill tracker tests."""
import pytest

from database.db_manager import DatabaseManager
from database.bill_dao import BillDAO
from database.income_dao import IncomeDAO
from models.bill import Bill
from models.income import Income
from models.recurrence import IncomeRecurrence, Monthly, Weekly
from services.bill_service import BillService
from services.data_service import DataService
from services.income_service import IncomeService


@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    manager = DatabaseManager(":memory:")
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def bill_dao(db) -> BillDAO:
    return BillDAO(db)


@pytest.fixture
def income_dao(db) -> IncomeDAO:
    return IncomeDAO(db)


@pytest.fixture
def bill_service(bill_dao) -> BillService:
    return BillService(bill_dao)


@pytest.fixture
def income_service(income_dao) -> IncomeService:
    return IncomeService(income_dao)


@pytest.fixture
def data_service(db, bill_dao, income_dao) -> DataService:
    return DataService(db, bill_dao, income_dao)


def make_bill(**overrides) -> Bill:
    fields = dict(
        id="rent",
        name="Rent",
        amount=1500.0,
        currency="CAD",
        first_due_date="2024-01-01",
        recurrence=Monthly(),
        active=True,
    )
    fields.update(overrides)
    return Bill(**fields)


def make_income(**overrides) -> Income:
    fields = dict(
        id="salary",
        name="Salary",
        amount=2000.0,
        currency="CAD",
        date="2024-01-05",
        recurrence=IncomeRecurrence.BIWEEKLY,
    )
    fields.update(overrides)
    return Income(**fields)


@pytest.fixture
def weekly_gym() -> Bill:
    return make_bill(id="gym", name="Gym", amount=12.5, first_due_date="2024-01-01",
                     recurrence=Weekly(), category="Health")
