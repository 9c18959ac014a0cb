import uuid
from models.income import Income
from models.recurrence import IncomeRecurrence
from database.income_dao import IncomeDAO
from utils.constants import CURRENCIES
from utils.date_helpers import parse_date


class IncomeService:
    def __init__(self, income_dao: IncomeDAO):
        self._dao = income_dao

    def get_all(self) -> list[Income]:
        return self._dao.get_all()

    def get_by_id(self, income_id: str) -> Income | None:
        return self._dao.get_by_id(income_id)

    def create(
        self,
        name: str,
        amount: float,
        currency: str,
        date: str,
        recurrence: IncomeRecurrence = IncomeRecurrence.ONE_TIME,
        notes: str | None = None,
        category: str | None = None,
        source: str | None = None,
    ) -> Income:
        income = Income(
            id=uuid.uuid4().hex,
            name=name.strip(),
            amount=round(amount, 2),
            currency=currency,
            date=date,
            recurrence=recurrence,
            notes=notes,
            category=category,
            source=source,
        )
        self._validate(income)
        return self._dao.upsert(income)

    def update(self, income: Income) -> Income:
        if self._dao.get_by_id(income.id) is None:
            raise ValueError(f"Unknown income: {income.id}")
        self._validate(income)
        return self._dao.upsert(income)

    def delete(self, income_id: str):
        self._dao.delete(income_id)

    def _validate(self, income: Income):
        if not income.name.strip():
            raise ValueError("Name cannot be empty.")
        if income.amount < 0:
            raise ValueError("Amount cannot be negative.")
        if income.currency not in CURRENCIES:
            raise ValueError("Invalid currency.")
        if not parse_date(income.date):
            raise ValueError("Invalid date.")
