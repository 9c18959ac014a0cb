import uuid
from models.bill import Bill
from models.recurrence import Monthly, Recurrence
from database.bill_dao import BillDAO
from utils.constants import CURRENCIES
from utils.date_helpers import parse_date


class BillService:
    def __init__(self, bill_dao: BillDAO):
        self._dao = bill_dao

    def get_all(self) -> list[Bill]:
        return self._dao.get_all()

    def get_active(self) -> list[Bill]:
        return self._dao.get_active()

    def get_by_id(self, bill_id: str) -> Bill | None:
        return self._dao.get_by_id(bill_id)

    def create(
        self,
        name: str,
        amount: float,
        currency: str,
        first_due_date: str,
        recurrence: Recurrence | None = None,
        notes: str | None = None,
        category: str | None = None,
    ) -> Bill:
        bill = Bill(
            id=uuid.uuid4().hex,
            name=name.strip(),
            amount=round(amount, 2),
            currency=currency,
            first_due_date=first_due_date,
            recurrence=recurrence or Monthly(),
            notes=notes,
            category=category,
        )
        self._validate(bill)
        return self._dao.upsert(bill)

    def update(self, bill: Bill) -> Bill:
        """Replace the stored bill wholesale; its series is re-derived from first_due_date."""
        if self._dao.get_by_id(bill.id) is None:
            raise ValueError(f"Unknown bill: {bill.id}")
        self._validate(bill)
        return self._dao.upsert(bill)

    def set_active(self, bill_id: str, active: bool):
        self._dao.set_active(bill_id, active)

    def delete(self, bill_id: str):
        self._dao.delete(bill_id)

    def _validate(self, bill: Bill):
        if not bill.name.strip():
            raise ValueError("Name cannot be empty.")
        if bill.amount < 0:
            raise ValueError("Amount cannot be negative.")
        if bill.currency not in CURRENCIES:
            raise ValueError("Invalid currency.")
        if not parse_date(bill.first_due_date):
            raise ValueError("Invalid first due date.")
