"""Export and import bills and incomes as JSON, and seed demo data once.

The JSON payload is either {"bills": [...], "incomes": [...]} or, for files
written by older versions, a bare list of bills.
"""
import json
import logging
from datetime import date

from database.db_manager import DatabaseManager
from database.bill_dao import BillDAO
from database.income_dao import IncomeDAO
from models.bill import Bill
from models.income import Income
from models.recurrence import IncomeRecurrence, Monthly
from models.validators import (
    InvalidRecordError, bill_to_record, income_to_record,
    normalize_bill, normalize_income,
)
from utils.date_helpers import format_date

logger = logging.getLogger(__name__)

IMPORT_MODES = ("merge", "replace")


class DataService:
    def __init__(self, db: DatabaseManager, bill_dao: BillDAO, income_dao: IncomeDAO):
        self._db = db
        self._bill_dao = bill_dao
        self._income_dao = income_dao

    # ── Export ────────────────────────────────────────────────────────────────

    def export_json(self) -> dict:
        """Return a full export dict (caller writes to disk)."""
        return {
            "bills": [bill_to_record(b) for b in self._bill_dao.get_all()],
            "incomes": [income_to_record(i) for i in self._income_dao.get_all()],
        }

    def export_json_text(self) -> str:
        return json.dumps(self.export_json(), indent=2, ensure_ascii=False)

    # ── Import ────────────────────────────────────────────────────────────────

    @staticmethod
    def parse_import(text: str) -> tuple[list[Bill], list[Income]]:
        """Validate a JSON payload; one bad record rejects the whole file."""
        try:
            parsed = json.loads(text)
        except ValueError as e:
            raise InvalidRecordError(f"Invalid JSON payload: {e}") from e

        if isinstance(parsed, list):
            return [normalize_bill(item) for item in parsed], []
        if not isinstance(parsed, dict):
            raise InvalidRecordError("Invalid JSON payload: expected an object or a list.")

        bills_raw = parsed.get("bills")
        incomes_raw = parsed.get("incomes")
        bills = [normalize_bill(item) for item in bills_raw] if isinstance(bills_raw, list) else []
        incomes = (
            [normalize_income(item) for item in incomes_raw]
            if isinstance(incomes_raw, list) else []
        )
        return bills, incomes

    def import_json(self, text: str, mode: str = "replace") -> dict:
        """Import from a previously exported JSON document.

        mode: 'merge' (upsert by id) | 'replace' (drop existing entries first)
        Returns stats dict with counts of imported entries.
        """
        if mode not in IMPORT_MODES:
            raise ValueError(f"Invalid import mode: {mode}")
        bills, incomes = self.parse_import(text)

        if mode == "replace":
            self._bill_dao.delete_all()
            self._income_dao.delete_all()
        for bill in bills:
            self._bill_dao.upsert(bill)
        for income in incomes:
            self._income_dao.upsert(income)

        logger.info(f"Imported {len(bills)} bills and {len(incomes)} incomes ({mode})")
        return {"bills": len(bills), "incomes": len(incomes)}

    # ── Demo data ─────────────────────────────────────────────────────────────

    def seed_demo_data_once(self, reference: date) -> bool:
        """Insert the demo entries the first time the app runs. Returns True if seeded."""
        if self._db.get_setting("demo_seeded"):
            return False
        for bill in demo_bills(reference):
            self._bill_dao.upsert(bill)
        for income in demo_incomes(reference):
            self._income_dao.upsert(income)
        self._db.set_setting("demo_seeded", "true")
        logger.info("Seeded demo bills and incomes")
        return True


def demo_bills(reference: date) -> list[Bill]:
    def on(day: int) -> str:
        return format_date(reference.replace(day=day))

    return [
        Bill("netflix", "Netflix", 18.99, "CAD", format_date(reference), Monthly(),
             notes="Premium plan", category="Entertainment"),
        Bill("hydro", "Hydro One", 120.0, "CAD", on(5), Monthly(),
             notes="Utility bill", category="Utilities"),
        Bill("internet", "Fiber Internet", 89.99, "CAD", on(10), Monthly(),
             notes="1 Gbps plan", category="Utilities"),
        Bill("insurance", "Auto Insurance", 148.45, "CAD", on(20), Monthly(),
             notes="", category="Insurance"),
    ]


def demo_incomes(reference: date) -> list[Income]:
    return [
        Income("payday", "Payday", 2850.0, "CAD", format_date(reference.replace(day=1)),
               IncomeRecurrence.BIWEEKLY, notes="Bi-weekly pay",
               category="Salary", source="Employer"),
        Income("freelance-design", "Freelance design", 450.0, "CAD",
               format_date(reference.replace(day=12)), IncomeRecurrence.ONE_TIME,
               notes="Landing page revision", category="Side projects", source="Freelance"),
    ]
