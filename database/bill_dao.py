import logging
from typing import Optional
from database.db_manager import DatabaseManager
from models.bill import Bill
from models.recurrence import CustomDays, recurrence_from_tag

logger = logging.getLogger(__name__)


class BillDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Optional[Bill]:
        recurrence = recurrence_from_tag(row["recurrence_type"], row["interval_days"])
        if recurrence is None:
            logger.warning(
                f"Skipping bill {row['id']}: unknown recurrence {row['recurrence_type']!r}"
            )
            return None
        return Bill(
            id=row["id"],
            name=row["name"],
            amount=row["amount"],
            currency=row["currency"],
            first_due_date=row["first_due_date"],
            recurrence=recurrence,
            active=bool(row["active"]),
            notes=row["notes"],
            category=row["category"],
        )

    def _rows_to_models(self, rows) -> list[Bill]:
        bills = (self._row_to_model(r) for r in rows)
        return [b for b in bills if b is not None]

    def get_all(self) -> list[Bill]:
        conn = self._db.get_connection()
        rows = conn.execute("SELECT * FROM bills ORDER BY name").fetchall()
        return self._rows_to_models(rows)

    def get_active(self) -> list[Bill]:
        conn = self._db.get_connection()
        rows = conn.execute(
            "SELECT * FROM bills WHERE active = 1 ORDER BY name"
        ).fetchall()
        return self._rows_to_models(rows)

    def get_by_id(self, bill_id: str) -> Optional[Bill]:
        conn = self._db.get_connection()
        row = conn.execute("SELECT * FROM bills WHERE id = ?", (bill_id,)).fetchone()
        return self._row_to_model(row) if row else None

    def upsert(self, bill: Bill) -> Bill:
        """Insert or fully replace the bill with the same id."""
        interval = bill.recurrence.interval_days if isinstance(bill.recurrence, CustomDays) else None
        conn = self._db.get_connection()
        conn.execute(
            """INSERT OR REPLACE INTO bills
               (id, name, amount, currency, first_due_date, recurrence_type,
                interval_days, active, notes, category)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                bill.id, bill.name, bill.amount, bill.currency, bill.first_due_date,
                bill.recurrence.tag, interval, 1 if bill.active else 0,
                bill.notes, bill.category,
            ),
        )
        conn.commit()
        return self.get_by_id(bill.id)

    def set_active(self, bill_id: str, active: bool):
        conn = self._db.get_connection()
        conn.execute(
            "UPDATE bills SET active = ? WHERE id = ?",
            (1 if active else 0, bill_id),
        )
        conn.commit()

    def delete(self, bill_id: str):
        conn = self._db.get_connection()
        conn.execute("DELETE FROM bills WHERE id = ?", (bill_id,))
        conn.commit()

    def delete_all(self):
        conn = self._db.get_connection()
        conn.execute("DELETE FROM bills")
        conn.commit()
