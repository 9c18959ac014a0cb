from typing import Optional
from database.db_manager import DatabaseManager
from models.income import Income
from models.recurrence import income_recurrence_from_tag


class IncomeDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Income:
        return Income(
            id=row["id"],
            name=row["name"],
            amount=row["amount"],
            currency=row["currency"],
            date=row["date"],
            recurrence=income_recurrence_from_tag(row["recurrence"]),
            notes=row["notes"],
            category=row["category"],
            source=row["source"],
        )

    def get_all(self) -> list[Income]:
        conn = self._db.get_connection()
        rows = conn.execute("SELECT * FROM incomes ORDER BY date, name").fetchall()
        return [self._row_to_model(r) for r in rows]

    def get_by_id(self, income_id: str) -> Optional[Income]:
        conn = self._db.get_connection()
        row = conn.execute("SELECT * FROM incomes WHERE id = ?", (income_id,)).fetchone()
        return self._row_to_model(row) if row else None

    def upsert(self, income: Income) -> Income:
        """Insert or fully replace the income with the same id."""
        conn = self._db.get_connection()
        conn.execute(
            """INSERT OR REPLACE INTO incomes
               (id, name, amount, currency, date, recurrence, notes, category, source)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                income.id, income.name, income.amount, income.currency, income.date,
                income.recurrence.value, income.notes, income.category, income.source,
            ),
        )
        conn.commit()
        return self.get_by_id(income.id)

    def delete(self, income_id: str):
        conn = self._db.get_connection()
        conn.execute("DELETE FROM incomes WHERE id = ?", (income_id,))
        conn.commit()

    def delete_all(self):
        conn = self._db.get_connection()
        conn.execute("DELETE FROM incomes")
        conn.commit()
