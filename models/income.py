from dataclasses import dataclass
from typing import Optional

from models.recurrence import IncomeRecurrence


@dataclass
class Income:
    id: str
    name: str
    amount: float
    currency: str           # 'CAD' | 'USD' | 'EUR'
    date: str               # 'YYYY-MM-DD', first (or only) payment
    recurrence: IncomeRecurrence = IncomeRecurrence.ONE_TIME
    notes: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None
