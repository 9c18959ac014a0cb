from dataclasses import dataclass, field
from typing import Optional

from models.recurrence import Monthly, Recurrence


@dataclass
class Bill:
    id: str
    name: str
    amount: float
    currency: str           # 'CAD' | 'USD' | 'EUR'
    first_due_date: str     # 'YYYY-MM-DD'
    recurrence: Recurrence = field(default_factory=Monthly)
    active: bool = True
    notes: Optional[str] = None
    category: Optional[str] = None
