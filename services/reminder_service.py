from dataclasses import dataclass
from datetime import date
from services.bill_service import BillService
from services.occurrences import next_due
from utils.constants import SEVERITY_ORDER, UNCATEGORIZED, UPCOMING_REMINDER_DAYS
from utils.currency import format_currency
from utils.date_helpers import add_days, from_key


@dataclass
class Reminder:
    type: str       # 'due_today' | 'upcoming_bill'
    severity: str   # 'info' | 'warning' | 'error'
    title: str
    detail: str
    due: str = ""   # 'YYYY-MM-DD'
    key: str = ""   # e.g. "bill:netflix"


class ReminderService:
    def __init__(self, bill_service: BillService):
        self._bills = bill_service

    def get_reminders(
        self,
        reference: date,
        upcoming_days: int = UPCOMING_REMINDER_DAYS,
    ) -> list[Reminder]:
        horizon = add_days(reference, upcoming_days)
        reminders: list[Reminder] = []
        for bill in self._bills.get_active():
            due_key = next_due(bill, reference)
            due = from_key(due_key) if due_key else None
            if due is None or due > horizon:
                continue

            amount = format_currency(bill.amount, bill.currency)
            category = bill.category or UNCATEGORIZED
            if due == reference:
                reminders.append(Reminder(
                    type="due_today",
                    severity="warning",
                    title=f"{bill.name} is due today",
                    detail=f"{amount} · {category}",
                    due=due_key,
                    key=f"bill:{bill.id}",
                ))
            else:
                days_away = (due - reference).days
                day_label = "tomorrow" if days_away == 1 else f"in {days_away} days"
                reminders.append(Reminder(
                    type="upcoming_bill",
                    severity="info",
                    title=f"{bill.name} due {day_label}",
                    detail=f"Due on {due.strftime('%b %d')} · {amount} · {category}",
                    due=due_key,
                    key=f"bill:{bill.id}",
                ))
        return sorted(reminders, key=lambda r: (SEVERITY_ORDER[r.severity], r.due))
