# recurring.py
# Recurring bills: paid this month vs expected from last month, plus the status summary

from datetime import date
from typing import Iterable, List, Sequence
import logging

from config import DEFAULT_SORT, SOON_WINDOW_DAYS
from data import load_transactions
from helpers import add_days, shift_month, sort_items, start_of_month, validate_sort_key
from models import BillSummary, RecurringBill, StatusTotal, Transaction

logger = logging.getLogger(__name__)

def bill_status(bill_date: date, current_date: date) -> str:
    """Status of a bill that has not posted yet."""
    if bill_date < current_date:
        return "overdue"
    if bill_date < add_days(current_date, SOON_WINDOW_DAYS):
        return "soon"
    return "upcoming"

def _to_bill(t: Transaction, status: str, bill_date: date) -> RecurringBill:
    return RecurringBill(
        id=t.id,
        counterparty=t.counterparty,
        avatar=t.avatar,
        amount=t.amount,
        date=bill_date,
        status=status,
    )

def classify_recurring_bills(transactions: Iterable[Transaction], current_date: date,
                             sort: str = DEFAULT_SORT) -> List[RecurringBill]:
    """
    Recurring transactions posted since the start of the current month are
    paid. Those from last month whose counterparty has not posted yet this
    month are expected one month after their last date and bucketed as
    overdue / soon / upcoming against `current_date`.
    Counterparty names are matched exactly.
    """
    validate_sort_key(sort)
    start_current = start_of_month(current_date)
    start_last = start_of_month(shift_month(current_date, -1))

    recurring = [t for t in transactions if t.is_recurring]
    this_month = [t for t in recurring if t.date >= start_current]
    last_month = [t for t in recurring if start_last <= t.date < start_current]

    seen = {t.counterparty for t in this_month}
    expected = [t for t in last_month if t.counterparty not in seen]

    bills = [_to_bill(t, "paid", t.date) for t in this_month]
    for t in expected:
        due = shift_month(t.date, 1)
        bills.append(_to_bill(t, bill_status(due, current_date), due))

    logger.debug(f"Recurring bills for {current_date}: {len(this_month)} paid, {len(expected)} expected")
    return sort_items(bills, sort)

def get_recurring_bills(user_id: str, current_date: date, sort: str = DEFAULT_SORT) -> List[RecurringBill]:
    return classify_recurring_bills(load_transactions(user_id), current_date, sort)

def _total_and_count(bills: Sequence[RecurringBill]) -> StatusTotal:
    return StatusTotal(total=sum(abs(b.amount) for b in bills), count=len(bills))

def get_recurring_bill_summary(bills: Sequence[RecurringBill]) -> BillSummary:
    """Totals (by magnitude) and counts per status. Pass the unsearched list."""
    return BillSummary(
        all=_total_and_count(bills),
        paid=_total_and_count([b for b in bills if b.status == "paid"]),
        soon=_total_and_count([b for b in bills if b.status == "soon"]),
        upcoming=_total_and_count([b for b in bills if b.status == "upcoming"]),
    )
