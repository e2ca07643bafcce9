# budgets.py
# Budget spending for the reference month, and budget add / update / delete

from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple
import logging

from config import COLOR_MAP
from helpers import is_same_month
from models import Budget, BudgetView, Transaction

logger = logging.getLogger(__name__)

RECENT_TRANSACTIONS = 3

class DuplicateBudgetError(ValueError):
    """A user already has a budget for this category."""

class BudgetNotFoundError(KeyError):
    pass

class InvalidBudgetAmountError(ValueError):
    pass

def budget_spent(category: str, transactions: Sequence[Transaction], current_date: date) -> int:
    """Magnitude of the net amount booked to `category` in the month of `current_date`."""
    return abs(sum(
        t.amount for t in transactions
        if t.category == category and is_same_month(t.date, current_date)
    ))

def budget_free(amount: int, spent: int) -> int:
    return max(amount - spent, 0)

def get_budgets(budgets: Sequence[Budget], transactions: Sequence[Transaction],
                current_date: date) -> List[BudgetView]:
    """
    Budgets newest first, each with what was spent this month and what is left.
    Transactions in categories without a budget are ignored.
    """
    views = []
    for b in sorted(budgets, key=lambda b: b.created_at, reverse=True):
        in_category = sorted(
            (t for t in transactions if t.category == b.category),
            key=lambda t: t.date, reverse=True,
        )
        spent = budget_spent(b.category, in_category, current_date)
        percent = min(spent / b.amount, 1) * 100 if b.amount else 100.0
        views.append(BudgetView(
            id=b.id,
            category=b.category,
            color=b.color,
            amount=b.amount,
            spent=spent,
            free=budget_free(b.amount, spent),
            spent_percent=percent,
            recent_transactions=in_category[:RECENT_TRANSACTIONS],
        ))
    return views

def budget_totals(views: Sequence[BudgetView]) -> Tuple[int, int]:
    """(total spent, total budgeted) across all budgets."""
    return sum(v.spent for v in views), sum(v.amount for v in views)

def to_minor_units(amount: float) -> int:
    cents = int(round(float(amount) * 100))
    if cents <= 0:
        raise InvalidBudgetAmountError("Budget amount must be positive")
    return cents

def create_budget(budgets: Sequence[Budget], user_id: str, category: str,
                  amount: float, color: str) -> List[Budget]:
    """Append a budget; `amount` is in whole currency and stored in cents."""
    if any(b.category == category for b in budgets if b.user_id == user_id):
        raise DuplicateBudgetError(f"A budget for {category!r} already exists")
    new = Budget(user_id=user_id, category=category, amount=to_minor_units(amount), color=color)
    logger.info(f"Created budget {new.id} for {category}")
    return list(budgets) + [new]

def update_budget(budgets: Sequence[Budget], budget_id: str, category: str,
                  amount: float, color: str) -> List[Budget]:
    target = next((b for b in budgets if b.id == budget_id), None)
    if target is None:
        raise BudgetNotFoundError(budget_id)
    if any(b.category == category and b.id != budget_id for b in budgets if b.user_id == target.user_id):
        raise DuplicateBudgetError(f"A budget for {category!r} already exists")
    changed = Budget.model_validate({
        **target.model_dump(),
        "category": category,
        "amount": to_minor_units(amount),
        "color": color,
    })
    return [changed if b.id == budget_id else b for b in budgets]

def delete_budget(budgets: Sequence[Budget], budget_id: str) -> List[Budget]:
    if not any(b.id == budget_id for b in budgets):
        raise BudgetNotFoundError(budget_id)
    return [b for b in budgets if b.id != budget_id]

def color_options(budgets: Sequence[Budget], user_id: str) -> Dict[str, bool]:
    """Every known color name mapped to whether the user already uses it."""
    used = {b.color for b in budgets if b.user_id == user_id}
    return {name: name in used for name in sorted(COLOR_MAP)}

def find_budget(budgets: Sequence[Budget], budget_id: str) -> Optional[Budget]:
    return next((b for b in budgets if b.id == budget_id), None)
