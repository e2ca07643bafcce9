# transactions.py
# Transactions list: sort, category filter, search, paginate

from typing import List, Optional, Sequence

from config import DEFAULT_SORT
from helpers import paginate, sort_items
from models import Page, Transaction
from search import search as fuzzy_search

def get_transactions(transactions: Sequence[Transaction], category: Optional[str] = None,
                     sort: str = DEFAULT_SORT, search: Optional[str] = None,
                     page: Optional[int] = None, size: Optional[int] = None) -> Page:
    """
    One page of a user's transactions. Sorting happens first so that search
    hits with the same rank stay in sort order; `count` covers every match.
    """
    items = sort_items(transactions, sort)
    if category:
        wanted = category.lower()
        items = [t for t in items if t.category.lower() == wanted]
    if search:
        items = fuzzy_search(items, search, keys=["counterparty"])
    return paginate(items, page=page, size=size)

def get_categories(transactions: Sequence[Transaction]) -> List[str]:
    return sorted({t.category for t in transactions if t.category}, key=lambda c: (c.casefold(), c))

def get_latest_transactions(transactions: Sequence[Transaction], limit: int = 5) -> List[Transaction]:
    return get_transactions(transactions, sort="date:desc", page=1, size=limit).items
