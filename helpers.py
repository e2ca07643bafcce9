# helpers.py
# CSV normalization, date math, pagination, sorting, colors and display formatting

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from datetime import date, timedelta
from functools import cmp_to_key
import calendar
import logging
import math
import unicodedata

import pandas as pd
from dateutil.relativedelta import relativedelta

from config import COLOR_MAP, COLOR_HEX, DEFAULT_COLOR, DEFAULT_COLOR_HEX, DEFAULT_SORT
from models import ColorClasses, Page, Transaction

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

REQUIRED_COLS = {"Date", "Counterparty", "Category", "Amount"}
OPTIONAL_COLS = ["Recurring", "Avatar"]
TRUTHY = {"true", "yes", "y", "1"}

class InvalidSortKeyError(ValueError):
    """Raised for a sort key outside SORT_KEYS."""

def normalize_csv(file) -> Optional[pd.DataFrame]:
    """
    Read CSV, validate, and normalize schema.
    Expected columns: Date, Counterparty, Category, Amount (whole currency).
    Amounts are converted to integer minor units (cents).
    """
    try:
        df = pd.read_csv(file)
    except Exception as e:
        logger.error(f"Failed to read CSV: {e}")
        return None

    missing = REQUIRED_COLS.difference(df.columns)
    if missing:
        logger.error(f"Missing required columns: {missing}")
        return None

    for c in OPTIONAL_COLS:
        if c not in df.columns:
            df[c] = ""

    df["Date"] = pd.to_datetime(df["Date"], errors="coerce")
    # Drop rows with invalid dates
    if df["Date"].isna().any():
        logger.warning(f"Dropping {df['Date'].isna().sum()} rows with invalid dates")
        df = df[df["Date"].notna()].copy()

    amounts = pd.to_numeric(df["Amount"], errors="coerce").fillna(0.0)
    df["Amount"] = (amounts * 100).round().astype(int)
    df["Counterparty"] = df["Counterparty"].fillna("").astype(str).str.strip()
    df["Category"] = df["Category"].fillna("").astype(str).str.strip()
    df["Avatar"] = df["Avatar"].fillna("").astype(str)
    df["Recurring"] = df["Recurring"].fillna("").astype(str).str.strip().str.lower().isin(TRUTHY)
    return df

def transactions_from_frame(df: Optional[pd.DataFrame], user_id: str) -> List[Transaction]:
    """Turn a normalized CSV frame into Transaction models owned by user_id."""
    if df is None or df.empty:
        return []
    return [
        Transaction(
            user_id=user_id,
            counterparty=r["Counterparty"],
            avatar=r["Avatar"],
            amount=int(r["Amount"]),
            date=r["Date"].date(),
            category=r["Category"],
            is_recurring=bool(r["Recurring"]),
        )
        for _, r in df.iterrows()
    ]

def transactions_frame(items: Sequence[Transaction]) -> pd.DataFrame:
    """Tabular view of transactions for display."""
    return pd.DataFrame([
        {
            "Date": t.date,
            "Counterparty": t.counterparty,
            "Category": t.category,
            "Amount": t.amount / 100,
            "Recurring": t.is_recurring,
        }
        for t in items
    ], columns=["Date", "Counterparty", "Category", "Amount", "Recurring"])

# ---------- Date helpers ----------
def month_range(y: int, m: int) -> Tuple[date, date]:
    """Return the first and last date of a given month."""
    start = date(y, m, 1)
    last = calendar.monthrange(y, m)[1]
    return start, date(y, m, last)

def start_of_month(d: date) -> date:
    return date(d.year, d.month, 1)

def shift_month(d: date, k: int) -> date:
    """Shift the date by k months, keeping the day if possible."""
    anchor = date(d.year, d.month, 15) + relativedelta(months=k)
    _, end = month_range(anchor.year, anchor.month)
    return date(anchor.year, anchor.month, min(d.day, end.day))

def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)

def is_same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)

# ---------- Pagination ----------
def paginate(items: Sequence[Any], page: Optional[int] = None, size: Optional[int] = None) -> Page:
    """
    In-memory pagination of an already filtered and sorted list.
    A missing or non-positive page/size returns everything. `count` is always
    the size of the whole input so callers can work out the number of pages.
    """
    items = list(items)
    if not page or not size or page < 1 or size < 1:
        return Page(items=items, count=len(items))
    start = (page - 1) * size
    end = start + size
    return Page(items=items[start:end], count=len(items))

def page_count(count: int, size: int) -> int:
    if size < 1:
        return 0
    return math.ceil(count / size)

def clamp_page(page: int, count: int, size: int) -> int:
    """Keep a remembered page number inside 1..last page for the current list."""
    return max(1, min(page, page_count(count, size)))

def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

def page_numbers(current_page: int, total_pages: int) -> List[Union[int, str]]:
    """
    Page links to show for a pager, e.g. [1, "skip-left", 5, 6, 7, "skip-right", 10].
    All pages are listed up to 7; beyond that a window around the current page
    is kept together with the first and last page.
    """
    if total_pages < 1:
        return []
    if total_pages <= 7:
        delta = 7
    else:
        delta = 2 if 4 < current_page < total_pages - 3 else 4

    start = _round_half_up(current_page - delta / 2)
    end = _round_half_up(current_page + delta / 2)
    if start - 1 == 1 or end + 1 == total_pages:
        start += 1
        end += 1

    if current_page > delta:
        pages: List[Union[int, str]] = list(range(min(start, total_pages - delta), min(end, total_pages) + 1))
    else:
        pages = list(range(1, min(total_pages, delta + 1) + 1))

    def with_dots(value: int, pair: List[Union[int, str]]) -> List[Union[int, str]]:
        return pair if len(pages) + 1 != total_pages else [value]

    if pages[0] != 1:
        pages = with_dots(1, [1, "skip-left"]) + pages
    if isinstance(pages[-1], int) and pages[-1] < total_pages:
        pages = pages + with_dots(total_pages, ["skip-right", total_pages])
    return pages

# ---------- Sorting ----------
SORT_KEYS = (
    "date:desc",
    "date:asc",
    "name:asc",
    "name:desc",
    "amount:desc",
    "amount:asc",
)

SORT_OPTIONS: Dict[str, str] = {
    "date:desc": "Latest",
    "date:asc": "Oldest",
    "name:asc": "A to Z",
    "name:desc": "Z to A",
    "amount:desc": "Highest",
    "amount:asc": "Lowest",
}

def resolve_key(item: Any, path: str) -> Any:
    """Read a dotted path from a model or dict; None when any part is missing."""
    value = item
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value

def validate_sort_key(sort_key: str) -> Tuple[str, str]:
    if sort_key not in SORT_KEYS:
        raise InvalidSortKeyError(f"Unknown sort key {sort_key!r}; expected one of {', '.join(SORT_KEYS)}")
    field, direction = sort_key.split(":")
    return field, direction

def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))

def _sort_value(item: Any, field: str) -> Any:
    if field == "date":
        return resolve_key(item, "date")
    if field == "amount":
        return abs(resolve_key(item, "amount") or 0)
    name = resolve_key(item, "counterparty")
    if name is None:
        name = resolve_key(item, "category")
    name = str(name or "")
    # Accent- and case-insensitive first ("Émile" next to "Emma"), then casefolded, then raw
    return (_strip_accents(name).casefold(), name.casefold(), name)

def compare(a: Any, b: Any, sort_key: str) -> int:
    """
    Compare two records for one of SORT_KEYS. Returns -1 when `a` goes first,
    otherwise 1; equal sort values fall back to ascending id so distinct
    records never compare equal. Amounts compare by magnitude.
    """
    field, direction = validate_sort_key(sort_key)
    va, vb = _sort_value(a, field), _sort_value(b, field)
    if va != vb:
        first = va < vb if direction == "asc" else va > vb
        return -1 if first else 1
    return -1 if str(resolve_key(a, "id")) < str(resolve_key(b, "id")) else 1

def sort_items(items: Sequence[Any], sort_key: str = DEFAULT_SORT) -> List[Any]:
    validate_sort_key(sort_key)
    return sorted(items, key=cmp_to_key(lambda a, b: compare(a, b, sort_key)))

# ---------- Colors ----------
def get_color(color_name: str) -> ColorClasses:
    return COLOR_MAP.get(color_name, DEFAULT_COLOR)

def get_color_hex(color_name: str) -> str:
    return COLOR_HEX.get(color_name, DEFAULT_COLOR_HEX)

# ---------- Formatting ----------
def format_currency(amount_in_cents: int, decimals: int = 2) -> str:
    sign = "-" if amount_in_cents < 0 else ""
    return f"{sign}${abs(amount_in_cents) / 100:,.{decimals}f}"

def format_date(d: date) -> str:
    return f"{d.day} {d.strftime('%B %Y')}"

def format_day_of_month(d: date) -> str:
    if 11 <= d.day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(d.day % 10, "th")
    return f"{d.day}{suffix}"
