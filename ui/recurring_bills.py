import streamlit as st
import pandas as pd
from typing import List
from config import DEFAULT_SORT
from helpers import SORT_KEYS, SORT_OPTIONS, format_currency, format_day_of_month, paginate
from models import BillSummary, RecurringBill
from search import search as fuzzy_search
from .pagination import fit_page, page_controls, pager, reset_page

STATUS_LABELS = {"paid": "✅ Paid", "overdue": "⚠️ Overdue", "soon": "⏰ Due soon", "upcoming": "Upcoming"}

def bills_sort_control() -> str:
    return st.selectbox("Sort bills by", options=list(SORT_KEYS), index=SORT_KEYS.index(DEFAULT_SORT),
                        format_func=SORT_OPTIONS.get, key="bills_sort", on_change=reset_page, args=("bills",))

def recurring_summary_section(summary: BillSummary) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Bills", format_currency(summary.all.total))
    c2.metric("Total Paid", f"{summary.paid.count} ({format_currency(summary.paid.total)})")
    c3.metric("Total Upcoming", f"{summary.upcoming.count} ({format_currency(summary.upcoming.total)})")
    c4.metric("Due Soon", f"{summary.soon.count} ({format_currency(summary.soon.total)})")

def recurring_bills_section(bills: List[RecurringBill], summary: BillSummary) -> None:
    """`bills` is already sorted; the summary was computed before any search."""
    recurring_summary_section(summary)
    if not bills:
        st.info("No recurring bills in the last two months.")
        return

    search = st.text_input("Search bills", key="bills_search", on_change=reset_page, args=("bills",))
    _, size = page_controls("bills")
    # Search after the summary so totals never depend on it
    found = fuzzy_search(bills, search, keys=["counterparty"])
    result = paginate(found, page=fit_page("bills", len(found), size), size=size)

    rows = [{
        "Bill Title": b.counterparty,
        "Due Date": f"Monthly - {format_day_of_month(b.date)}",
        "Status": STATUS_LABELS[b.status],
        "Amount": format_currency(abs(b.amount)),
    } for b in result.items]
    if rows:
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
    else:
        st.info("No bills match.")
    pager("bills", result.count, size)
