import streamlit as st
from typing import List, Optional
from config import DEFAULT_SORT
from helpers import SORT_KEYS, SORT_OPTIONS, normalize_csv, transactions_from_frame, transactions_frame
from models import Transaction
from transactions import get_categories, get_transactions
from .pagination import fit_page, page_controls, pager, reset_page

def csv_import_section(user_id: str, transactions: List[Transaction]) -> Optional[List[Transaction]]:
    file = st.file_uploader("Upload transactions CSV", type=["csv"])
    if not file:
        st.info("CSV must include: Date, Counterparty, Category, Amount. Optional: Recurring, Avatar.")
        return None
    df = normalize_csv(file)
    if df is None or df.empty:
        st.error("CSV invalid or missing required columns.")
        return None

    with st.expander(f"Preview ({len(df):,} rows)", expanded=False):
        st.dataframe(df.head(200), use_container_width=True, hide_index=True)

    mode = st.radio("Import mode", ["Append", "Replace all"], horizontal=True)
    if st.button("💾 Import transactions"):
        imported = transactions_from_frame(df, user_id)
        if mode == "Replace all":
            return imported
        return transactions + imported
    return None

def transactions_section(transactions: List[Transaction]) -> None:
    if not transactions:
        st.info("No transactions yet. Import a CSV above.")
        return

    c1, c2, c3 = st.columns([2, 1, 1])
    search = c1.text_input("Search transaction", key="tx_search", on_change=reset_page, args=("tx",))
    sort = c2.selectbox("Sort by", options=list(SORT_KEYS), index=SORT_KEYS.index(DEFAULT_SORT),
                        format_func=SORT_OPTIONS.get, key="tx_sort", on_change=reset_page, args=("tx",))
    category = c3.selectbox("Category", options=["All Transactions"] + get_categories(transactions),
                            key="tx_category", on_change=reset_page, args=("tx",))

    page, size = page_controls("tx")
    query = dict(category=None if category == "All Transactions" else category, sort=sort, search=search)
    result = get_transactions(transactions, page=page, size=size, **query)
    fitted = fit_page("tx", result.count, size)
    if fitted != page:
        result = get_transactions(transactions, page=fitted, size=size, **query)
    if not result.items:
        st.info("No transactions match.")
    else:
        st.dataframe(
            transactions_frame(result.items), use_container_width=True, hide_index=True,
            column_config={"Amount": st.column_config.NumberColumn(format="$%.2f")}
        )
    st.caption(f"{result.count:,} matching transaction(s)")
    pager("tx", result.count, size)
