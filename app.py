# app.py
# Personal Finance Dashboard: local JSON persistence, CSV import,
# budgets and recurring bills

import streamlit as st

from budgets import get_budgets
from data import (
    load_transactions, save_transactions,
    load_budgets, save_budgets,
    get_latest_transaction_date,
)
from helpers import format_date, InvalidSortKeyError
from recurring import classify_recurring_bills, get_recurring_bill_summary
from transactions import get_categories, get_latest_transactions
from ui import (
    overview_section,
    csv_import_section,
    transactions_section,
    budgets_section,
    budgets_crud_section,
    bills_sort_control,
    recurring_bills_section,
)
from ui.pagination import reset_all_pages

st.set_page_config(page_title="Personal Finance", layout="wide")
st.title("📊 Personal Finance Dashboard")

# Sidebar: who is looking, and the reference date derived from their data
st.sidebar.header("⚙️ Global Controls")
user_id = st.sidebar.text_input("User", value=st.session_state.get("user_id", "demo")).strip() or "demo"
if st.session_state.get("user_id") != user_id:
    reset_all_pages()
st.session_state["user_id"] = user_id

transactions = load_transactions(user_id)
budgets = load_budgets(user_id)
current_date = get_latest_transaction_date(user_id)
st.sidebar.caption(f"Reference date (latest transaction): **{format_date(current_date)}**")

tab_overview, tab_tx, tab_budgets, tab_bills = st.tabs(
    ["Overview", "Transactions", "Budgets", "Recurring Bills"]
)

budget_views = get_budgets(budgets, transactions, current_date)
overview_summary = get_recurring_bill_summary(classify_recurring_bills(transactions, current_date))

with tab_overview:
    overview_section(get_latest_transactions(transactions), budget_views, overview_summary)

with tab_tx:
    st.markdown("## 🧾 CSV Import")
    imported = csv_import_section(user_id, transactions)
    if imported is not None:
        save_transactions(user_id, imported)
        st.success(f"Transactions saved: {len(imported):,}")
        st.rerun()
    st.markdown("---")
    st.markdown("## Transactions")
    try:
        transactions_section(transactions)
    except InvalidSortKeyError as e:
        st.error(str(e))

with tab_budgets:
    st.markdown("## 💰 Budgets")
    budgets_section(budget_views)
    st.markdown("---")
    budgets_updated = budgets_crud_section(budgets, user_id, get_categories(transactions))
    if budgets_updated is not None:
        save_budgets(user_id, budgets_updated)
        st.success("Budgets saved.")
        st.rerun()

with tab_bills:
    st.markdown("## 🗓 Recurring Bills")
    try:
        bills = classify_recurring_bills(transactions, current_date, sort=bills_sort_control())
    except InvalidSortKeyError as e:
        st.error(str(e))
    else:
        recurring_bills_section(bills, get_recurring_bill_summary(bills))

st.markdown("---")
st.caption("Data is stored locally under ./data/*.json. CSV is your primary transaction source.")
