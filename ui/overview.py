import streamlit as st
from typing import List
from helpers import format_currency, transactions_frame
from models import BillSummary, BudgetView, Transaction
from budgets import budget_totals

def overview_section(latest: List[Transaction], views: List[BudgetView], summary: BillSummary) -> None:
    spent, limit = budget_totals(views)
    c1, c2, c3 = st.columns(3)
    c1.metric("Budgets spent", format_currency(spent, decimals=0), help=f"of {format_currency(limit, decimals=0)} limit")
    c2.metric("Bills paid", format_currency(summary.paid.total))
    c3.metric("Bills upcoming / due soon",
              f"{format_currency(summary.upcoming.total)} / {format_currency(summary.soon.total)}")

    st.markdown("#### Latest transactions")
    if latest:
        st.dataframe(
            transactions_frame(latest), use_container_width=True, hide_index=True,
            column_config={"Amount": st.column_config.NumberColumn(format="$%.2f")}
        )
    else:
        st.info("No transactions yet.")
