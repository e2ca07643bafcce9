import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from typing import List, Optional
from budgets import (
    budget_totals, color_options,
    create_budget, delete_budget, find_budget, update_budget,
)
from helpers import format_currency, format_date, get_color_hex
from models import Budget, BudgetView

def budgets_section(views: List[BudgetView]) -> None:
    if not views:
        st.info("No budgets yet. Add one below.")
        return

    spent, limit = budget_totals(views)
    c1, c2 = st.columns([1, 2])
    with c1:
        fig = go.Figure(go.Pie(
            labels=[v.category for v in views],
            values=[v.spent for v in views],
            marker=dict(colors=[get_color_hex(v.color) for v in views]),
            hole=0.6, sort=False, textinfo="none",
        ))
        fig.update_layout(showlegend=False, margin=dict(t=0, b=0, l=0, r=0), height=240,
                          annotations=[dict(text=f"{format_currency(spent, decimals=0)}<br>"
                                                 f"of {format_currency(limit, decimals=0)} limit",
                                            showarrow=False)])
        st.plotly_chart(fig, use_container_width=True)
    with c2:
        st.dataframe(pd.DataFrame([{
            "Category": v.category,
            "Spent": format_currency(v.spent),
            "Maximum": format_currency(v.amount),
        } for v in views]), use_container_width=True, hide_index=True)

    for v in views:
        st.markdown(f"#### {v.category}")
        st.caption(f"Maximum of {format_currency(v.amount)}")
        st.progress(v.spent_percent / 100)
        m1, m2 = st.columns(2)
        m1.metric("Spent", format_currency(v.spent))
        m2.metric("Free", format_currency(v.free))
        if v.recent_transactions:
            st.dataframe(pd.DataFrame([{
                "Counterparty": t.counterparty,
                "Amount": format_currency(t.amount),
                "Date": format_date(t.date),
            } for t in v.recent_transactions]), use_container_width=True, hide_index=True)

def budgets_crud_section(items: List[Budget], user_id: str, categories: List[str]) -> Optional[List[Budget]]:
    colors = color_options(items, user_id)

    st.markdown("### Add / Update")
    with st.form("budget_form", clear_on_submit=True):
        c1, c2, c3 = st.columns([2, 1, 1])
        category = c1.selectbox("Budget Category", options=categories or [""])
        amount = c2.number_input("Maximum Spend ($)", min_value=0.01, value=10.0, step=10.0, format="%.2f")
        color = c3.selectbox("Theme", options=list(colors),
                             format_func=lambda name: f"{name} (already used)" if colors[name] else name)
        row_id = st.text_input("Existing ID (optional for update)", value="")
        ok = st.form_submit_button("Save")
        if ok:
            if not category:
                st.error("Pick a category.")
                return None
            try:
                if row_id.strip():
                    if find_budget(items, row_id.strip()) is None:
                        st.error(f"No budget with ID {row_id.strip()}.")
                        return None
                    return update_budget(items, row_id.strip(), category, amount, color)
                return create_budget(items, user_id, category, amount, color)
            except ValueError as e:
                st.error(str(e))
                return None

    if items:
        labels = {b.id: f"{b.category} ({b.id})" for b in items}
        del_id = st.selectbox("Delete budget (select ID)", options=[""] + list(labels),
                              format_func=lambda i: labels.get(i, ""))
        if del_id and st.button("Delete selected budget", type="primary"):
            return delete_budget(items, del_id)
    return None
