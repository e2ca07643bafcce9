import streamlit as st
from typing import Tuple
from config import DEFAULT_PAGE_SIZE, PAGE_SIZES
from helpers import clamp_page, page_count, page_numbers

LIST_KEYS = ("tx", "bills")

def reset_page(key: str) -> None:
    st.session_state[f"{key}_page"] = 1

def reset_all_pages() -> None:
    for key in LIST_KEYS:
        reset_page(key)

def page_controls(key: str) -> Tuple[int, int]:
    """Current (page, size) for the list identified by `key`."""
    size = st.selectbox("Rows per page", options=PAGE_SIZES, index=PAGE_SIZES.index(DEFAULT_PAGE_SIZE),
                        key=f"{key}_size", on_change=reset_page, args=(key,))
    page = st.session_state.get(f"{key}_page", 1)
    return page, size

def fit_page(key: str, total: int, size: int) -> int:
    """Pull the remembered page back into range after the list shrank."""
    page = clamp_page(st.session_state.get(f"{key}_page", 1), total, size)
    st.session_state[f"{key}_page"] = page
    return page

def _go(key: str, page: int) -> None:
    st.session_state[f"{key}_page"] = page
    st.rerun()

def pager(key: str, total: int, size: int) -> None:
    current = st.session_state.get(f"{key}_page", 1)
    n_pages = page_count(total, size)
    if n_pages <= 1:
        return
    links = page_numbers(current, n_pages)
    cols = st.columns(len(links) + 2)
    if cols[0].button("◀ Prev", key=f"{key}_prev", disabled=current <= 1):
        _go(key, max(current - 1, 1))
    for col, p in zip(cols[1:-1], links):
        if isinstance(p, str):
            col.markdown("…")
        elif col.button(str(p), key=f"{key}_p{p}", type="primary" if p == current else "secondary"):
            _go(key, p)
    if cols[-1].button("Next ▶", key=f"{key}_next", disabled=current >= n_pages):
        _go(key, min(current + 1, n_pages))
