import pytest
from datetime import date
import data
from helpers import InvalidSortKeyError
from models import Transaction
from recurring import bill_status, classify_recurring_bills, get_recurring_bills, get_recurring_bill_summary
from search import search

CURRENT = date(2024, 1, 10)

def bill(name, d, amount=-1000, recurring=True, id=None):
    return Transaction(id=id or f"{name}-{d}", user_id="u1", counterparty=name, amount=amount,
                       date=d, category="Bills", is_recurring=recurring)

def by_name(bills):
    return {(b.counterparty, b.date): b.status for b in bills}

def test_expected_bills_are_classified():
    txs = [
        bill("Acme", date(2023, 12, 3)),
        bill("Bolt", date(2023, 12, 12)),
        bill("Crane", date(2023, 12, 25)),
    ]
    assert by_name(classify_recurring_bills(txs, CURRENT)) == {
        ("Acme", date(2024, 1, 3)): "overdue",
        ("Bolt", date(2024, 1, 12)): "soon",
        ("Crane", date(2024, 1, 25)): "upcoming",
    }

def test_bill_posted_this_month_is_paid_and_not_expected():
    txs = [
        bill("Acme", date(2023, 12, 3)),
        bill("Acme", date(2024, 1, 5)),
        bill("Bolt", date(2023, 12, 12)),
        bill("Crane", date(2023, 12, 25)),
    ]
    bills = classify_recurring_bills(txs, CURRENT)
    assert by_name(bills) == {
        ("Acme", date(2024, 1, 5)): "paid",
        ("Bolt", date(2024, 1, 12)): "soon",
        ("Crane", date(2024, 1, 25)): "upcoming",
    }
    # default sort is newest first
    assert [b.counterparty for b in bills] == ["Crane", "Bolt", "Acme"]

def test_only_recurring_and_last_two_months_count():
    txs = [
        bill("Dyno", date(2023, 12, 20), recurring=False),
        bill("Echo", date(2023, 11, 20)),
        bill("Fern", date(2024, 1, 2), recurring=False),
    ]
    assert classify_recurring_bills(txs, CURRENT) == []

def test_counterparty_match_is_exact():
    txs = [bill("Acme", date(2023, 12, 3)), bill("acme", date(2024, 1, 4))]
    assert by_name(classify_recurring_bills(txs, CURRENT)) == {
        ("acme", date(2024, 1, 4)): "paid",
        ("Acme", date(2024, 1, 3)): "overdue",
    }

def test_bill_status_boundaries():
    assert bill_status(date(2024, 1, 9), CURRENT) == "overdue"
    assert bill_status(date(2024, 1, 10), CURRENT) == "soon"
    assert bill_status(date(2024, 1, 14), CURRENT) == "soon"
    assert bill_status(date(2024, 1, 15), CURRENT) == "upcoming"

def test_expected_date_clamps_to_month_end():
    txs = [bill("Gym", date(2024, 1, 31))]
    bills = classify_recurring_bills(txs, date(2024, 2, 10))
    assert bills[0].date == date(2024, 2, 29)
    assert bills[0].status == "upcoming"

def test_sort_key_is_applied_and_validated():
    txs = [bill("Bolt", date(2023, 12, 12), amount=-50), bill("Acme", date(2023, 12, 25), amount=-300)]
    assert [b.counterparty for b in classify_recurring_bills(txs, CURRENT, sort="name:asc")] == ["Acme", "Bolt"]
    assert [b.amount for b in classify_recurring_bills(txs, CURRENT, sort="amount:asc")] == [-50, -300]
    with pytest.raises(InvalidSortKeyError):
        classify_recurring_bills([], CURRENT, sort="due:asc")

def test_summary_totals_by_status():
    txs = [
        bill("Acme", date(2023, 12, 3), amount=-100),
        bill("Paid", date(2024, 1, 2), amount=-200),
        bill("Bolt", date(2023, 12, 12), amount=-400),
        bill("Crane", date(2023, 12, 25), amount=-800),
    ]
    summary = get_recurring_bill_summary(classify_recurring_bills(txs, CURRENT))
    assert (summary.all.total, summary.all.count) == (1500, 4)
    assert (summary.paid.total, summary.paid.count) == (200, 1)
    assert (summary.soon.total, summary.soon.count) == (400, 1)
    assert (summary.upcoming.total, summary.upcoming.count) == (800, 1)

def test_summary_of_nothing_is_zero():
    summary = get_recurring_bill_summary([])
    assert summary.all.total == 0 and summary.all.count == 0
    assert summary.soon.count == 0

def test_search_does_not_change_summary():
    txs = [bill("Acme", date(2024, 1, 2)), bill("Bolt", date(2023, 12, 12)), bill("Crane", date(2023, 12, 25))]
    bills = classify_recurring_bills(txs, CURRENT)
    before = get_recurring_bill_summary(bills)
    shown = search(bills, "bolt", ["counterparty"])
    assert [b.counterparty for b in shown] == ["Bolt"]
    assert get_recurring_bill_summary(bills) == before
    assert len(bills) == 3

def test_get_recurring_bills_reads_user_transactions(tmp_path, monkeypatch):
    monkeypatch.setattr(data, "DATA_DIR", tmp_path)
    monkeypatch.setattr(data, "TRANSACTIONS_FILE", tmp_path / "transactions.json")
    data.save_transactions("u1", [bill("Acme", date(2023, 12, 3))])
    data.save_transactions("u2", [bill("Other", date(2023, 12, 3)).model_copy(update={"user_id": "u2"})])

    bills = get_recurring_bills("u1", CURRENT)
    assert [(b.counterparty, b.status) for b in bills] == [("Acme", "overdue")]
