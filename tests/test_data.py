import pytest
from datetime import date
import data
from models import Budget, Transaction

@pytest.fixture
def store(tmp_path, monkeypatch):
    monkeypatch.setattr(data, "DATA_DIR", tmp_path)
    monkeypatch.setattr(data, "TRANSACTIONS_FILE", tmp_path / "transactions.json")
    monkeypatch.setattr(data, "BUDGETS_FILE", tmp_path / "budgets.json")
    return tmp_path

def tx(user_id, d, name="Acme"):
    return Transaction(user_id=user_id, counterparty=name, amount=-100, date=d, category="Bills", is_recurring=True)

def test_missing_files_are_empty(store):
    assert data.load_transactions("u1") == []
    assert data.load_budgets("u1") == []

def test_save_keeps_other_users(store):
    mine = [tx("u1", date(2024, 1, 1))]
    theirs = [tx("u2", date(2024, 2, 1), "Bolt")]
    data.save_transactions("u1", mine)
    data.save_transactions("u2", theirs)
    data.save_transactions("u1", mine + [tx("u1", date(2024, 1, 2), "Crane")])

    assert [t.counterparty for t in data.load_transactions("u1")] == ["Acme", "Crane"]
    assert data.load_transactions("u2") == theirs

def test_budgets_round_trip(store):
    b = Budget(user_id="u1", category="Bills", amount=5000, color="Green")
    data.save_budgets("u1", [b])
    assert data.load_budgets("u1") == [b]

def test_corrupt_file_is_treated_as_empty(store):
    (store / "transactions.json").write_text("{not json", encoding="utf-8")
    assert data.load_transactions("u1") == []

def test_invalid_records_are_skipped(store):
    (store / "transactions.json").write_text(
        '[{"user_id": "u1", "counterparty": "Acme"}]', encoding="utf-8"
    )
    assert data.load_transactions("u1") == []

def test_latest_transaction_date(store):
    assert data.get_latest_transaction_date("u1") == date.today()
    data.save_transactions("u1", [tx("u1", date(2024, 1, 5)), tx("u1", date(2024, 8, 19)), tx("u1", date(2024, 3, 1))])
    assert data.get_latest_transaction_date("u1") == date(2024, 8, 19)

def test_non_record_json_is_ignored(store):
    (store / "transactions.json").write_text('{"a": 1}', encoding="utf-8")
    assert data.load_transactions("u1") == []

    (store / "transactions.json").write_text('[1, "x", null]', encoding="utf-8")
    assert data.load_transactions("u1") == []

    data.save_transactions("u1", [tx("u1", date(2024, 1, 1))])
    assert [t.counterparty for t in data.load_transactions("u1")] == ["Acme"]
