# data.py
# Local JSON persistence for transactions and budgets, filtered per user

import json
import logging
from datetime import date
from typing import Any, Dict, List, Sequence
from pathlib import Path

from pydantic import ValidationError

from config import (
    DATA_DIR,
    TRANSACTIONS_FILE, BUDGETS_FILE,
    EMPTY_TRANSACTIONS, EMPTY_BUDGETS,
)
from models import Budget, Transaction

logger = logging.getLogger(__name__)

def _ensure_dir():
    DATA_DIR.mkdir(parents=True, exist_ok=True)

def _read_json(path: Path, default):
    _ensure_dir()
    if not path.exists():
        return json.loads(json.dumps(default))
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {path.name}, using empty data: {e}")
        return json.loads(json.dumps(default))

def _write_json(path: Path, obj):
    _ensure_dir()
    tmp = path.with_suffix(".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
    tmp.replace(path)

def _load_for_user(path: Path, default, model, user_id: str) -> List[Any]:
    out = []
    rows = _read_json(path, default)
    if not isinstance(rows, list):
        logger.warning(f"Ignoring {path.name}: expected a list of records")
        return out
    for row in rows:
        if not isinstance(row, dict):
            logger.warning(f"Skipping non-record entry in {path.name}: {row!r}")
            continue
        if row.get("user_id") != user_id:
            continue
        try:
            out.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping invalid record {row.get('id')} in {path.name}: {e}")
    return out

def _save_for_user(path: Path, default, user_id: str, items: Sequence[Any]) -> None:
    existing = _read_json(path, default)
    if not isinstance(existing, list):
        existing = []
    others = [r for r in existing if isinstance(r, dict) and r.get("user_id") != user_id]
    rows: List[Dict[str, Any]] = [i.model_dump(mode="json") for i in items]
    _write_json(path, others + rows)

def load_transactions(user_id: str) -> List[Transaction]:
    return _load_for_user(TRANSACTIONS_FILE, EMPTY_TRANSACTIONS, Transaction, user_id)

def save_transactions(user_id: str, items: Sequence[Transaction]) -> None:
    _save_for_user(TRANSACTIONS_FILE, EMPTY_TRANSACTIONS, user_id, items)

def load_budgets(user_id: str) -> List[Budget]:
    return _load_for_user(BUDGETS_FILE, EMPTY_BUDGETS, Budget, user_id)

def save_budgets(user_id: str, items: Sequence[Budget]) -> None:
    _save_for_user(BUDGETS_FILE, EMPTY_BUDGETS, user_id, items)

def get_latest_transaction_date(user_id: str) -> date:
    """Reference "today" for a user: the date of their newest transaction."""
    transactions = load_transactions(user_id)
    if not transactions:
        return date.today()
    return max(t.date for t in transactions)
