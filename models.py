from datetime import date as _date, datetime
from typing import Any, List, Literal
from uuid import uuid4
from pydantic import BaseModel, Field

BillStatus = Literal["paid", "overdue", "soon", "upcoming"]

class Transaction(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    counterparty: str
    avatar: str = ""
    amount: int  # minor units, negative for expenses
    date: _date
    category: str
    is_recurring: bool = False

class Budget(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    category: str
    amount: int = Field(ge=0)
    color: str
    created_at: datetime = Field(default_factory=datetime.now)

class RecurringBill(BaseModel):
    id: str
    counterparty: str
    avatar: str = ""
    amount: int
    date: _date
    status: BillStatus

class StatusTotal(BaseModel):
    total: int = 0
    count: int = 0

class BillSummary(BaseModel):
    all: StatusTotal
    paid: StatusTotal
    soon: StatusTotal
    upcoming: StatusTotal

class BudgetView(BaseModel):
    id: str
    category: str
    color: str
    amount: int
    spent: int
    free: int
    spent_percent: float
    recent_transactions: List[Transaction] = Field(default_factory=list)

class Page(BaseModel):
    items: List[Any]
    count: int

class ColorClasses(BaseModel, frozen=True):
    background: str
    foreground: str
