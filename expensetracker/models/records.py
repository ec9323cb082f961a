"""Plain records handed back to callers instead of live ORM rows."""

import enum
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


class CategoryType(enum.Enum):
    INCOME = "Income"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class UserRecord:
    user_id: int
    name: str
    email: str
    designation: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class CategoryRecord:
    category_id: int
    user_id: int
    name: str
    type: CategoryType


@dataclass(frozen=True)
class TransactionRecord:
    transaction_id: int
    user_id: int
    category_id: int
    amount: Decimal
    description: Optional[str]
    transaction_date: datetime


@dataclass(frozen=True)
class BudgetRecord:
    budget_id: int
    user_id: int
    category_id: int
    amount: Decimal
    start_date: date
    end_date: date


@dataclass(frozen=True)
class CategoryTotal:
    category: str
    total: Decimal
