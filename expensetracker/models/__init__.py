from .records import BudgetRecord, CategoryRecord, CategoryTotal, CategoryType, TransactionRecord, UserRecord
from .user import User
from .category import Category
from .transaction import Transaction
from .budget import Budget

__all__ = [
    "User",
    "Category",
    "CategoryType",
    "Transaction",
    "Budget",
    "UserRecord",
    "CategoryRecord",
    "TransactionRecord",
    "BudgetRecord",
    "CategoryTotal",
]
