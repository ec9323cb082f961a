"""
Ledger operations.

Each store module exposes plain functions that run inside the current Flask
app context and talk to the database through ``db.session``.
"""

from .users import add_user, update_user, delete_user, get_user, get_user_by_email
from .categories import add_category, delete_category, list_categories, parse_category_type
from .transactions import add_transaction, delete_transaction, list_transactions
from .budgets import set_budget, delete_budget, list_budgets
from .reports import get_total_expenses, get_expenses_by_category, get_monthly_expenses
from .auth import validate_user_login

__all__ = [
    "add_user",
    "update_user",
    "delete_user",
    "get_user",
    "get_user_by_email",
    "add_category",
    "delete_category",
    "list_categories",
    "parse_category_type",
    "add_transaction",
    "delete_transaction",
    "list_transactions",
    "set_budget",
    "delete_budget",
    "list_budgets",
    "get_total_expenses",
    "get_expenses_by_category",
    "get_monthly_expenses",
    "validate_user_login",
]
