"""
Read-only aggregates over a user's transactions.

Sums are computed in the database and always come back as a two-place
``Decimal``; an empty match is ``Decimal("0.00")``, never ``None``.
"""

from datetime import date
from decimal import Decimal
from typing import List

from sqlalchemy import extract, func

from ..errors import InvalidArgument
from ..extensions import db
from ..models import Category, CategoryTotal, CategoryType, Transaction
from .common import day_start, next_day_start, to_total


def get_total_expenses(user_id: int, start_date: date, end_date: date) -> Decimal:
    """Sum every transaction of the user dated within ``[start_date, end_date]``.

    Both days are included in full, so a transaction at 23:59 on
    ``end_date`` counts; a plain BETWEEN over the timestamp would drop it.
    Category type is not considered, so income rows count towards the total
    as well.
    """
    total = db.session.query(func.coalesce(func.sum(Transaction.amount), 0)).filter(
        Transaction.user_id == user_id,
        Transaction.transaction_date >= day_start(start_date),
        Transaction.transaction_date < next_day_start(end_date),
    ).scalar()
    return to_total(total)


def get_expenses_by_category(user_id: int) -> List[CategoryTotal]:
    """Per category name, the total of the user's Expense-type transactions.

    Categories without expense transactions do not appear. Row order is
    whatever the grouping yields.
    """
    rows = (
        db.session.query(Category.name, func.sum(Transaction.amount))
        .join(Transaction, Transaction.category_id == Category.id)
        .filter(Category.type == CategoryType.EXPENSE, Transaction.user_id == user_id)
        .group_by(Category.name)
        .all()
    )
    return [CategoryTotal(category=name, total=to_total(total)) for name, total in rows]


def get_monthly_expenses(user_id: int, year: int, month: int) -> Decimal:
    """Sum all of the user's transactions dated in the given calendar month.

    Despite the name this includes Income categories too.
    """
    for value in (year, month):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"Invalid year or month: {value!r}")
    if not 1 <= month <= 12:
        raise InvalidArgument(f"Invalid month: {month}")
    total = db.session.query(func.coalesce(func.sum(Transaction.amount), 0)).filter(
        Transaction.user_id == user_id,
        extract("year", Transaction.transaction_date) == year,
        extract("month", Transaction.transaction_date) == month,
    ).scalar()
    return to_total(total)
