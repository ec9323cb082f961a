from datetime import date
from typing import List

from ..errors import InvalidArgument, NotFound
from ..extensions import db
from ..log import get_logger
from ..models import Budget, BudgetRecord
from .common import as_date, atomic, require_owned_category, require_user, to_money

log = get_logger(__name__)


def set_budget(user_id: int, category_id: int, amount, start_date: date, end_date: date) -> int:
    """Plan ``amount`` for a category over ``[start_date, end_date]``.

    Budgets are never merged or checked for overlap; several may cover the
    same category and days.
    """
    amount = to_money(amount)
    start_date, end_date = as_date(start_date), as_date(end_date)
    if start_date > end_date:
        raise InvalidArgument("Budget start date must not be after its end date")

    with atomic():
        require_user(user_id)
        require_owned_category(user_id, category_id)
        budget = Budget(
            user_id=user_id,
            category_id=category_id,
            amount=amount,
            start_date=start_date,
            end_date=end_date,
        )
        db.session.add(budget)

    log.info("budget_set", budget_id=budget.id, user_id=user_id, category_id=category_id,
             amount=str(amount))
    return budget.id


def delete_budget(budget_id: int) -> None:
    with atomic():
        budget = db.session.get(Budget, budget_id)
        if budget is None:
            raise NotFound(f"Budget {budget_id} not found")
        db.session.delete(budget)
    log.info("budget_deleted", budget_id=budget_id)


def list_budgets(user_id: int) -> List[BudgetRecord]:
    rows = Budget.query.filter_by(user_id=user_id).order_by(Budget.start_date, Budget.id).all()
    return [b.to_record() for b in rows]
