from typing import List, Optional

from ..errors import InvalidArgument, NotFound, ReferentialConflict
from ..extensions import db
from ..log import get_logger
from ..models import Budget, Category, CategoryRecord, CategoryType, Transaction
from .common import atomic, require_text, require_user

log = get_logger(__name__)


def parse_category_type(value) -> CategoryType:
    """Accept a CategoryType or its exact, case-sensitive name ("Income"/"Expense")."""
    if isinstance(value, CategoryType):
        return value
    try:
        return CategoryType(value)
    except (ValueError, TypeError):
        raise InvalidArgument("Invalid Category Type!") from None


def add_category(user_id: int, name: str, type) -> int:
    try:
        category_type = parse_category_type(type)
        require_text(name, "Category name")
    except InvalidArgument as exc:
        log.warning("category_rejected", user_id=user_id, error=exc.message)
        raise

    with atomic():
        require_user(user_id)
        category = Category(user_id=user_id, name=name, type=category_type)
        db.session.add(category)

    log.info("category_added", category_id=category.id, user_id=user_id, type=category_type.value)
    return category.id


def delete_category(category_id: int, cascade: bool = False) -> None:
    with atomic():
        category = db.session.get(Category, category_id)
        if category is None:
            raise NotFound(f"Category {category_id} not found")
        if not cascade:
            used = (
                Transaction.query.filter_by(category_id=category_id).first()
                or Budget.query.filter_by(category_id=category_id).first()
            )
            if used:
                log.warning("category_delete_blocked", category_id=category_id)
                raise ReferentialConflict("Cannot delete category in use by transactions or budgets")
        db.session.delete(category)
    log.info("category_deleted", category_id=category_id, cascade=cascade)


def list_categories(user_id: int, type: Optional[object] = None) -> List[CategoryRecord]:
    query = Category.query.filter_by(user_id=user_id)
    if type is not None:
        query = query.filter(Category.type == parse_category_type(type))
    return [c.to_record() for c in query.order_by(Category.name, Category.id).all()]
