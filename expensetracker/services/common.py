"""Helpers shared by the store modules."""

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from ..errors import InvalidArgument, NotFound
from ..extensions import db
from ..models import Category, User

CENTS = Decimal("0.01")
# DECIMAL(10,2)
MAX_AMOUNT = Decimal("99999999.99")


@contextmanager
def atomic():
    """Commit everything done in the block, or roll all of it back."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def to_money(value) -> Decimal:
    """Parse ``value`` into a non-negative amount with two decimal places.

    Extra precision is rounded half away from zero, the way a fixed-point
    DECIMAL column rounds on insert.
    """
    if isinstance(value, bool):
        raise InvalidArgument("Invalid amount")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidArgument("Invalid amount") from None
    if not amount.is_finite():
        raise InvalidArgument("Invalid amount")
    # quantize fails past the context precision
    if abs(amount) > MAX_AMOUNT + CENTS:
        raise InvalidArgument("Amount is too large")

    amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    if amount < 0:
        raise InvalidArgument("Amount must not be negative")
    if amount > MAX_AMOUNT:
        raise InvalidArgument("Amount is too large")
    return amount + 0  # folds -0.00 into 0.00


def to_total(value) -> Decimal:
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"Invalid date: {value!r}") from None


def require_text(value, field):
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field} is required")
    return value


def require_user(user_id) -> User:
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound(f"User {user_id} not found")
    return user


def require_owned_category(user_id, category_id) -> Category:
    category = db.session.get(Category, category_id)
    if category is None:
        raise NotFound(f"Category {category_id} not found")
    if category.user_id != user_id:
        raise InvalidArgument("Category does not belong to this user")
    return category


def day_start(value) -> datetime:
    return datetime.combine(as_date(value), time.min)


def next_day_start(value) -> datetime:
    return datetime.combine(as_date(value) + timedelta(days=1), time.min)
