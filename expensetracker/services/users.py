from typing import Optional

from sqlalchemy.exc import IntegrityError

from ..errors import DuplicateKey, ReferentialConflict
from ..extensions import db
from ..log import get_logger
from ..models import Budget, Category, Transaction, User, UserRecord
from .common import atomic, require_text, require_user

log = get_logger(__name__)


def add_user(name: str, email: str, password_hash: str, designation: Optional[str] = None) -> int:
    """Register a user and return the new id.

    Email uniqueness is left to the unique constraint on ``users.email`` so
    two concurrent registrations cannot both pass a lookup and both insert.
    """
    require_text(name, "Name")
    require_text(email, "Email")
    require_text(password_hash, "Password hash")

    user = User(name=name, email=email, password_hash=password_hash, designation=designation)
    try:
        with atomic():
            db.session.add(user)
    except IntegrityError:
        log.warning("user_rejected", reason="duplicate_email")
        raise DuplicateKey("Email already registered") from None

    log.info("user_added", user_id=user.id)
    return user.id


def update_user(user_id: int, name: str, email: str) -> None:
    require_text(name, "Name")
    require_text(email, "Email")
    try:
        with atomic():
            user = require_user(user_id)
            user.name = name
            user.email = email
    except IntegrityError:
        log.warning("user_update_rejected", user_id=user_id, reason="duplicate_email")
        raise DuplicateKey("Email already registered") from None
    log.info("user_updated", user_id=user_id)


def delete_user(user_id: int, cascade: bool = False) -> None:
    """Delete a user.

    Fails with ReferentialConflict while categories, transactions or budgets
    still point at the user, unless ``cascade`` asks for them to go too.
    """
    with atomic():
        user = require_user(user_id)
        if not cascade and _has_dependents(user_id):
            log.warning("user_delete_blocked", user_id=user_id)
            raise ReferentialConflict(f"User {user_id} still has categories, transactions or budgets")
        db.session.delete(user)
    log.info("user_deleted", user_id=user_id, cascade=cascade)


def get_user(user_id: int) -> UserRecord:
    return require_user(user_id).to_record()


def get_user_by_email(email: str) -> Optional[UserRecord]:
    user = User.query.filter_by(email=email).first()
    return user.to_record() if user else None


def _has_dependents(user_id):
    for model in (Category, Transaction, Budget):
        if model.query.filter_by(user_id=user_id).first() is not None:
            return True
    return False
