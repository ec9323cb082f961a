from datetime import date, datetime
from typing import List, Optional

from ..errors import NotFound
from ..extensions import db
from ..log import get_logger
from ..models import Transaction, TransactionRecord
from .common import atomic, day_start, next_day_start, require_owned_category, require_user, to_money

log = get_logger(__name__)


def add_transaction(user_id: int, category_id: int, amount, description: Optional[str] = None,
                    transaction_date: Optional[datetime] = None) -> int:
    """Record a transaction and return its id.

    ``transaction_date`` defaults to the moment of insertion. The category
    must belong to ``user_id``; the ownership check and the insert commit
    together.
    """
    amount = to_money(amount)
    fields = {}
    if transaction_date is not None:
        if not isinstance(transaction_date, datetime):
            transaction_date = day_start(transaction_date)
        fields["transaction_date"] = transaction_date

    with atomic():
        require_user(user_id)
        category = require_owned_category(user_id, category_id)
        tx = Transaction(
            user_id=user_id,
            category_id=category.id,
            amount=amount,
            description=description,
            **fields,
        )
        db.session.add(tx)

    log.info("transaction_added", transaction_id=tx.id, user_id=user_id, category_id=category_id,
             amount=str(amount))
    return tx.id


def delete_transaction(transaction_id: int) -> None:
    with atomic():
        tx = db.session.get(Transaction, transaction_id)
        if tx is None:
            raise NotFound(f"Transaction {transaction_id} not found")
        db.session.delete(tx)
    log.info("transaction_deleted", transaction_id=transaction_id)


def list_transactions(user_id: int, start_date: Optional[date] = None,
                      end_date: Optional[date] = None) -> List[TransactionRecord]:
    query = Transaction.query.filter_by(user_id=user_id)
    if start_date is not None:
        query = query.filter(Transaction.transaction_date >= day_start(start_date))
    if end_date is not None:
        query = query.filter(Transaction.transaction_date < next_day_start(end_date))
    rows = query.order_by(Transaction.transaction_date.desc(), Transaction.id.desc()).all()
    return [tx.to_record() for tx in rows]
