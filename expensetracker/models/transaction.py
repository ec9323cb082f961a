from datetime import datetime
from ..extensions import db
from .records import TransactionRecord


class Transaction(db.Model):
    __tablename__ = "transactions"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    description = db.Column(db.Text)
    transaction_date = db.Column(db.DateTime, default=datetime.now, nullable=False)

    def to_record(self) -> TransactionRecord:
        return TransactionRecord(
            transaction_id=self.id,
            user_id=self.user_id,
            category_id=self.category_id,
            amount=self.amount,
            description=self.description,
            transaction_date=self.transaction_date,
        )
