from ..extensions import db
from .records import BudgetRecord


class Budget(db.Model):
    __tablename__ = "budgets"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)  # inclusive

    __table_args__ = (
        db.CheckConstraint("start_date <= end_date", name="ck_budget_window"),
    )

    def to_record(self) -> BudgetRecord:
        return BudgetRecord(
            budget_id=self.id,
            user_id=self.user_id,
            category_id=self.category_id,
            amount=self.amount,
            start_date=self.start_date,
            end_date=self.end_date,
        )
