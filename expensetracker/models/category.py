from ..extensions import db
from .records import CategoryRecord, CategoryType


class Category(db.Model):
    __tablename__ = "categories"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    type = db.Column(
        db.Enum(CategoryType, name="category_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )

    transactions = db.relationship("Transaction", backref="category", lazy=True, cascade="all, delete-orphan")
    budgets = db.relationship("Budget", backref="category", lazy=True, cascade="all, delete-orphan")

    def to_record(self) -> CategoryRecord:
        return CategoryRecord(
            category_id=self.id,
            user_id=self.user_id,
            name=self.name,
            type=self.type,
        )
