from datetime import datetime
from flask_login import UserMixin
from ..extensions import db, login_manager
from .records import UserRecord


class User(UserMixin, db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)  # opaque, hashed upstream
    designation = db.Column(db.String(200))
    created_at = db.Column(db.DateTime, default=datetime.now, nullable=False)

    categories = db.relationship("Category", backref="user", lazy=True, cascade="all, delete-orphan")
    transactions = db.relationship("Transaction", backref="user", lazy=True, cascade="all, delete-orphan")
    budgets = db.relationship("Budget", backref="user", lazy=True, cascade="all, delete-orphan")

    def to_record(self) -> UserRecord:
        return UserRecord(
            user_id=self.id,
            name=self.name,
            email=self.email,
            designation=self.designation,
            created_at=self.created_at,
        )


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))
