import pytest

from expensetracker import create_app
from expensetracker.config import TestConfig
from expensetracker.extensions import db
from expensetracker.models import CategoryType
from expensetracker.services import add_category, add_user


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def user_id(app):
    return add_user("Rahul Sharma", "rahul@email.com", "hashed_password1")


@pytest.fixture
def other_user_id(app):
    return add_user("Sophia Williams", "sophia@email.com", "hashed_password2")


@pytest.fixture
def rent_id(user_id):
    return add_category(user_id, "Rent", CategoryType.EXPENSE)


@pytest.fixture
def food_id(user_id):
    return add_category(user_id, "Food", "Expense")


@pytest.fixture
def salary_id(user_id):
    return add_category(user_id, "Salary", "Income")
