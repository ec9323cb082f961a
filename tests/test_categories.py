"""Tests for the category store."""

from datetime import date

import pytest
from sqlalchemy import text

from expensetracker.errors import InvalidArgument, NotFound, ReferentialConflict
from expensetracker.extensions import db
from expensetracker.models import Budget, Category, CategoryType, Transaction
from expensetracker.services import (
    add_category,
    add_transaction,
    delete_category,
    list_categories,
    parse_category_type,
    set_budget,
)


class TestParseCategoryType:

    @pytest.mark.parametrize("value,expected", [
        ("Income", CategoryType.INCOME),
        ("Expense", CategoryType.EXPENSE),
        (CategoryType.EXPENSE, CategoryType.EXPENSE),
    ])
    def test_accepts_exact_values(self, value, expected):
        assert parse_category_type(value) is expected

    @pytest.mark.parametrize("value", ["Savings", "expense", "INCOME", "", None, 1])
    def test_rejects_everything_else(self, value):
        with pytest.raises(InvalidArgument, match="Invalid Category Type!"):
            parse_category_type(value)


class TestAddCategory:

    def test_expense_category_created(self, user_id):
        cid = add_category(user_id, "Rent", "Expense")

        category = db.session.get(Category, cid)
        assert category.user_id == user_id
        assert category.name == "Rent"
        assert category.type is CategoryType.EXPENSE

    def test_type_persisted_as_its_label(self, user_id):
        add_category(user_id, "Salary", "Income")
        stored = db.session.execute(text("SELECT type FROM categories")).scalar()
        assert stored == "Income"

    def test_invalid_type_writes_nothing(self, user_id, rent_id):
        before = Category.query.count()
        with pytest.raises(InvalidArgument) as excinfo:
            add_category(user_id, "Rent", "Savings")
        assert str(excinfo.value) == "Invalid Category Type!"
        assert Category.query.count() == before

    def test_unknown_user(self, app):
        with pytest.raises(NotFound):
            add_category(404, "Rent", "Expense")
        assert Category.query.count() == 0

    def test_missing_name_rejected(self, user_id):
        with pytest.raises(InvalidArgument):
            add_category(user_id, "", "Expense")


class TestDeleteCategory:

    def test_unused_category_deleted(self, rent_id, food_id):
        delete_category(rent_id)
        assert db.session.get(Category, rent_id) is None
        assert db.session.get(Category, food_id) is not None

    def test_unknown_category(self, app):
        with pytest.raises(NotFound):
            delete_category(7)

    def test_blocked_by_transactions(self, user_id, rent_id):
        add_transaction(user_id, rent_id, 100)
        with pytest.raises(ReferentialConflict):
            delete_category(rent_id)
        assert db.session.get(Category, rent_id) is not None

    def test_blocked_by_budgets(self, user_id, rent_id):
        set_budget(user_id, rent_id, 500, date(2024, 1, 1), date(2024, 1, 31))
        with pytest.raises(ReferentialConflict):
            delete_category(rent_id)

    def test_cascade_removes_dependents(self, user_id, rent_id, food_id):
        add_transaction(user_id, rent_id, 100)
        add_transaction(user_id, food_id, 20)
        set_budget(user_id, rent_id, 500, date(2024, 1, 1), date(2024, 1, 31))

        delete_category(rent_id, cascade=True)

        assert db.session.get(Category, rent_id) is None
        assert Transaction.query.count() == 1
        assert Budget.query.count() == 0


class TestListCategories:

    def test_filters_by_owner_and_type(self, user_id, other_user_id, rent_id, food_id, salary_id):
        add_category(other_user_id, "Travel", "Expense")

        names = [c.name for c in list_categories(user_id)]
        assert names == ["Food", "Rent", "Salary"]

        expense_names = [c.name for c in list_categories(user_id, "Expense")]
        assert expense_names == ["Food", "Rent"]

    def test_invalid_type_filter(self, user_id):
        with pytest.raises(InvalidArgument):
            list_categories(user_id, "Savings")
