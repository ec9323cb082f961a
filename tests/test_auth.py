"""Tests for login validation."""

import pytest

from expensetracker.errors import Unauthenticated
from expensetracker.services import validate_user_login


def test_valid_credentials_return_user(user_id):
    record = validate_user_login("rahul@email.com", "hashed_password1")
    assert record.user_id == user_id
    assert record.name == "Rahul Sharma"
    assert not hasattr(record, "password_hash")


def test_wrong_hash_and_unknown_email_fail_identically(user_id):
    with pytest.raises(Unauthenticated) as wrong_hash:
        validate_user_login("rahul@email.com", "hashed_password2")
    with pytest.raises(Unauthenticated) as unknown_email:
        validate_user_login("nobody@email.com", "hashed_password1")

    assert str(wrong_hash.value) == "Invalid email or password"
    assert str(unknown_email.value) == str(wrong_hash.value)
    assert type(unknown_email.value) is type(wrong_hash.value)


def test_match_is_exact(user_id):
    with pytest.raises(Unauthenticated):
        validate_user_login("RAHUL@email.com", "hashed_password1")
