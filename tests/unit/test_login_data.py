"""
Unit tests for login/signup test data helpers.
"""

import pytest

from shared import login_data
from shared.login_data import UserCredentials


pytestmark = pytest.mark.unit


def test_unique_emails_do_not_repeat():
    emails = {login_data.generate_unique_email("signup") for _ in range(20)}

    assert len(emails) == 20
    assert all(email.startswith("signup") and email.endswith("@example.com") for email in emails)


def test_generate_signup_user_is_valid():
    user = login_data.generate_signup_user()

    assert isinstance(user, UserCredentials)
    assert user.is_valid is True
    assert user.name.startswith("New User")


def test_generate_address_has_every_required_key():
    address = login_data.generate_address()

    assert set(address) == {
        "first_name",
        "last_name",
        "company",
        "address",
        "state",
        "city",
        "zipcode",
        "mobile_number",
    }
    assert all(address.values())


def test_named_invalid_users():
    assert login_data.get_user_with_wrong_password().description == "Existing user with incorrect password"
    assert "@" not in login_data.get_user_with_invalid_email().email
    assert login_data.get_empty_credentials().email == ""
    assert login_data.get_random_invalid_user() in login_data.INVALID_USERS


@pytest.mark.parametrize("count, valid", [(1, 0), (3, 1), (4, 2), (6, 2)])
def test_data_driven_users_put_valid_users_first(count, valid):
    users = login_data.get_users_for_data_driven_test(count)

    assert len(users) == count
    assert [u.is_valid for u in users] == [True] * valid + [False] * (count - valid)


def test_data_driven_users_capped_by_pool():
    pool = len(login_data.VALID_USERS) + len(login_data.INVALID_USERS)

    assert len(login_data.get_users_for_data_driven_test(50)) == pool


def test_performance_users_are_unique_and_invalid():
    users = login_data.generate_performance_test_users(5)

    assert len({u.email for u in users}) == 5
    assert not any(u.is_valid for u in users)


def test_password_pools():
    assert login_data.get_weak_password() in login_data.COMMON_PASSWORDS
    assert login_data.get_strong_password() in login_data.STRONG_PASSWORDS


def test_credentials_are_immutable():
    user = login_data.get_valid_user()

    with pytest.raises(AttributeError):
        user.password = "changed"
