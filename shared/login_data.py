"""Test data for login and signup scenarios."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass

from faker import Faker

fake = Faker()


@dataclass(frozen=True)
class UserCredentials:
    """A user record used by login/signup scenarios."""

    email: str
    password: str
    name: str
    is_valid: bool
    description: str
    expected_user_name: str | None = None


VALID_USERS: tuple[UserCredentials, ...] = (
    UserCredentials(
        email="valid.user@example.com",
        password="ValidPassword123!",
        name="Valid User",
        expected_user_name="Valid User",
        is_valid=True,
        description="Standard valid user with proper credentials",
    ),
    UserCredentials(
        email="admin@example.com",
        password="AdminPass2024!",
        name="Admin User",
        expected_user_name="Admin User",
        is_valid=True,
        description="Admin user with elevated privileges",
    ),
)

INVALID_USERS: tuple[UserCredentials, ...] = (
    UserCredentials(
        email="nonexistent@example.com",
        password="AnyPassword123!",
        name="Nonexistent User",
        is_valid=False,
        description="User that does not exist in the system",
    ),
    UserCredentials(
        email="valid.user@example.com",
        password="WrongPassword!",
        name="Valid User",
        is_valid=False,
        description="Existing user with incorrect password",
    ),
    UserCredentials(
        email="invalid.email",
        password="ValidPassword123!",
        name="Invalid Email",
        is_valid=False,
        description="Invalid email format",
    ),
    UserCredentials(
        email="",
        password="ValidPassword123!",
        name="Empty Email",
        is_valid=False,
        description="Empty email field",
    ),
    UserCredentials(
        email="valid.user@example.com",
        password="",
        name="Valid User",
        is_valid=False,
        description="Empty password field",
    ),
)

EDGE_CASES: tuple[UserCredentials, ...] = (
    UserCredentials(
        email="very.long.email.address.that.should.still.work@example.com",
        password="LongEmailTest123!",
        name="Long Email User",
        is_valid=False,
        description="Very long email address",
    ),
    UserCredentials(
        email="special.chars+test@example.com",
        password="SpecialChars123!",
        name="Special Chars User",
        is_valid=False,
        description="Email with special characters",
    ),
    UserCredentials(
        email="case.sensitive@EXAMPLE.COM",
        password="CaseTest123!",
        name="Case Test User",
        is_valid=False,
        description="Mixed case email address",
    ),
)

COMMON_PASSWORDS: tuple[str, ...] = (
    "123456",
    "password",
    "password123",
    "admin",
    "qwerty",
    "letmein",
    "welcome",
    "123456789",
)

STRONG_PASSWORDS: tuple[str, ...] = (
    "MyStrongP@ssw0rd2024!",
    "SecureLogin#123$",
    "C0mpl3x&P@ssw0rd!",
    "Ungu3ss@bl3P@ss2024!",
)


def generate_unique_email(prefix: str = "test") -> str:
    """Generate a unique email address under example.com."""
    return f"{prefix}{int(time.time() * 1000)}_{fake.unique.random_int(1000, 9999)}@example.com"


def generate_unique_name(prefix: str = "Test User") -> str:
    """Generate a unique display name."""
    return f"{prefix} {int(time.time() * 1000)}"


def generate_signup_user() -> UserCredentials:
    """Build a fresh user suitable for the signup flow."""
    return UserCredentials(
        email=generate_unique_email("signup"),
        password="NewUser123!",
        name=generate_unique_name("New User"),
        is_valid=True,
        description="Dynamically generated signup user",
    )


def generate_address() -> dict[str, str]:
    """Build address details for the account information step."""
    return {
        "first_name": fake.first_name(),
        "last_name": fake.last_name(),
        "company": fake.company(),
        "address": fake.street_address(),
        "state": fake.state(),
        "city": fake.city(),
        "zipcode": fake.postcode(),
        "mobile_number": fake.msisdn(),
    }


def get_valid_user() -> UserCredentials:
    return VALID_USERS[0]


def get_invalid_user() -> UserCredentials:
    return INVALID_USERS[0]


def get_user_with_wrong_password() -> UserCredentials:
    return INVALID_USERS[1]


def get_user_with_invalid_email() -> UserCredentials:
    return INVALID_USERS[2]


def get_empty_credentials() -> UserCredentials:
    return INVALID_USERS[3]


def get_random_invalid_user() -> UserCredentials:
    return random.choice(INVALID_USERS)


def get_users_for_data_driven_test(count: int = 3) -> list[UserCredentials]:
    """
    Mix valid and invalid users for parametrized tests.

    Roughly half of the requested users are valid (bounded by what is
    available); the rest are drawn from the invalid pool.

    Args:
        count: Number of users wanted.

    Returns:
        At most ``count`` users, valid ones first.
    """
    users = list(VALID_USERS[: min(count // 2, len(VALID_USERS))])
    remaining = count - len(users)
    users.extend(INVALID_USERS[: min(remaining, len(INVALID_USERS))])
    return users[:count]


def generate_performance_test_users(count: int = 10) -> list[UserCredentials]:
    """Generate users that do not exist, for load-style login attempts."""
    return [
        UserCredentials(
            email=generate_unique_email(f"perf{i}"),
            password=f"PerfTest{i}123!",
            name=generate_unique_name(f"Perf User {i}"),
            is_valid=False,
            description=f"Performance test user {i + 1}",
        )
        for i in range(count)
    ]


def get_weak_password() -> str:
    return random.choice(COMMON_PASSWORDS)


def get_strong_password() -> str:
    return random.choice(STRONG_PASSWORDS)
