import pytest

from taskflow.users.schemas import UserRequest, UserRole
from taskflow.users.validation import validate_user


def test_valid_user_has_no_violations() -> None:
    payload = UserRequest(name="Test User", email="test@example.com")

    assert payload.role == UserRole.USER
    assert validate_user(payload) == []


@pytest.mark.parametrize(
    "name, message",
    [
        (None, "Name is required"),
        ("  ", "Name is required"),
        ("ab", "Name must be between 3 and 50 characters"),
        ("n" * 51, "Name must be between 3 and 50 characters"),
    ],
)
def test_invalid_name(name: str | None, message: str) -> None:
    violations = validate_user(UserRequest(name=name, email="test@example.com"))

    assert [(v.field, v.message) for v in violations] == [("name", message)]


@pytest.mark.parametrize(
    "email, message",
    [
        (None, "Email is required"),
        ("", "Email is required"),
        ("not-an-email", "Email format is invalid"),
        ("user@", "Email format is invalid"),
        ("two@@example.com", "Email format is invalid"),
    ],
)
def test_invalid_email(email: str | None, message: str) -> None:
    violations = validate_user(UserRequest(name="Test User", email=email))

    assert [(v.field, v.message) for v in violations] == [("email", message)]


def test_explicit_null_role_is_rejected() -> None:
    violations = validate_user(
        UserRequest(name="Test User", email="test@example.com", role=None)
    )

    assert [(v.field, v.message) for v in violations] == [("role", "Role is required")]
