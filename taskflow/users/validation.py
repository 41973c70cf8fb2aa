from email_validator import EmailNotValidError, validate_email

from taskflow.common.schemas import FieldViolation
from taskflow.users.schemas import UserRequest

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_user(payload: UserRequest) -> list[FieldViolation]:
    violations: list[FieldViolation] = []

    if payload.name is None or not payload.name.strip():
        violations.append(FieldViolation(field="name", message="Name is required"))
    elif not NAME_MIN_LENGTH <= len(payload.name) <= NAME_MAX_LENGTH:
        violations.append(
            FieldViolation(
                field="name",
                message=f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters",
            )
        )

    if payload.email is None or not payload.email.strip():
        violations.append(FieldViolation(field="email", message="Email is required"))
    elif not is_valid_email(payload.email):
        violations.append(
            FieldViolation(field="email", message="Email format is invalid")
        )

    if payload.role is None:
        violations.append(FieldViolation(field="role", message="Role is required"))

    return violations
