from taskflow.common.schemas import FieldViolation
from taskflow.tasks.schemas import TaskRequest

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def validate_task(payload: TaskRequest) -> list[FieldViolation]:
    violations: list[FieldViolation] = []

    if payload.title is None or not payload.title.strip():
        violations.append(FieldViolation(field="title", message="Title is required"))
    elif not TITLE_MIN_LENGTH <= len(payload.title) <= TITLE_MAX_LENGTH:
        violations.append(
            FieldViolation(
                field="title",
                message=f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters",
            )
        )

    if (
        payload.description is not None
        and len(payload.description) > DESCRIPTION_MAX_LENGTH
    ):
        violations.append(
            FieldViolation(
                field="description",
                message=f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
            )
        )

    if payload.status is None:
        violations.append(FieldViolation(field="status", message="Status is required"))

    return violations
