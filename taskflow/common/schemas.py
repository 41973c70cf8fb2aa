from pydantic import BaseModel


class FieldViolation(BaseModel):
    field: str
    message: str
