from datetime import datetime
from enum import Enum
from pydantic import BaseModel


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(BaseModel):
    id: int | None = None
    name: str
    email: str
    role: UserRole = UserRole.USER
    created_at: datetime


class UserRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    role: UserRole | None = UserRole.USER
