from datetime import datetime
from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.common.database import Base
from taskflow.config import get_settings


settings = get_settings()


class UserModel(Base):
    __tablename__ = settings.USERS_NAMESPACE

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __init__(self, name: str, email: str, role: str, created_at: datetime):
        self.name = name
        self.email = email
        self.role = role
        self.created_at = created_at
