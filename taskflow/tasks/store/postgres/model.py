from datetime import datetime
from sqlalchemy import String, Integer, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.common.database import Base
from taskflow.config import get_settings


settings = get_settings()


class TaskModel(Base):
    __tablename__ = settings.TASKS_NAMESPACE

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    assigned_to_id: Mapped[int | None] = mapped_column(
        Integer, nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __init__(
        self,
        title: str,
        status: str,
        created_at: datetime,
        description: str | None = None,
        assigned_to_id: int | None = None,
    ):
        self.title = title
        self.description = description
        self.status = status
        self.assigned_to_id = assigned_to_id
        self.created_at = created_at
