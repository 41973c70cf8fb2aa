from datetime import datetime, timezone
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import declarative_base


Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    try:
        engine = create_engine(database_url)
    except Exception as e:
        raise RuntimeError("Failed to create database engine") from e

    # Model modules register their tables on Base when imported
    import taskflow.users.store.postgres.model  # noqa: F401
    import taskflow.tasks.store.postgres.model  # noqa: F401

    Base.metadata.create_all(engine)
    return engine


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way back; stored values are always UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
