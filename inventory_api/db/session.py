"""Database engine setup.

SQLite URLs (the dev and test defaults) get ``check_same_thread=False`` so the
session can be used from FastAPI's threadpool; an in-memory SQLite database
additionally shares a single connection through ``StaticPool``. Anything else
is treated as a server database and gets a pre-pinged connection pool.
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_api.core.config import settings


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
        return create_engine(url, future=True, **kwargs)
    return create_engine(
        url,
        future=True,
        pool_size=10,
        max_overflow=90,  # 100 connections in total
        pool_recycle=3600,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL or "sqlite:///./inventory.db")
SessionLocal = sessionmaker(bind=engine, class_=Session, expire_on_commit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create every table that does not exist yet."""
    from inventory_api.db.base_class import Base
    from inventory_api.models import models  # noqa: F401 - registers tables

    Base.metadata.create_all(bind=bind or engine)
