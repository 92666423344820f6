"""SQLAlchemy engine, session factory and the per-request session dependency."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from request_manager.config import settings

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency yielding one session per HTTP call."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def enum_values(enum_cls) -> list[str]:
    """Persist enum values ("InProgress"), not member names ("in_progress")."""
    return [member.value for member in enum_cls]
