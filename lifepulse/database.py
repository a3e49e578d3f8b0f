"""
Handles database connection setup and session management.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from .config import settings


def build_engine(url: str):
    """
    Creates a SQLAlchemy engine for the given URL.

    SQLite memory databases are bound to a single shared connection so that
    every session sees the same data for the lifetime of the process.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url)


# Create the SQLAlchemy engine, which manages connections to the database
engine = build_engine(settings.DATABASE_URL)

# Create a session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for declarative class definitions (our ORM models)
Base = declarative_base()


def get_db():
    """
    FastAPI dependency to create and manage database sessions per request.

    This function yields a database session to the API endpoint and ensures
    it is always closed afterward, even if an error occurs.

    Yields:
        Session: A new SQLAlchemy database session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
