"""
FastAPI dependency injection for database sessions.
"""

from typing import Generator

from sqlalchemy.orm import Session

from cinema_api.database.connection import get_db_manager


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    with get_db_manager().session_scope() as session:
        yield session
