"""
Database connection management using SQLAlchemy.

This module handles engine creation, connection pooling, session management,
and a raw parameterized query entry point.
"""

import logging
import os
from contextlib import contextmanager
from typing import Any, Generator, Mapping, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from cinema_api.api.config import get_database_url, get_sql_echo
from cinema_api.database.models import Base

logger = logging.getLogger(__name__)


def is_memory_database(database: Optional[str]) -> bool:
    """True for SQLite URLs that name no file (``sqlite://``, ``:memory:``)."""
    return database in (None, "", ":memory:") or database.startswith("file::memory:")


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, and database initialization.
    """

    def __init__(self, database_url: str, echo: bool = False):
        """
        Initialize database manager.

        Args:
            database_url: SQLAlchemy database URL
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.database_url = database_url
        url = make_url(database_url)

        if url.get_backend_name() == "sqlite" and is_memory_database(url.database):
            # One shared connection: lets threads see the same in-memory DB
            self.engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool
            )
        elif url.get_backend_name() == "sqlite":
            db_dir = os.path.dirname(url.database)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

            # Pooled connections, one per concurrent session
            self.engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False}
            )
        else:
            self.engine = create_engine(url, echo=echo, pool_pre_ping=True)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        logger.debug("Database engine created for %s", url.render_as_string(hide_password=True))

    def create_tables(self):
        """
        Create all tables defined in the models.

        This creates tables if they don't exist. Existing tables are not modified.
        """
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """
        Drop and recreate all tables.

        WARNING: This will delete all data in the database!
        """
        self.drop_tables()
        self.create_tables()

    def get_session(self) -> Session:
        """Get a new database session. The caller must close it."""
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                session.add(movie)

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> list[dict]:
        """
        Execute a textual SQL statement with bound parameters.

        Placeholders use the ``:name`` form; values are never interpolated
        into the statement text.

        Args:
            sql: SQL statement
            params: Values for the statement's placeholders

        Returns:
            Rows as dictionaries (empty for statements without a result set)
        """
        with self.engine.begin() as conn:
            result = conn.execute(text(sql), dict(params or {}))
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings()]

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()


# Global database manager instance (singleton pattern)
_db_manager: Optional[DatabaseManager] = None


def get_db_manager(database_url: Optional[str] = None, echo: Optional[bool] = None) -> DatabaseManager:
    """
    Get or create the global database manager instance.

    Args:
        database_url: Database URL (default: from configuration)
        echo: If True, log all SQL statements (default: from configuration)

    Returns:
        DatabaseManager instance
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(
            database_url or get_database_url(),
            echo=get_sql_echo() if echo is None else echo,
        )
    return _db_manager


def close_db_manager() -> None:
    """Dispose the global database manager and every pooled connection."""
    global _db_manager
    if _db_manager is not None:
        _db_manager.close()
        _db_manager = None
        logger.info("Database connections closed")
