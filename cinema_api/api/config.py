"""
API configuration loaded from environment or defaults.

Variables may also be placed in a ``.env`` file at the working directory.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

DEFAULT_DB_PATH = Path(__file__).resolve().parents[2] / "data" / "cinema.db"


def get_database_url() -> str:
    """
    Get the SQLAlchemy database URL.

    ``DATABASE_URL`` wins when set. Otherwise a MySQL URL is assembled from
    ``DB_HOST``/``DB_PORT``/``DB_USER``/``DB_PASSWORD``/``DB_NAME`` when
    ``DB_HOST`` is present, and a local SQLite file is used as a last resort.
    """
    url = os.getenv("DATABASE_URL", "").strip()
    if url:
        return url

    host = os.getenv("DB_HOST", "").strip()
    if host:
        return URL.create(
            "mysql+pymysql",
            username=os.getenv("DB_USER") or None,
            password=os.getenv("DB_PASSWORD") or None,
            host=host,
            port=int(os.getenv("DB_PORT", "3306")),
            database=os.getenv("DB_NAME") or None,
        ).render_as_string(hide_password=False)

    return f"sqlite:///{DEFAULT_DB_PATH}"


def get_sql_echo() -> bool:
    """Whether SQLAlchemy should log every statement."""
    return os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes", "on")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional log file name (written under logs/)."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("APP_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("APP_PORT", "5000"))
