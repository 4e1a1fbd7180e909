"""
Database initialization and schema creation.

This module provides functions to initialize the database schema and
populate it with the sample movies and users.
"""

import logging

from sqlalchemy import inspect

from cinema_api.database.connection import DatabaseManager, get_db_manager
from cinema_api.database.models import Base, Movie, User

logger = logging.getLogger(__name__)

SAMPLE_MOVIES = [
    {"title": "Citizen Kane", "director": "Orson Wells", "year": 1941, "color": False, "duration": 120},
    {"title": "The Godfather", "director": "Francis Ford Coppola", "year": 1972, "color": True, "duration": 180},
    {"title": "Pulp Fiction", "director": "Quentin Tarantino", "year": 1994, "color": True, "duration": 180},
    {"title": "Apocalypse Now", "director": "Francis Ford Coppola", "year": 1979, "color": True, "duration": 150},
    {"title": "2001: A Space Odyssey", "director": "Stanley Kubrick", "year": 1968, "color": True, "duration": 160},
    {"title": "The Dark Knight", "director": "Christopher Nolan", "year": 2008, "color": True, "duration": 150},
]

SAMPLE_USERS = [
    {"firstname": "John", "lastname": "Doe", "email": "john.doe@example.com", "city": "Paris", "language": "English"},
    {"firstname": "Valeriy", "lastname": "Appius", "email": "valeriy.appius@example.com", "city": "Moscow", "language": "Russian"},
    {"firstname": "Ralf", "lastname": "Geronimo", "email": "ralf.geronimo@example.com", "city": "New York", "language": "Italian"},
    {"firstname": "Maria", "lastname": "Iskandar", "email": "maria.iskandar@example.com", "city": "New York", "language": "German"},
    {"firstname": "Jane", "lastname": "Doe", "email": "jane.doe@example.com", "city": "London", "language": "English"},
    {"firstname": "Johanna", "lastname": "Martino", "email": "johanna.martino@example.com", "city": "Milan", "language": "Spanish"},
]


def init_database(reset: bool = False, db_manager: DatabaseManager | None = None) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        reset: If True, drop existing tables before creating new ones
        db_manager: Manager to use (default: the global one)

    Returns:
        DatabaseManager instance
    """
    db_manager = db_manager or get_db_manager()

    if reset:
        logger.warning("Resetting database (dropping all tables)")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready")

    return db_manager


def seed_database(db_manager: DatabaseManager) -> tuple[int, int]:
    """
    Insert the sample movies and users into empty tables.

    Tables that already hold rows are left untouched.

    Returns:
        (movies inserted, users inserted)
    """
    inserted_movies = inserted_users = 0
    with db_manager.session_scope() as session:
        if session.query(Movie).first() is None:
            session.add_all(Movie(**row) for row in SAMPLE_MOVIES)
            inserted_movies = len(SAMPLE_MOVIES)
        if session.query(User).first() is None:
            session.add_all(User(**row) for row in SAMPLE_USERS)
            inserted_users = len(SAMPLE_USERS)

    logger.info("Seeded %d movies and %d users", inserted_movies, inserted_users)
    return inserted_movies, inserted_users


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())
    expected_tables = set(Base.metadata.tables)

    missing_tables = expected_tables - existing_tables
    if missing_tables:
        logger.error("Missing tables: %s", sorted(missing_tables))
        return False

    return True
