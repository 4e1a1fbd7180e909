"""
Database module for the cinema API.

This module provides database models, connection management, and CRUD operations
using SQLAlchemy ORM.
"""

from cinema_api.database.models import Base, Movie, User
from cinema_api.database.connection import (
    DatabaseManager,
    close_db_manager,
    get_db_manager,
)
from cinema_api.database.init_db import init_database, seed_database, verify_schema
from cinema_api.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    'User',
    # Connection
    'DatabaseManager',
    'close_db_manager',
    'get_db_manager',
    # Initialization
    'init_database',
    'seed_database',
    'verify_schema',
    # CRUD module
    'crud',
]
