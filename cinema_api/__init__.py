"""
Cinema API application package.

This package contains the REST API, database access layer, and shared
utilities for the movies/users CRUD service.
"""

__version__ = "1.0.0"
