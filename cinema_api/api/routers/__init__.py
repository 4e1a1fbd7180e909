"""
API route handlers.
"""

from cinema_api.api.routers import movies, users, system

__all__ = ["movies", "users", "system"]
