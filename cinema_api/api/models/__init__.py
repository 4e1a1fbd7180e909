"""
Pydantic schemas for API request/response validation.
"""

from cinema_api.api.models.movie import MovieIn, MovieResponse
from cinema_api.api.models.user import UserIn, UserResponse

__all__ = [
    "MovieIn",
    "MovieResponse",
    "UserIn",
    "UserResponse",
]
