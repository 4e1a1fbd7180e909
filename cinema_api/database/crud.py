"""
CRUD operations for Movie and User models.

This module provides Create, Read, Update, Delete operations for both
resources. Update is a full replacement: every column is overwritten.
"""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from cinema_api.database.models import Movie, User

logger = logging.getLogger(__name__)

# Range of a signed 64-bit INTEGER column; no row can carry an id outside it
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def is_storable_id(record_id: int) -> bool:
    return MIN_ID <= record_id <= MAX_ID


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    session: Session,
    title: str,
    director: str,
    year: int,
    color: bool,
    duration: int
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        title: Movie title
        director: Director's name
        year: Release year
        color: Whether the film is in colour
        duration: Running time in minutes

    Returns:
        Created Movie object with its assigned id
    """
    movie = Movie(
        title=title,
        director=director,
        year=year,
        color=color,
        duration=duration
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    logger.info("Created movie id=%s", movie.id)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    if not is_storable_id(movie_id):
        return None
    return session.get(Movie, movie_id)


def get_movies(
    session: Session,
    color: Optional[bool] = None,
    max_duration: Optional[int] = None
) -> List[Movie]:
    """
    Get all movies, optionally filtered.

    Args:
        session: Database session
        color: Keep only colour (True) or black and white (False) films
        max_duration: Keep only films lasting at most this many minutes

    Returns:
        List of Movie objects ordered by id
    """
    query = session.query(Movie)

    if color is not None:
        query = query.filter(Movie.color == color)

    if max_duration is not None:
        query = query.filter(Movie.duration <= max_duration)

    return query.order_by(Movie.id).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


def update_movie(
    session: Session,
    movie_id: int,
    title: str,
    director: str,
    year: int,
    color: bool,
    duration: int
) -> Optional[Movie]:
    """
    Replace every field of a movie.

    Args:
        session: Database session
        movie_id: Movie ID
        title, director, year, color, duration: New values

    Returns:
        Updated Movie object or None if not found
    """
    movie = get_movie(session, movie_id)
    if movie is None:
        return None

    movie.title = title
    movie.director = director
    movie.year = year
    movie.color = color
    movie.duration = duration
    session.commit()
    session.refresh(movie)
    logger.info("Updated movie id=%s", movie_id)
    return movie


def delete_movie(session: Session, movie_id: int) -> bool:
    """
    Delete a movie.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        True if movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if movie is None:
        return False

    session.delete(movie)
    session.commit()
    logger.info("Deleted movie id=%s", movie_id)
    return True


# ==================== USER CRUD OPERATIONS ====================

def create_user(
    session: Session,
    firstname: str,
    lastname: str,
    email: str,
    city: str,
    language: str
) -> User:
    """
    Create a new user.

    Args:
        session: Database session
        firstname: First name
        lastname: Last name
        email: Contact email
        city: City of residence
        language: Preferred language

    Returns:
        Created User object with its assigned id
    """
    user = User(
        firstname=firstname,
        lastname=lastname,
        email=email,
        city=city,
        language=language
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Created user id=%s", user.id)
    return user


def get_user(session: Session, user_id: int) -> Optional[User]:
    """
    Get a user by ID.

    Args:
        session: Database session
        user_id: User ID

    Returns:
        User object or None if not found
    """
    if not is_storable_id(user_id):
        return None
    return session.get(User, user_id)


def get_users(
    session: Session,
    language: Optional[str] = None,
    city: Optional[str] = None
) -> List[User]:
    """
    Get all users, optionally filtered by language and/or city.

    Args:
        session: Database session
        language: Exact language to match
        city: Exact city to match

    Returns:
        List of User objects ordered by id
    """
    query = session.query(User)

    if language is not None:
        query = query.filter(User.language == language)

    if city is not None:
        query = query.filter(User.city == city)

    return query.order_by(User.id).all()


def get_user_count(session: Session) -> int:
    """Get total count of users."""
    return session.query(func.count(User.id)).scalar()


def update_user(
    session: Session,
    user_id: int,
    firstname: str,
    lastname: str,
    email: str,
    city: str,
    language: str
) -> Optional[User]:
    """
    Replace every field of a user.

    Returns:
        Updated User object or None if not found
    """
    user = get_user(session, user_id)
    if user is None:
        return None

    user.firstname = firstname
    user.lastname = lastname
    user.email = email
    user.city = city
    user.language = language
    session.commit()
    session.refresh(user)
    logger.info("Updated user id=%s", user_id)
    return user


def delete_user(session: Session, user_id: int) -> bool:
    """
    Delete a user.

    Returns:
        True if user was deleted, False if not found
    """
    user = get_user(session, user_id)
    if user is None:
        return False

    session.delete(user)
    session.commit()
    logger.info("Deleted user id=%s", user_id)
    return True
