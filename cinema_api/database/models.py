"""
SQLAlchemy ORM models for the cinema database.

This module defines the movies and users tables. Column lengths match the
request rule sets; the rule sets themselves are enforced by the API layer.
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table.

    Attributes:
        id: Primary key, auto-incremented
        title: Movie title
        director: Director's name
        year: Release year
        color: True for a colour film, False for black and white
        duration: Running time in minutes
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    director: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    color: Mapped[bool] = mapped_column(Boolean, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', year={self.year})>"


class User(Base):
    """
    User table.

    Attributes:
        id: Primary key, auto-incremented
        firstname: First name
        lastname: Last name
        email: Contact email
        city: City of residence
        language: Preferred language
    """
    __tablename__ = 'users'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    firstname: Mapped[str] = mapped_column(String(255), nullable=False)
    lastname: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    language: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
