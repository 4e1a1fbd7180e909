"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from cinema_api.api.dependencies import get_db
from cinema_api.api.models.movie import SAFE_INTEGER, MovieIn, MovieResponse
from cinema_api.api.validation import validate_body
from cinema_api.database import crud
from cinema_api.utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("", response_model=list[MovieResponse])
def list_movies(
    color: bool | None = Query(None),
    max_duration: int | None = Query(None, ge=0, le=SAFE_INTEGER),
    db: Session = Depends(get_db),
):
    """List movies, optionally filtered by colour and maximum duration."""
    return crud.get_movies(db, color=color, max_duration=max_duration)


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: int, db: Session = Depends(get_db)):
    """Get movie details by ID."""
    movie = crud.get_movie(db, movie_id)
    if not movie:
        logger.debug("Movie %s not found", movie_id)
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_in: MovieIn = Depends(validate_body(MovieIn)),
    db: Session = Depends(get_db),
):
    """Create a movie and return it with its new id."""
    return crud.create_movie(db, **movie_in.model_dump())


@router.put("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_movie(
    movie_id: int,
    movie_in: MovieIn = Depends(validate_body(MovieIn)),
    db: Session = Depends(get_db),
):
    """Replace every field of a movie."""
    if crud.update_movie(db, movie_id, **movie_in.model_dump()) is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(movie_id: int, db: Session = Depends(get_db)):
    """Delete a movie."""
    if not crud.delete_movie(db, movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
