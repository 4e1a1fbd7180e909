"""
User management API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from cinema_api.api.dependencies import get_db
from cinema_api.api.models.user import UserIn, UserResponse
from cinema_api.api.validation import validate_body
from cinema_api.database import crud
from cinema_api.utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def list_users(
    language: str | None = Query(None),
    city: str | None = Query(None),
    db: Session = Depends(get_db),
):
    """List users, optionally filtered by language and city."""
    return crud.get_users(db, language=language, city=city)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get user profile by ID."""
    user = crud.get_user(db, user_id)
    if not user:
        logger.debug("User %s not found", user_id)
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserIn = Depends(validate_body(UserIn)),
    db: Session = Depends(get_db),
):
    """Create a new user."""
    return crud.create_user(db, **user_in.model_dump())


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_user(
    user_id: int,
    user_in: UserIn = Depends(validate_body(UserIn)),
    db: Session = Depends(get_db),
):
    """Replace every field of a user."""
    if crud.update_user(db, user_id, **user_in.model_dump()) is None:
        raise HTTPException(status_code=404, detail="User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Delete a user."""
    if not crud.delete_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
