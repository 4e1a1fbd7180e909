"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

# Largest integer a JSON client can represent exactly (2**53 - 1)
SAFE_INTEGER = 2 ** 53 - 1


class MovieIn(BaseModel):
    """Request body for creating or replacing a movie."""

    title: str = Field(..., min_length=1, max_length=255)
    director: str = Field(..., min_length=1, max_length=255)
    year: int = Field(..., ge=-SAFE_INTEGER, le=2024)
    color: StrictBool
    duration: int = Field(..., ge=-SAFE_INTEGER, le=500)

    @field_validator("color", mode="before")
    @classmethod
    def parse_color_string(cls, value):
        # "true"/"false" are the only non-boolean spellings accepted
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        return value


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    director: str
    year: int
    color: bool
    duration: int
