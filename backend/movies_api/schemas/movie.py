"""
Movies API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models describing the movie record and the response envelopes.
How:   MovieCreate is used by the body validator to check shape rules.
       The envelope models document responses in the OpenAPI schema; route
       handlers return plain dicts so created movies are echoed verbatim.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Movie Models
# ══════════════════════════════════════════════════════════════════════════


class MovieCreate(BaseModel):
    """
    What:  Shape rules for a movie submitted to POST /movies.

    Required: id (positive int), title (non-blank str), year (int).
    Optional fields are type checked only when present. Unknown fields are
    allowed and kept. Year bounds come from settings and are checked by the
    validator, since they are configurable.

    Strict types: "2024" is not a year, and true is not an id.
    """

    model_config = ConfigDict(extra="allow")

    id: StrictInt = Field(gt=0, description="Caller-assigned unique identifier")
    title: StrictStr = Field(min_length=1, description="Movie title")
    year: StrictInt = Field(description="Release year")
    imdb_id: Optional[StrictStr] = Field(default=None, description="IMDb identifier, e.g. tt9214772")
    runtime: Optional[StrictStr] = Field(default=None, description="Runtime, e.g. 2:01:00")
    rating: Optional[StrictStr] = Field(default=None, description="Certification, e.g. PG-13")
    poster: Optional[StrictStr] = Field(default=None, description="Poster image URL")
    genres: Optional[List[StrictStr]] = Field(default=None, description="Ordered genre names")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v


class Movie(BaseModel):
    """A stored movie record as returned by the API."""

    model_config = ConfigDict(extra="allow")

    id: int
    imdb_id: Optional[str] = None
    title: Optional[str] = None
    year: Optional[int] = None
    runtime: Optional[str] = None
    rating: Optional[str] = None
    poster: Optional[str] = None
    genres: Optional[List[str]] = None


# ══════════════════════════════════════════════════════════════════════════
# Response Envelopes
# ══════════════════════════════════════════════════════════════════════════


class MovieListResponse(BaseModel):
    """Returned by GET /movies."""
    ok: Literal[True] = True
    data: List[Movie]


class MovieResponse(BaseModel):
    """Returned by GET /movies/{id}."""
    ok: Literal[True] = True
    data: Movie


class MovieMutationResponse(BaseModel):
    """Returned by POST /movies and DELETE /movies/{id}."""
    ok: Literal[True] = True
    message: str = Field(description="Human-readable success message")
    data: Movie


class ErrorBody(BaseModel):
    status: int = Field(description="HTTP status code")
    message: str = Field(description="Human-readable error description")
    code: str = Field(description="Machine-readable error code")
    details: Optional[Any] = Field(
        default=None,
        description="Additional error context; omitted when there is none",
    )


class ErrorResponse(BaseModel):
    """
    What:  Standardized error envelope for all API errors.

    Example:
        {
            "ok": false,
            "error": {"status": 404, "message": "Route not found", "code": "NOT_FOUND"}
        }
    """
    ok: Literal[False] = False
    error: ErrorBody
