"""
Movies API — Movie Route Handlers
==================================

What:  GET /movies, GET /movies/{id}, POST /movies, DELETE /movies/{id}.
How:   Validators run as dependencies, so each handler receives a parsed id or
       a validated body. Handlers read or mutate the MovieStore and build the
       `{ok: true, ...}` envelope. Failures are raised as MoviesApiError and
       rendered by the exception handlers in main.py.

Every path is also served with a trailing slash (no redirect).
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from movies_api.exceptions import NotFoundError
from movies_api.schemas.movie import (
    ErrorResponse,
    MovieListResponse,
    MovieMutationResponse,
    MovieResponse,
)
from movies_api.services.movie_store import MovieStore, get_movie_store
from movies_api.validators import valid_movie_body, valid_movie_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["Movies"])

_ID_ERRORS = {
    400: {"description": "Movie id is not a positive integer", "model": ErrorResponse},
    404: {"description": "Movie not found", "model": ErrorResponse},
}


def _movie_not_found(movie_id: int) -> NotFoundError:
    return NotFoundError(
        message=f"Movie with id {movie_id} not found",
        details={"id": movie_id},
    )


@router.get(
    "",
    responses={200: {"model": MovieListResponse}},
    summary="List all movies",
)
@router.get("/", include_in_schema=False)
async def list_movies(store: MovieStore = Depends(get_movie_store)) -> Dict[str, Any]:
    """Return the whole collection in insertion order."""
    return {"ok": True, "data": store.list_movies()}


@router.get(
    "/{movie_id}",
    responses={200: {"model": MovieResponse}, **_ID_ERRORS},
    summary="Get a single movie by id",
)
@router.get("/{movie_id}/", include_in_schema=False)
async def get_movie(
    movie_id: int = Depends(valid_movie_id),
    store: MovieStore = Depends(get_movie_store),
) -> Dict[str, Any]:
    movie = store.get_movie(movie_id)
    if movie is None:
        raise _movie_not_found(movie_id)
    return {"ok": True, "data": movie}


@router.post(
    "",
    responses={
        200: {"model": MovieMutationResponse},
        400: {"description": "Request body is not valid JSON", "model": ErrorResponse},
        422: {"description": "Movie data breaks the shape rules", "model": ErrorResponse},
    },
    summary="Add a movie",
    description=(
        "Appends the movie to the collection exactly as sent. The caller "
        "assigns the id; duplicates are not rejected."
    ),
)
@router.post("/", include_in_schema=False)
async def create_movie(
    movie: Dict[str, Any] = Depends(valid_movie_body),
    store: MovieStore = Depends(get_movie_store),
) -> Dict[str, Any]:
    created = store.add_movie(movie)
    return {"ok": True, "message": "Movie added successfully", "data": created}


@router.delete(
    "/{movie_id}",
    responses={200: {"model": MovieMutationResponse}, **_ID_ERRORS},
    summary="Delete a movie by id",
)
@router.delete("/{movie_id}/", include_in_schema=False)
async def delete_movie(
    movie_id: int = Depends(valid_movie_id),
    store: MovieStore = Depends(get_movie_store),
) -> Dict[str, Any]:
    """
    Remove the first movie with the given id.

    Deleting an id that is already gone returns 404, so repeating a delete
    has no further effect.
    """
    removed = store.remove_movie(movie_id)
    if removed is None:
        raise _movie_not_found(movie_id)
    return {"ok": True, "message": "Movie deleted successfully", "data": removed}
