"""
Movies API — Request Validators
================================

What:  Checks route parameters and request bodies before route handlers run.
How:   Two layers:
       1. Pure validators (parse_movie_id, validate_movie_body) return either the
          validated value or a MoviesApiError. They never raise and never touch
          the response.
       2. FastAPI dependencies (valid_movie_id, valid_movie_body) call the pure
          validators and raise the returned error, which short-circuits the
          request into the exception handlers registered in main.py.
Who:   Route handlers in routes/movies.py declare the dependencies, so they only
       ever see a parsed integer id or a body that passed the shape rules.
"""

import logging
import math
import re
from typing import Any, Dict, Optional, Tuple, Union

from fastapi import Body
from pydantic import ValidationError as PydanticValidationError

from movies_api.config import settings
from movies_api.exceptions import MoviesApiError, make_error
from movies_api.schemas.movie import MovieCreate

logger = logging.getLogger(__name__)

# Decimal digits only: no sign, no whitespace, no fraction
_ID_PATTERN = re.compile(r"[0-9]+")


# ══════════════════════════════════════════════════════════════════════════
# Pure Validators
# ══════════════════════════════════════════════════════════════════════════


def _invalid_id(raw: Any) -> MoviesApiError:
    return make_error(
        400,
        "Movie id must be a positive integer",
        "INVALID_ID",
        {"field": "id", "value": raw},
    )


def parse_movie_id(raw: Any) -> Union[int, MoviesApiError]:
    """
    Parse a movie id route parameter.

    Returns the id as an int when `raw` is a positive integer (or a string of
    decimal digits denoting one), otherwise a 400 INVALID_ID error.

        parse_movie_id("16")   → 16
        parse_movie_id("abc")  → MoviesApiError(400, INVALID_ID)
        parse_movie_id("0")    → MoviesApiError(400, INVALID_ID)
    """
    if isinstance(raw, bool):
        return _invalid_id(raw)
    if isinstance(raw, int):
        return raw if raw > 0 else _invalid_id(raw)
    if not isinstance(raw, str) or not _ID_PATTERN.fullmatch(raw):
        return _invalid_id(raw)

    try:
        value = int(raw)
    except ValueError:
        # More digits than the interpreter will convert
        return _invalid_id(raw)
    if value <= 0:
        return _invalid_id(raw)
    return value


def _body_error(field: str, value: Any, reason: str) -> MoviesApiError:
    return make_error(
        422,
        "Invalid movie data",
        "VALIDATION_ERROR",
        {"field": field, "value": value, "reason": reason},
    )


def _find_non_finite(value: Any, path: str) -> Optional[Tuple[str, float]]:
    """First NaN or Infinity inside a parsed JSON value, with its dotted path."""
    if isinstance(value, float) and not math.isfinite(value):
        return path, value
    if isinstance(value, dict):
        items = ((str(key), item) for key, item in value.items())
    elif isinstance(value, list):
        items = ((str(index), item) for index, item in enumerate(value))
    else:
        return None
    for key, item in items:
        found = _find_non_finite(item, f"{path}.{key}" if path else key)
        if found is not None:
            return found
    return None


def validate_movie_body(body: Any) -> Union[Dict[str, Any], MoviesApiError]:
    """
    Check a POST /movies body against the movie shape rules.

    Rules:
        - body is a JSON object
        - id: positive integer, title: non-blank string, year: integer in
          [settings.min_movie_year, settings.max_movie_year]
        - imdb_id, runtime, rating, poster: strings when present
        - genres: list of strings when present
        - no NaN or Infinity anywhere, since they cannot be sent back as JSON

    Returns the body unchanged on success, or a 422 VALIDATION_ERROR whose
    details name the first offending field.
    """
    if not isinstance(body, dict):
        return _body_error("body", body, "Request body must be a JSON object")

    non_finite = _find_non_finite(body, "")
    if non_finite is not None:
        field, number = non_finite
        return _body_error(field, str(number), "must be a finite number")

    try:
        MovieCreate.model_validate(body)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        loc = first.get("loc") or ("body",)
        field = ".".join(str(part) for part in loc)
        value = body.get(loc[0]) if len(loc) == 1 else first.get("input")
        return _body_error(field, value, first.get("msg", "Invalid value"))

    year = body["year"]
    if not settings.min_movie_year <= year <= settings.max_movie_year:
        return _body_error(
            "year",
            year,
            f"year must be between {settings.min_movie_year} and {settings.max_movie_year}",
        )

    return body


# ══════════════════════════════════════════════════════════════════════════
# FastAPI Dependencies
# ══════════════════════════════════════════════════════════════════════════


def valid_movie_id(movie_id: str) -> int:
    """Path dependency: the parsed id, or a raised INVALID_ID error."""
    result = parse_movie_id(movie_id)
    if isinstance(result, MoviesApiError):
        logger.debug("Rejected movie id %r", movie_id)
        raise result
    return result


def valid_movie_body(body: Any = Body(default=None)) -> Dict[str, Any]:
    """Body dependency: the validated movie dict, or a raised VALIDATION_ERROR."""
    result = validate_movie_body(body)
    if isinstance(result, MoviesApiError):
        raise result
    return result
