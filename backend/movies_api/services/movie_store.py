"""
Movies API — In-Memory Movie Store
===================================

What:  Owns the ordered, mutable collection of movie records.
How:   A plain list kept in insertion order. Lookups and deletes are linear
       scans for the first record with a matching id.
Who:   One instance per application, created by create_app() and attached to
       app.state; route handlers get it through the get_movie_store dependency.
When:  Seeded at application construction; reset only by process restart
       (or explicitly by tests and by SEED_FILE loading at startup).

Concurrency:
    No locking. Route handlers are async and every store method completes
    without awaiting, so on a single event loop one operation never
    interleaves with another. Running handlers in a thread pool would remove
    that guarantee.
"""

import copy
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

import aiofiles
from starlette.requests import Request

from movies_api.seed_data import SEED_MOVIES

logger = logging.getLogger(__name__)

MovieRecord = Dict[str, Any]


class MovieStore:
    """
    Ordered in-memory collection of movie records.

    Records are stored as given: create appends the validated body verbatim,
    without generating ids or checking for duplicates.
    """

    def __init__(self, movies: Optional[Iterable[MovieRecord]] = None):
        self._seed: List[MovieRecord] = copy.deepcopy(
            list(SEED_MOVIES if movies is None else movies)
        )
        self._movies: List[MovieRecord] = copy.deepcopy(self._seed)

    def __len__(self) -> int:
        return len(self._movies)

    def list_movies(self) -> List[MovieRecord]:
        """All records in insertion order."""
        return list(self._movies)

    def get_movie(self, movie_id: int) -> Optional[MovieRecord]:
        """First record whose id equals movie_id, or None."""
        for movie in self._movies:
            if movie.get("id") == movie_id:
                return movie
        return None

    def add_movie(self, movie: MovieRecord) -> MovieRecord:
        """Append a record and return it."""
        self._movies.append(movie)
        logger.info("Movie added: id=%s title=%r (%d total)", movie.get("id"), movie.get("title"), len(self._movies))
        return movie

    def remove_movie(self, movie_id: int) -> Optional[MovieRecord]:
        """Remove the first record whose id equals movie_id; return it, or None if absent."""
        for index, movie in enumerate(self._movies):
            if movie.get("id") == movie_id:
                removed = self._movies.pop(index)
                logger.info("Movie removed: id=%s (%d remaining)", movie_id, len(self._movies))
                return removed
        return None

    def reset(self, movies: Optional[Iterable[MovieRecord]] = None) -> None:
        """
        Restore the collection.

        With no argument the store goes back to its seed list. With a list,
        that list becomes both the current contents and the new seed.
        """
        if movies is not None:
            self._seed = copy.deepcopy(list(movies))
        self._movies = copy.deepcopy(self._seed)
        logger.debug("Movie store reset to %d records", len(self._movies))


def get_movie_store(request: Request) -> MovieStore:
    """FastAPI dependency: the store owned by the running application."""
    return request.app.state.movie_store


async def load_seed_file(path: str) -> List[MovieRecord]:
    """
    Read a seed list from a JSON file.

    The file must hold a JSON array of objects, each with an integer "id".

    Raises:
        OSError:    The file cannot be read
        ValueError: The content is not valid JSON or not a list of movie objects
    """
    async with aiofiles.open(path, "r", encoding="utf-8") as f:
        raw = await f.read()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Seed file {path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")

    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"Seed entry {position} in {path} is not an object")
        movie_id = entry.get("id")
        if not isinstance(movie_id, int) or isinstance(movie_id, bool):
            raise ValueError(f"Seed entry {position} in {path} has no integer id")

    logger.info("Loaded %d movies from seed file %s", len(data), path)
    return data
