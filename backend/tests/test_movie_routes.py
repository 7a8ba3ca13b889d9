"""
Movies API — HTTP Endpoint Tests
=================================

What:  End-to-end tests of the routes, validators and error envelope through
       the ASGI app, using the test_client fixture (no server needed).

What we test:
    ✅ GET / banner
    ✅ list / get / create / delete success envelopes
    ✅ 404 NOT_FOUND for absent ids and unmatched routes
    ✅ 400 INVALID_ID for non-integer and oversized ids
    ✅ 422 VALIDATION_ERROR for bad bodies, 400 for malformed JSON
    ✅ NaN and Infinity bodies rejected with 422
    ✅ trailing-slash paths served directly
    ✅ create-then-read and delete-then-read consistency
"""

import pytest

from movies_api.seed_data import SEED_MOVIES


class TestRoot:

    @pytest.mark.asyncio
    async def test_serves_html_banner(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert "<h1>Movies API Running</h1>" in response.text
        assert "text/html" in response.headers["content-type"]


class TestListMovies:

    @pytest.mark.asyncio
    async def test_returns_whole_collection(self, test_client):
        response = await test_client.get("/movies")
        body = response.json()

        assert response.status_code == 200
        assert body["ok"] is True
        assert body["data"] == SEED_MOVIES

    @pytest.mark.asyncio
    async def test_trailing_slash(self, test_client):
        response = await test_client.get("/movies/")

        assert response.status_code == 200
        assert len(response.json()["data"]) == len(SEED_MOVIES)

    @pytest.mark.asyncio
    async def test_records_have_core_fields(self, test_client):
        response = await test_client.get("/movies")

        for movie in response.json()["data"]:
            assert isinstance(movie["id"], int)
            assert isinstance(movie["imdb_id"], str)
            assert isinstance(movie["title"], str)
            assert isinstance(movie["year"], int)

    @pytest.mark.asyncio
    async def test_includes_monkey_man(self, test_client):
        response = await test_client.get("/movies")

        assert any(
            m["title"] == "Monkey Man" and m["imdb_id"] == "tt9214772" and m["year"] == 2024
            for m in response.json()["data"]
        )


class TestGetMovie:

    @pytest.mark.asyncio
    async def test_returns_movie(self, test_client):
        response = await test_client.get("/movies/16")
        body = response.json()

        assert response.status_code == 200
        assert body["ok"] is True
        assert body["data"]["id"] == 16
        assert body["data"]["title"] == "Monkey Man"

    @pytest.mark.asyncio
    async def test_every_seed_id_resolves(self, test_client):
        for movie in SEED_MOVIES:
            response = await test_client.get(f"/movies/{movie['id']}")
            assert response.status_code == 200
            assert response.json()["data"]["id"] == movie["id"]

    @pytest.mark.asyncio
    async def test_absent_id_is_404(self, test_client):
        response = await test_client.get("/movies/99999")
        body = response.json()

        assert response.status_code == 404
        assert body["ok"] is False
        assert body["error"]["status"] == 404
        assert body["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["abc", "0", "-1", "1.5"])
    async def test_non_integer_id_is_400(self, test_client, raw_id):
        response = await test_client.get(f"/movies/{raw_id}")
        body = response.json()

        assert response.status_code == 400
        assert body["ok"] is False
        assert body["error"]["code"] == "INVALID_ID"
        assert body["error"]["details"] == {"field": "id", "value": raw_id}

    @pytest.mark.asyncio
    async def test_oversized_id_is_400(self, test_client):
        response = await test_client.get(f"/movies/{'9' * 5000}")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ID"

    @pytest.mark.asyncio
    async def test_trailing_slash(self, test_client):
        response = await test_client.get("/movies/16/")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == 16


class TestCreateMovie:

    @pytest.mark.asyncio
    async def test_adds_movie(self, test_client, new_movie, movie_store):
        response = await test_client.post("/movies/", json=new_movie)
        body = response.json()

        assert response.status_code == 200
        assert body["ok"] is True
        assert body["message"] == "Movie added successfully"
        assert body["data"] == new_movie
        assert movie_store.list_movies()[-1] == new_movie

    @pytest.mark.asyncio
    async def test_create_then_read(self, test_client, new_movie):
        await test_client.post("/movies", json=new_movie)

        response = await test_client.get(f"/movies/{new_movie['id']}")

        assert response.status_code == 200
        assert response.json()["data"] == new_movie

    @pytest.mark.asyncio
    async def test_year_out_of_range(self, test_client, movie_store):
        before = len(movie_store)
        response = await test_client.post(
            "/movies", json={"id": 40, "title": "Too early", "year": 1816}
        )
        body = response.json()

        assert response.status_code == 422
        assert body["ok"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"]["field"] == "year"
        assert body["error"]["details"]["value"] == 1816
        assert len(movie_store) == before

    @pytest.mark.asyncio
    async def test_missing_title(self, test_client):
        response = await test_client.post("/movies", json={"id": 40, "year": 2020})

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "title"

    @pytest.mark.asyncio
    async def test_array_body(self, test_client):
        response = await test_client.post("/movies", json=[{"id": 40}])

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "body"

    @pytest.mark.asyncio
    async def test_empty_body(self, test_client):
        response = await test_client.post("/movies")

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_malformed_json(self, test_client):
        response = await test_client.post(
            "/movies",
            content=b'{"id": 40, "title": ',
            headers={"Content-Type": "application/json"},
        )
        body = response.json()

        assert response.status_code == 400
        assert body["ok"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert "errors" in body["error"]["details"]

    @pytest.mark.asyncio
    async def test_infinity_is_rejected(self, test_client, movie_store):
        before = len(movie_store)
        response = await test_client.post(
            "/movies",
            content=b'{"id": 40, "title": "Endless", "year": Infinity}',
            headers={"Content-Type": "application/json"},
        )
        body = response.json()

        assert response.status_code == 422
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"]["field"] == "year"
        assert body["error"]["details"]["value"] == "inf"
        assert len(movie_store) == before

    @pytest.mark.asyncio
    async def test_nan_inside_array_body(self, test_client):
        response = await test_client.post(
            "/movies",
            content=b"[NaN]",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "body"


class TestDeleteMovie:

    @pytest.mark.asyncio
    async def test_deletes_movie(self, test_client, movie_store):
        response = await test_client.delete("/movies/8")
        body = response.json()

        assert response.status_code == 200
        assert body["ok"] is True
        assert body["message"] == "Movie deleted successfully"
        assert body["data"]["id"] == 8
        assert movie_store.get_movie(8) is None

    @pytest.mark.asyncio
    async def test_delete_then_read_is_404(self, test_client):
        await test_client.delete("/movies/8")

        response = await test_client.get("/movies/8")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client):
        first = await test_client.delete("/movies/8")
        second = await test_client.delete("/movies/8")

        assert first.status_code == 200
        assert second.status_code == 404
        assert second.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_absent_id_is_404(self, test_client):
        response = await test_client.delete("/movies/9999")

        assert response.status_code == 404
        assert response.json()["ok"] is False
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_non_integer_id_is_400(self, test_client, movie_store):
        before = len(movie_store)
        response = await test_client.delete("/movies/eight")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ID"
        assert len(movie_store) == before

    @pytest.mark.asyncio
    async def test_oversized_id_is_400(self, test_client, movie_store):
        before = len(movie_store)
        response = await test_client.delete(f"/movies/{'9' * 5000}")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ID"
        assert len(movie_store) == before

    @pytest.mark.asyncio
    async def test_trailing_slash(self, test_client, movie_store):
        response = await test_client.delete("/movies/8/")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == 8
        assert movie_store.get_movie(8) is None


class TestStateIsolation:
    """Each test gets its own store; the deletes above must not be visible here."""

    @pytest.mark.asyncio
    async def test_movie_8_is_back(self, test_client):
        response = await test_client.get("/movies/8")
        assert response.status_code == 200
