"""
Movies API — Built-in Seed Data
================================

What:  The initial movie list loaded into a fresh MovieStore.
When:  Copied into the store at application construction. Overridden at startup
       when SEED_FILE points at a JSON array (see services/movie_store.py).
"""

SEED_MOVIES = [
    {
        "id": 1,
        "imdb_id": "tt15239678",
        "title": "Dune: Part Two",
        "year": 2024,
        "runtime": "2:46:00",
        "rating": "PG-13",
        "genres": ["Action", "Adventure", "Drama"],
    },
    {
        "id": 2,
        "imdb_id": "tt15398776",
        "title": "Oppenheimer",
        "year": 2023,
        "runtime": "3:00:00",
        "rating": "R",
        "genres": ["Biography", "Drama", "History"],
    },
    {
        "id": 3,
        "imdb_id": "tt1517268",
        "title": "Barbie",
        "year": 2023,
        "runtime": "1:54:00",
        "rating": "PG-13",
        "genres": ["Adventure", "Comedy", "Fantasy"],
    },
    {
        "id": 4,
        "imdb_id": "tt6710474",
        "title": "Everything Everywhere All at Once",
        "year": 2022,
        "runtime": "2:19:00",
        "rating": "R",
        "genres": ["Action", "Adventure", "Comedy"],
    },
    {
        "id": 5,
        "imdb_id": "tt1745960",
        "title": "Top Gun: Maverick",
        "year": 2022,
        "runtime": "2:10:00",
        "rating": "PG-13",
        "genres": ["Action", "Drama"],
    },
    {
        "id": 6,
        "imdb_id": "tt1877830",
        "title": "The Batman",
        "year": 2022,
        "runtime": "2:56:00",
        "rating": "PG-13",
        "genres": ["Action", "Crime", "Drama"],
    },
    {
        "id": 7,
        "imdb_id": "tt9362722",
        "title": "Spider-Man: Across the Spider-Verse",
        "year": 2023,
        "runtime": "2:20:00",
        "rating": "PG",
        "genres": ["Animation", "Action", "Adventure"],
    },
    {
        "id": 8,
        "imdb_id": "tt14230458",
        "title": "Poor Things",
        "year": 2023,
        "runtime": "2:21:00",
        "rating": "R",
        "genres": ["Comedy", "Drama", "Romance"],
    },
    {
        "id": 9,
        "imdb_id": "tt17279496",
        "title": "Civil War",
        "year": 2024,
        "runtime": "1:49:00",
        "rating": "R",
        "genres": ["Action", "Drama", "Thriller"],
    },
    {
        "id": 10,
        "imdb_id": "tt12037194",
        "title": "Furiosa: A Mad Max Saga",
        "year": 2024,
        "runtime": "2:28:00",
        "rating": "R",
        "genres": ["Action", "Adventure", "Sci-Fi"],
    },
    {
        "id": 11,
        "imdb_id": "tt23289160",
        "title": "Godzilla Minus One",
        "year": 2023,
        "runtime": "2:04:00",
        "rating": "PG-13",
        "genres": ["Action", "Drama", "Horror"],
    },
    {
        "id": 12,
        "imdb_id": "tt14849194",
        "title": "The Holdovers",
        "year": 2023,
        "runtime": "2:13:00",
        "rating": "R",
        "genres": ["Comedy", "Drama"],
    },
    {
        "id": 14,
        "imdb_id": "tt13238346",
        "title": "Past Lives",
        "year": 2023,
        "runtime": "1:45:00",
        "rating": "PG-13",
        "genres": ["Drama", "Romance"],
    },
    {
        "id": 15,
        "imdb_id": "tt22022452",
        "title": "Inside Out 2",
        "year": 2024,
        "runtime": "1:36:00",
        "rating": "PG",
        "genres": ["Animation", "Adventure", "Comedy"],
    },
    {
        "id": 16,
        "imdb_id": "tt9214772",
        "title": "Monkey Man",
        "year": 2024,
        "runtime": "2:01:00",
        "rating": "R",
        "genres": ["Action", "Thriller"],
    },
]
