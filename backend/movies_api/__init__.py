"""
Movies API — Application Package Initializer
=============================================

What: Marks the `movies_api` directory as a Python package.
Who:  Used by uvicorn (`movies_api.main:app`), pytest, and the `movies-api` script.

Architecture Note:

    ┌─────────────────────────────────────┐
    │      Routes (API Layer)             │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Validators                     │  ← Shape checks before handlers run
    ├─────────────────────────────────────┤
    │      Services (MovieStore)          │  ← In-memory collection
    ├─────────────────────────────────────┤
    │      Exceptions / Error Envelope    │  ← One normalization point for errors
    └─────────────────────────────────────┘

    Routes receive already-validated input and delegate collection access to
    the store. Every failure travels as a MoviesApiError to the handlers
    registered in main.py, which render the `{ok: false, error: {...}}` envelope.
"""

__version__ = "1.0.0"
