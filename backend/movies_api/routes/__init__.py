# Routes package init
"""
Movies API — Routes Package
============================

Route Inventory:
    - root.py:    GET    /                 (HTML banner)
    - movies.py:  GET    /movies           (list movies)
                  GET    /movies/{id}      (single movie)
                  POST   /movies           (add movie)
                  DELETE /movies/{id}      (delete movie)

Routes stay thin: validators run as dependencies, state lives in the
MovieStore, and errors are raised for the handlers registered in main.py.
"""
