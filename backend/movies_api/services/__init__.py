# Services package init
"""
Movies API — Services Layer
============================

What:  State and logic sitting between routes (HTTP) and the data they serve.

Service Inventory:
    - MovieStore: ordered in-memory movie collection (list, get, add, remove, reset)
    - load_seed_file: reads a replacement seed list from a JSON file at startup
"""
