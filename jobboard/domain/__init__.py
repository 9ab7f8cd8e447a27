"""
Domain layer containing business entities, services, and repositories.

Each subpackage keeps its business logic behind repository interfaces so the
MongoDB implementations can be swapped for in-memory ones in tests.
"""
