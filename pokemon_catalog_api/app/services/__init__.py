"""
Service layer for the catalog.

``pokemon_generator`` produces deterministic records, ``pokemon_store``
owns the entities written at runtime, ``pagination_cache`` memoizes
listing pages and ``pokemon_service`` is the single entry point the
API layer talks to.
"""
