"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  The root router carries no prefix so
that ``GET /`` answers at the application's mount point.
"""

from fastapi import APIRouter

from .endpoints import pokemons, root

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(pokemons.router, prefix="/pokemons", tags=["pokemons"])
