"""
Service layer for the Pokemon catalog.

``PokemonService`` is the only object the API layer talks to.  It owns
a ``PokemonStore`` and a ``PaginationCache`` and enforces the catalog
rules on top of them:

* names are unique among Pokemon created at runtime;
* ids outside ``[1, not_found_bound)`` never resolve;
* listing pages are memoized per ``(limit, page)`` and, unless
  ``invalidate_cache_on_write`` is set, are not refreshed by writes.

One instance is built per application by ``create_app`` and stored on
``app.state``; tests build their own instances.
"""

from __future__ import annotations

import logging
from typing import List

from pokemon_catalog_api.app.core.config import Settings
from pokemon_catalog_api.app.core.exceptions import DuplicatePokemonError, PokemonNotFoundError
from pokemon_catalog_api.app.schemas.pagination import PaginationParams
from pokemon_catalog_api.app.schemas.pokemon import Pokemon, PokemonCreate, PokemonUpdate

from .pagination_cache import PaginationCache
from .pokemon_store import PokemonStore

logger = logging.getLogger(__name__)


class PokemonService:
    """CRUD and paginated listing over the in‑memory catalog."""

    def __init__(
        self,
        store: PokemonStore,
        cache: PaginationCache | None = None,
        invalidate_cache_on_write: bool = False,
    ) -> None:
        self.store = store
        self.paginated_pokemons_cache = cache if cache is not None else PaginationCache()
        self.invalidate_cache_on_write = invalidate_cache_on_write

    @classmethod
    def from_settings(cls, settings: Settings) -> "PokemonService":
        """Build a service with a fresh store and cache configured from ``settings``."""
        return cls(
            store=PokemonStore(not_found_bound=settings.not_found_bound),
            cache=PaginationCache(max_entries=settings.cache_max_entries),
            invalidate_cache_on_write=settings.invalidate_cache_on_write,
        )

    async def create(self, data: PokemonCreate) -> Pokemon:
        """Add a new Pokemon with 0 HP and no sprites.

        Raises ``DuplicatePokemonError`` when a runtime Pokemon already
        has the same name.
        """
        with self.store.lock:
            if self.store.find_by_name(data.name) is not None:
                logger.warning("Refused to create duplicate Pokemon '%s'", data.name)
                raise DuplicatePokemonError(data.name)
            pokemon = self.store.insert({"name": data.name, "type": data.type, "hp": 0, "sprites": []})
        logger.info("Created Pokemon %s '%s'", pokemon.id, pokemon.name)
        self._after_write()
        return pokemon

    async def find_all(self, params: PaginationParams) -> List[Pokemon]:
        """Return the page described by ``params``, memoized per ``(limit, page)``."""
        return self.paginated_pokemons_cache.get_or_compute(params.limit, params.page, self._load_page)

    async def find_one(self, pokemon_id: int) -> Pokemon:
        pokemon = self.store.get(pokemon_id)
        if pokemon is None:
            logger.warning("Pokemon %s not found", pokemon_id)
            raise PokemonNotFoundError(pokemon_id)
        return pokemon

    async def update(self, pokemon_id: int, data: PokemonUpdate) -> Pokemon:
        """Apply the fields set in ``data``; everything else is preserved."""
        changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        pokemon = self.store.replace(pokemon_id, changes)
        if pokemon is None:
            logger.warning("Cannot update Pokemon %s: not found", pokemon_id)
            raise PokemonNotFoundError(pokemon_id)
        logger.info("Updated Pokemon %s with %s", pokemon_id, sorted(changes))
        self._after_write()
        return pokemon

    async def remove(self, pokemon_id: int) -> str:
        """Remove a Pokemon and return a confirmation naming it."""
        pokemon = self.store.delete(pokemon_id)
        if pokemon is None:
            logger.warning("Cannot remove Pokemon %s: not found", pokemon_id)
            raise PokemonNotFoundError(pokemon_id)
        logger.info("Removed Pokemon %s '%s'", pokemon_id, pokemon.name)
        self._after_write()
        return f"Pokemon {pokemon.name} removed!"

    def clear_cache(self) -> None:
        self.paginated_pokemons_cache.clear()

    def _load_page(self, limit: int, page: int) -> List[Pokemon]:
        # Ids that resolve absent (past the bound) are skipped.
        offset = PaginationParams(limit=limit, page=page).offset
        pokemons: List[Pokemon] = []
        for pokemon_id in range(offset + 1, offset + limit + 1):
            pokemon = self.store.get(pokemon_id)
            if pokemon is not None:
                pokemons.append(pokemon)
        return pokemons

    def _after_write(self) -> None:
        if self.invalidate_cache_on_write:
            logger.debug("Clearing cached pages after write")
            self.clear_cache()
