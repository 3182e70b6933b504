"""
In‑memory collection of Pokemon written at runtime.

The store maps ids to the entities created or updated through the
API.  Reads for ids it does not hold fall through to the generator,
as long as the id lies in ``[1, not_found_bound)``; everything outside
that range is absent.  All methods take the store's re‑entrant lock,
and callers that need several operations to be atomic (e.g. a
uniqueness check followed by an insert) may hold ``store.lock``
themselves.
"""

import logging
import threading
from typing import Any, Callable, Dict, Mapping, Optional

from pokemon_catalog_api.app.schemas.pokemon import Pokemon

from . import pokemon_generator

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = frozenset({"id"})


class PokemonStore:
    """Runtime entities plus generator fallback for unknown ids."""

    def __init__(
        self,
        not_found_bound: int,
        generator: Callable[[int], Pokemon] = pokemon_generator.generate,
        first_id: int = pokemon_generator.MAX_SEED_ID + 1,
    ) -> None:
        self.not_found_bound = not_found_bound
        self._generate = generator
        self._entities: Dict[int, Pokemon] = {}
        self._next_id = first_id
        self.lock = threading.RLock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._entities)

    def in_bounds(self, pokemon_id: int) -> bool:
        return 1 <= pokemon_id < self.not_found_bound

    def insert(self, data: Mapping[str, Any]) -> Pokemon:
        """Store a new entity under the next free id and return it.

        Ids only grow: a removed id is never handed out again, and the
        counter stays above every id held by the store.
        """
        with self.lock:
            pokemon_id = self._next_id
            self._next_id += 1
            fields = {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}
            pokemon = Pokemon(id=pokemon_id, **fields)
            self._entities[pokemon_id] = pokemon
            return pokemon

    def get(self, pokemon_id: int) -> Optional[Pokemon]:
        """Resolve ``pokemon_id``: runtime entity, generated record or ``None``."""
        with self.lock:
            pokemon = self._entities.get(pokemon_id)
        if pokemon is not None:
            return pokemon
        if not self.in_bounds(pokemon_id):
            return None
        return self._generate(pokemon_id)

    def replace(self, pokemon_id: int, fields: Mapping[str, Any]) -> Optional[Pokemon]:
        """Merge ``fields`` onto the entity resolved for ``pokemon_id``.

        Runtime entities are updated in place.  A generated record is
        materialised into the store first, so the change sticks.  The
        id never changes; ``hp`` and ``sprites`` only change when
        ``fields`` names them.  Returns ``None`` when the id is absent.
        """
        changes = {k: v for k, v in fields.items() if k not in IMMUTABLE_FIELDS}
        with self.lock:
            pokemon = self._entities.get(pokemon_id)
            if pokemon is None:
                if not self.in_bounds(pokemon_id):
                    return None
                pokemon = self._generate(pokemon_id)
                self._entities[pokemon_id] = pokemon
                self._next_id = max(self._next_id, pokemon_id + 1)
            for key, value in changes.items():
                setattr(pokemon, key, value)
            return pokemon

    def delete(self, pokemon_id: int) -> Optional[Pokemon]:
        """Remove ``pokemon_id`` and return the entity it resolved to.

        Ids that only resolve through the generator report success
        (the record is returned) without changing any state.  Returns
        ``None`` when the id is absent.
        """
        with self.lock:
            pokemon = self._entities.pop(pokemon_id, None)
        if pokemon is not None:
            logger.debug("Dropped runtime Pokemon %s", pokemon_id)
            return pokemon
        if not self.in_bounds(pokemon_id):
            return None
        return self._generate(pokemon_id)

    def find_by_name(self, name: str) -> Optional[Pokemon]:
        """Return the runtime entity called ``name``, if any."""
        with self.lock:
            return next((p for p in self._entities.values() if p.name == name), None)
