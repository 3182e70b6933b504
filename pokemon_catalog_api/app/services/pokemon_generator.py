"""
Deterministic Pokemon records.

A handful of well known Pokemon are returned verbatim from a seed
table, complete with their front and back sprites.  Any other id gets
a synthetic placeholder (``pokemon-<id>``, type ``normal``, 50 HP, no
sprites).  ``generate`` is a pure function of the id; it knows nothing
about the not‑found bound, which is enforced by the store.
"""

from typing import Dict, List, Tuple

from pokemon_catalog_api.app.schemas.pokemon import Pokemon

SPRITE_BASE_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"

SYNTHETIC_TYPE = "normal"
SYNTHETIC_HP = 50

# id -> (name, type, base hp)
SEED_POKEMONS: Dict[int, Tuple[str, str, int]] = {
    1: ("bulbasaur", "grass", 45),
    2: ("ivysaur", "grass", 60),
    3: ("venusaur", "grass", 80),
    4: ("charmander", "fire", 39),
    5: ("charmeleon", "fire", 58),
    6: ("charizard", "fire", 78),
    7: ("squirtle", "water", 44),
    8: ("wartortle", "water", 59),
    9: ("blastoise", "water", 79),
    25: ("pikachu", "electric", 35),
}

MAX_SEED_ID = max(SEED_POKEMONS)


def sprite_urls(pokemon_id: int) -> List[str]:
    """Front and back sprite URLs for ``pokemon_id``."""
    return [
        f"{SPRITE_BASE_URL}/{pokemon_id}.png",
        f"{SPRITE_BASE_URL}/back/{pokemon_id}.png",
    ]


def generate(pokemon_id: int) -> Pokemon:
    """Return the seed or synthetic record for ``pokemon_id``.

    A new object is built on every call so callers may mutate it freely.
    """
    seed = SEED_POKEMONS.get(pokemon_id)
    if seed is not None:
        name, type_, hp = seed
        return Pokemon(id=pokemon_id, name=name, type=type_, hp=hp, sprites=sprite_urls(pokemon_id))
    return Pokemon(
        id=pokemon_id,
        name=f"pokemon-{pokemon_id}",
        type=SYNTHETIC_TYPE,
        hp=SYNTHETIC_HP,
        sprites=[],
    )
