"""Common fixtures for the Pokemon catalog tests."""
import pytest
from fastapi.testclient import TestClient

from pokemon_catalog_api.app.core.config import Settings
from pokemon_catalog_api.app.main import create_app
from pokemon_catalog_api.app.services.pagination_cache import PaginationCache
from pokemon_catalog_api.app.services.pokemon_service import PokemonService
from pokemon_catalog_api.app.services.pokemon_store import PokemonStore

NOT_FOUND_BOUND = 100_000

SPRITES_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"

BULBASAUR = {
    "id": 1,
    "name": "bulbasaur",
    "type": "grass",
    "hp": 45,
    "sprites": [f"{SPRITES_URL}/1.png", f"{SPRITES_URL}/back/1.png"],
}

CHARMANDER = {
    "id": 4,
    "name": "charmander",
    "type": "fire",
    "hp": 39,
    "sprites": [f"{SPRITES_URL}/4.png", f"{SPRITES_URL}/back/4.png"],
}


@pytest.fixture
def settings():
    """Settings independent of the environment the tests run in."""
    return Settings(
        api_prefix="",
        not_found_bound=NOT_FOUND_BOUND,
        default_page_size=10,
        max_page_size=1000,
        cache_max_entries=0,
        invalidate_cache_on_write=False,
        log_file="",
    )


@pytest.fixture
def store():
    return PokemonStore(not_found_bound=NOT_FOUND_BOUND)


@pytest.fixture
def service(store):
    """A fresh catalog service per test."""
    return PokemonService(store=store, cache=PaginationCache())


@pytest.fixture
def app(settings, service):
    return create_app(settings=settings, service=service)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
