"""Tests for the Pokemon catalog service."""
import pytest

from pokemon_catalog_api.app.core.config import Settings
from pokemon_catalog_api.app.core.exceptions import DuplicatePokemonError, PokemonNotFoundError
from pokemon_catalog_api.app.schemas.pagination import PaginationParams
from pokemon_catalog_api.app.schemas.pokemon import PokemonCreate, PokemonUpdate
from pokemon_catalog_api.app.services.pokemon_service import PokemonService
from pokemon_catalog_api.app.services.pokemon_store import PokemonStore

from conftest import BULBASAUR, CHARMANDER


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_pokemon(self, service):
        result = await service.create(PokemonCreate(name="Pikachu", type="Electric"))

        assert isinstance(result.id, int)
        assert result.model_dump() == {
            "id": result.id,
            "name": "Pikachu",
            "type": "Electric",
            "hp": 0,
            "sprites": [],
        }

    @pytest.mark.asyncio
    async def test_create_assigns_fresh_ids(self, service):
        first = await service.create(PokemonCreate(name="Pikachu", type="Electric"))
        second = await service.create(PokemonCreate(name="Raichu", type="Electric"))
        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_duplicate_name_is_rejected(self, service):
        data = PokemonCreate(name="Pikachu", type="Electric")
        await service.create(data)

        with pytest.raises(DuplicatePokemonError, match="Pikachu"):
            await service.create(data)
        assert len(service.store) == 1

    @pytest.mark.asyncio
    async def test_seed_names_do_not_count_as_duplicates(self, service):
        created = await service.create(PokemonCreate(name="bulbasaur", type="grass"))
        assert created.id != 1


class TestFindOne:
    @pytest.mark.asyncio
    async def test_returns_seed_record(self, service):
        result = await service.find_one(4)
        assert result.model_dump() == CHARMANDER

    @pytest.mark.asyncio
    async def test_returns_synthetic_record(self, service):
        result = await service.find_one(77)
        assert result.name == "pokemon-77"
        assert result.hp == 50

    @pytest.mark.asyncio
    async def test_missing_pokemon_raises_not_found(self, service):
        with pytest.raises(PokemonNotFoundError) as exc_info:
            await service.find_one(400_000)
        assert str(exc_info.value) == "Pokemon with id 400000 not found"
        assert exc_info.value.pokemon_id == 400_000


class TestFindAll:
    @pytest.mark.asyncio
    async def test_find_all_pokemons_and_cache_them(self, service):
        pokemons = await service.find_all(PaginationParams(limit=10, page=1))

        assert isinstance(pokemons, list)
        assert len(pokemons) == 10
        assert "10-1" in service.paginated_pokemons_cache
        assert service.paginated_pokemons_cache.get("10-1") is pokemons

    @pytest.mark.asyncio
    async def test_repeated_query_returns_same_list(self, service):
        first = await service.find_all(PaginationParams(limit=10, page=1))
        second = await service.find_all(PaginationParams(limit=10, page=1))
        five = await service.find_all(PaginationParams(limit=5, page=1))

        assert second is first
        assert len(five) == 5
        assert five is not first

    @pytest.mark.asyncio
    async def test_pages_follow_ids(self, service):
        page = await service.find_all(PaginationParams(limit=5, page=3))
        assert [p.id for p in page] == [11, 12, 13, 14, 15]
        first_page = await service.find_all(PaginationParams(limit=5, page=1))
        assert first_page[0].model_dump() == BULBASAUR

    @pytest.mark.asyncio
    async def test_page_past_bound_is_short(self):
        service = PokemonService(PokemonStore(not_found_bound=15))
        page = await service.find_all(PaginationParams(limit=10, page=2))
        assert [p.id for p in page] == [11, 12, 13, 14]

    @pytest.mark.asyncio
    async def test_runtime_entities_appear_in_pages(self, service):
        created = await service.create(PokemonCreate(name="Mew", type="psychic"))
        page = await service.find_all(PaginationParams(limit=1, page=created.id))
        assert page == [created]

    @pytest.mark.asyncio
    async def test_cached_page_is_stale_after_write(self, service):
        before = await service.find_all(PaginationParams(limit=10, page=1))
        await service.update(1, PokemonUpdate(name="Pikachu"))
        after = await service.find_all(PaginationParams(limit=10, page=1))

        assert after is before
        assert after[0].name == "bulbasaur"

    @pytest.mark.asyncio
    async def test_invalidate_on_write_refreshes_pages(self):
        service = PokemonService(PokemonStore(not_found_bound=1000), invalidate_cache_on_write=True)
        before = await service.find_all(PaginationParams(limit=10, page=1))
        await service.update(1, PokemonUpdate(name="Pikachu"))
        after = await service.find_all(PaginationParams(limit=10, page=1))

        assert after is not before
        assert after[0].name == "Pikachu"

    @pytest.mark.asyncio
    async def test_clear_cache(self, service):
        await service.find_all(PaginationParams(limit=10, page=1))
        service.clear_cache()
        assert len(service.paginated_pokemons_cache) == 0


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update_preserves_id_hp_and_sprites(self, service):
        before = (await service.find_one(1)).model_dump()

        updated = await service.update(1, PokemonUpdate(name="Pikachu", type="Electric"))

        assert updated.id == before["id"]
        assert updated.hp == before["hp"]
        assert updated.sprites == before["sprites"]
        assert updated.name == "Pikachu"
        assert updated.type == "Electric"
        assert (await service.find_one(1)).name == "Pikachu"

    @pytest.mark.asyncio
    async def test_update_only_touches_set_fields(self, service):
        updated = await service.update(4, PokemonUpdate(type="dragon"))
        assert updated.name == "charmander"
        assert updated.type == "dragon"

    @pytest.mark.asyncio
    async def test_create_after_update_gets_a_new_id(self, service):
        updated = await service.update(26, PokemonUpdate(name="Custom"))
        created = await service.create(PokemonCreate(name="Mew", type="psychic"))

        assert created.id != 26
        assert (await service.find_one(26)) is updated
        assert (await service.find_one(26)).name == "Custom"
        assert (await service.find_one(created.id)).name == "Mew"
        assert len(service.store) == 2

    @pytest.mark.asyncio
    async def test_null_fields_are_ignored(self, service):
        updated = await service.update(4, PokemonUpdate(name=None, type="dragon"))
        assert updated.name == "charmander"
        assert updated.type == "dragon"

    @pytest.mark.asyncio
    async def test_update_missing_pokemon_raises_not_found(self, service):
        with pytest.raises(PokemonNotFoundError, match="Pokemon with id 4000000 not found"):
            await service.update(4_000_000, PokemonUpdate())


class TestRemove:
    @pytest.mark.asyncio
    async def test_remove_seed_pokemon(self, service):
        result = await service.remove(1)
        assert "bulbasaur" in result
        assert result == "Pokemon bulbasaur removed!"

    @pytest.mark.asyncio
    async def test_remove_created_pokemon(self, service):
        created = await service.create(PokemonCreate(name="Pikachu", type="Electric"))
        assert await service.remove(created.id) == "Pokemon Pikachu removed!"
        assert service.store.find_by_name("Pikachu") is None
        # name is free again
        await service.create(PokemonCreate(name="Pikachu", type="Electric"))

    @pytest.mark.asyncio
    async def test_remove_missing_pokemon_raises_not_found(self, service):
        with pytest.raises(PokemonNotFoundError):
            await service.remove(1_000_000)


def test_from_settings_wires_configuration():
    settings = Settings(not_found_bound=50, cache_max_entries=3, invalidate_cache_on_write=True)
    service = PokemonService.from_settings(settings)

    assert service.store.not_found_bound == 50
    assert service.paginated_pokemons_cache.max_entries == 3
    assert service.invalidate_cache_on_write is True


def test_services_are_isolated():
    first = PokemonService.from_settings(Settings())
    second = PokemonService.from_settings(Settings())
    assert first.store is not second.store
    assert first.paginated_pokemons_cache is not second.paginated_pokemons_cache
