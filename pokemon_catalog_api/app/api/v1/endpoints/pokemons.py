"""
Pokemon endpoints for API v1.

CRUD and paginated listing over the catalog.  Request bodies are
validated explicitly (see ``schemas.pokemon.collect_violations``) so
that a bad body yields one message per violated rule.  Domain errors
raised by the service are translated into ``HTTPException`` here.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from pokemon_catalog_api.app.api.deps import get_pagination_params, get_pokemon_service
from pokemon_catalog_api.app.core.exceptions import DuplicatePokemonError, PokemonNotFoundError
from pokemon_catalog_api.app.schemas.pagination import PaginationParams
from pokemon_catalog_api.app.schemas.pokemon import Pokemon, parse_create_payload, parse_update_payload
from pokemon_catalog_api.app.services.pokemon_service import PokemonService

router = APIRouter()


@router.post("", response_model=Pokemon, status_code=status.HTTP_201_CREATED)
async def create_pokemon(
    payload: Any = Body(None),
    service: PokemonService = Depends(get_pokemon_service),
) -> Pokemon:
    """Create a new Pokemon with 0 HP and no sprites.

    Returns HTTP 400 when the body is invalid or the name is taken.
    """
    data = parse_create_payload(payload)
    try:
        return await service.create(data)
    except DuplicatePokemonError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=[str(e)]) from e


@router.get("", response_model=List[Pokemon])
async def list_pokemons(
    params: PaginationParams = Depends(get_pagination_params),
    service: PokemonService = Depends(get_pokemon_service),
) -> List[Pokemon]:
    """Return ``limit`` Pokemon starting at id ``(page - 1) * limit + 1``.

    Pages are cached; repeated requests return the first result.
    """
    return await service.find_all(params)


@router.get("/{pokemon_id}", response_model=Pokemon)
async def get_pokemon(
    pokemon_id: int,
    service: PokemonService = Depends(get_pokemon_service),
) -> Pokemon:
    try:
        return await service.find_one(pokemon_id)
    except PokemonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.patch("/{pokemon_id}", response_model=Pokemon)
async def update_pokemon(
    pokemon_id: int,
    payload: Any = Body(None),
    service: PokemonService = Depends(get_pokemon_service),
) -> Pokemon:
    """Update name and/or type.  An empty body leaves the Pokemon unchanged."""
    data = parse_update_payload(payload)
    try:
        return await service.update(pokemon_id, data)
    except PokemonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{pokemon_id}", response_class=PlainTextResponse)
async def delete_pokemon(
    pokemon_id: int,
    service: PokemonService = Depends(get_pokemon_service),
) -> str:
    """Remove a Pokemon and return a plain‑text confirmation."""
    try:
        return await service.remove(pokemon_id)
    except PokemonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
