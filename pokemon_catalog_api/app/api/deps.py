"""
Dependencies injected into route handlers.

The service and settings live on ``app.state`` (see ``create_app``),
so each application instance, including the ones built by tests, has
its own isolated catalog.
"""

from typing import Optional

from fastapi import Query, Request

from pokemon_catalog_api.app.core.config import Settings
from pokemon_catalog_api.app.core.exceptions import RequestValidationFailed
from pokemon_catalog_api.app.schemas.pagination import PaginationParams
from pokemon_catalog_api.app.services.pokemon_service import PokemonService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pokemon_service(request: Request) -> PokemonService:
    return request.app.state.pokemon_service


def get_pagination_params(
    request: Request,
    limit: Optional[int] = Query(None, ge=1, description="Page size"),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
) -> PaginationParams:
    """Build ``PaginationParams`` using the configured default and maximum page size."""
    settings = get_settings(request)
    if limit is None:
        limit = settings.default_page_size
    if limit > settings.max_page_size:
        raise RequestValidationFailed([f"limit must not be greater than {settings.max_page_size}"])
    return PaginationParams(limit=limit, page=page)
