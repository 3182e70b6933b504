"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all.  Tests build their
own ``Settings`` instances and pass them to ``create_app`` instead of
mutating the environment.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pokemon Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Global prefix for every route, e.g. ``/api``.  Empty by default so
    # the catalog is served at ``/pokemons``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Ids at or above this value never resolve, even though the
    # generator could produce a record for them.
    not_found_bound: int = int(os.getenv("POKEMON_NOT_FOUND_BOUND", "100000"))

    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "1000"))

    # Maximum number of cached listing pages.  ``0`` keeps every page
    # for the lifetime of the process.
    cache_max_entries: int = int(os.getenv("PAGINATION_CACHE_MAX_ENTRIES", "0"))

    # When enabled, create/update/remove drop every cached listing page.
    # Disabled by default: cached pages may be stale after writes.
    invalidate_cache_on_write: bool = _env_bool("INVALIDATE_CACHE_ON_WRITE")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at import time, environment variables should be set
# before importing this module.
settings = Settings()
