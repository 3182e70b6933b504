"""
Domain errors raised by the catalog service.

Every failure path in the service raises one of these; endpoints
translate them into HTTP responses.  None of them is retryable: the
catalog lives in memory, so repeating the call gives the same answer.
"""

from typing import List


class CatalogError(Exception):
    """Base class for catalog errors."""


class PokemonNotFoundError(CatalogError):
    """No Pokemon resolves for the requested id."""

    def __init__(self, pokemon_id: int) -> None:
        self.pokemon_id = pokemon_id
        super().__init__(f"Pokemon with id {pokemon_id} not found")


class DuplicatePokemonError(CatalogError):
    """A runtime Pokemon with the same name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Pokemon with name {name} already exists")


class RequestValidationFailed(CatalogError):
    """A request payload broke one or more validation rules.

    ``messages`` keeps the violations in the order they were found.
    """

    def __init__(self, messages: List[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))
