"""
Pydantic models for Pokemon data.

``Pokemon`` is the catalog entity and the response model of every
route.  ``PokemonCreate`` and ``PokemonUpdate`` are the request bodies.
Request bodies are checked by ``collect_violations`` before the models
are built, so clients get one message per broken rule, in a stable
order, instead of Pydantic's error dump.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from pokemon_catalog_api.app.core.exceptions import RequestValidationFailed

# Fields a client may send, in the order violations are reported.
WRITABLE_FIELDS = ("name", "type")

_MISSING = object()


class Pokemon(BaseModel):
    id: int = Field(..., ge=1, examples=[4])
    name: str = Field(..., min_length=1, examples=["charmander"])
    type: str = Field(..., min_length=1, examples=["fire"])
    hp: int = Field(0, ge=0, examples=[39])
    sprites: List[str] = Field(default_factory=list)

    # updates are applied with setattr; keep them checked
    model_config = {"validate_assignment": True}


class PokemonCreate(BaseModel):
    """Schema for creating a Pokemon."""

    name: str = Field(..., examples=["Pikachu"])
    type: str = Field(..., examples=["Electric"])

    model_config = {"extra": "forbid"}


class PokemonUpdate(BaseModel):
    """Schema for updating a Pokemon.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = None
    type: Optional[str] = None

    model_config = {"extra": "forbid"}


def collect_violations(
    payload: Optional[Mapping[str, Any]],
    required: bool,
    fields: Sequence[str] = WRITABLE_FIELDS,
) -> List[str]:
    """Return every rule ``payload`` breaks, in a stable order.

    For each field: ``<field> must be a string`` then
    ``<field> should not be empty``.  When ``required`` is false, absent
    fields are skipped.  Unknown keys come last as
    ``property <key> should not exist``.  A ``None`` payload is treated
    as an empty object.
    """
    payload = payload or {}
    messages: List[str] = []
    for field in fields:
        value = payload.get(field, _MISSING)
        if value is _MISSING and not required:
            continue
        if not isinstance(value, str):
            messages.append(f"{field} must be a string")
        if value is _MISSING or value is None or value == "":
            messages.append(f"{field} should not be empty")
    for key in payload:
        if key not in fields:
            messages.append(f"property {key} should not exist")
    return messages


def _ensure_object(payload: Any) -> Dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise RequestValidationFailed(["request body must be an object"])
    return payload


def parse_create_payload(payload: Any) -> PokemonCreate:
    """Validate a create body and build a ``PokemonCreate``.

    Raises ``RequestValidationFailed`` listing every violation.
    """
    data = _ensure_object(payload)
    violations = collect_violations(data, required=True)
    if violations:
        raise RequestValidationFailed(violations)
    return PokemonCreate(**data)


def parse_update_payload(payload: Any) -> PokemonUpdate:
    """Validate an update body; an empty body is valid."""
    data = _ensure_object(payload)
    violations = collect_violations(data, required=False)
    if violations:
        raise RequestValidationFailed(violations)
    return PokemonUpdate(**data)
