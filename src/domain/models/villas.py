"""Villa and villa-number wire DTOs.

These are the shapes that cross the HTTP boundary; persisted records live
in src/infrastructure/persistence/models/.  JSON keys are camelCase
(``imageUrl``, ``villaNo``) while Python attributes stay snake_case; both
spellings are accepted on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NAME_MAX_LENGTH = 30


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VillaDTO(_WireModel):
    """Read shape of a villa."""

    id: int
    name: str = Field(max_length=NAME_MAX_LENGTH)
    details: str | None = None
    rate: float
    occupancy: int = 0
    sqft: int = 0
    image_url: str | None = None
    amenity: list[str] = Field(default_factory=list)


class VillaCreateDTO(_WireModel):
    """Payload for POST /villas.  The id is always store-assigned."""

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    details: str | None = None
    rate: float
    occupancy: int = Field(default=0, ge=0)
    sqft: int = Field(default=0, ge=0)
    image_url: str | None = None
    amenity: list[str] = Field(default_factory=list)


class VillaUpdateDTO(_WireModel):
    """Full-replace payload for PUT, and the document shape PATCH edits."""

    id: int
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    details: str | None = None
    rate: float
    occupancy: int = Field(ge=0)
    sqft: int = Field(ge=0)
    image_url: str | None = None
    amenity: list[str] = Field(default_factory=list)


class VillaNumberDTO(_WireModel):
    """Read shape of a villa number, with its villa flattened in when loaded."""

    villa_no: int
    villa_id: int
    special_details: str | None = None
    villa: VillaDTO | None = None


class VillaNumberCreateDTO(_WireModel):
    villa_no: int = Field(gt=0)
    villa_id: int
    special_details: str | None = None


class VillaNumberUpdateDTO(_WireModel):
    villa_no: int = Field(gt=0)
    villa_id: int
    special_details: str | None = None
