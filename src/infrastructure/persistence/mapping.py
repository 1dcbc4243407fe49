"""Field mapping between wire DTOs and ORM entity records.

Pure structural transforms.  Reading a relationship that was not loaded
eagerly would trigger lazy IO, which async sessions refuse, so the
villa-number mapper only flattens ``villa`` when it is already loaded.
"""

from __future__ import annotations

from sqlalchemy import inspect

from src.domain.models.villas import (
    VillaCreateDTO,
    VillaDTO,
    VillaNumberCreateDTO,
    VillaNumberDTO,
    VillaNumberUpdateDTO,
    VillaUpdateDTO,
)
from src.infrastructure.persistence.models.villas import Villa, VillaNumber


def _is_loaded(entity: object, attribute: str) -> bool:
    return attribute not in inspect(entity).unloaded


# --- Villa ---

def villa_to_dto(row: Villa) -> VillaDTO:
    return VillaDTO(
        id=row.id,
        name=row.name,
        details=row.details,
        rate=row.rate,
        occupancy=row.occupancy,
        sqft=row.sqft,
        image_url=row.image_url,
        amenity=list(row.amenity or []),
    )


def villa_to_update_dto(row: Villa) -> VillaUpdateDTO:
    return VillaUpdateDTO(
        id=row.id,
        name=row.name,
        details=row.details,
        rate=row.rate,
        occupancy=row.occupancy,
        sqft=row.sqft,
        image_url=row.image_url,
        amenity=list(row.amenity or []),
    )


def villa_from_create(dto: VillaCreateDTO) -> Villa:
    return Villa(
        name=dto.name,
        details=dto.details,
        rate=dto.rate,
        occupancy=dto.occupancy,
        sqft=dto.sqft,
        image_url=dto.image_url,
        amenity=list(dto.amenity),
    )


def villa_from_update(dto: VillaUpdateDTO) -> Villa:
    return Villa(
        id=dto.id,
        name=dto.name,
        details=dto.details,
        rate=dto.rate,
        occupancy=dto.occupancy,
        sqft=dto.sqft,
        image_url=dto.image_url,
        amenity=list(dto.amenity),
    )


# --- VillaNumber ---

def villa_number_to_dto(row: VillaNumber) -> VillaNumberDTO:
    villa = None
    if _is_loaded(row, "villa") and row.villa is not None:
        villa = villa_to_dto(row.villa)
    return VillaNumberDTO(
        villa_no=row.villa_no,
        villa_id=row.villa_id,
        special_details=row.special_details,
        villa=villa,
    )


def villa_number_from_create(dto: VillaNumberCreateDTO) -> VillaNumber:
    return VillaNumber(
        villa_no=dto.villa_no,
        villa_id=dto.villa_id,
        special_details=dto.special_details,
    )


def villa_number_from_update(dto: VillaNumberUpdateDTO) -> VillaNumber:
    return VillaNumber(
        villa_no=dto.villa_no,
        villa_id=dto.villa_id,
        special_details=dto.special_details,
    )
