"""Request guards shared by the villa and villa-number handlers.

Each guard raises a domain error; unversioned routes let it reach the
app-level exception handlers, versioned routes fold it into the envelope.
"""

from __future__ import annotations

from sqlalchemy import and_, func

from src.domain.errors import ConstraintViolation, ValidationError
from src.domain.repositories import VillaRepository
from src.infrastructure.persistence.models.villas import Villa

MAX_PAGE_SIZE = 100


def require_positive_id(id: int, resource: str) -> None:
    """Reject the zero sentinel and negative ids before touching the store."""
    if id <= 0:
        raise ValidationError(f"{resource} id must be a positive integer, got {id}")


def clamp_page_size(page_size: int | None) -> int | None:
    if page_size is None:
        return None
    return min(page_size, MAX_PAGE_SIZE)


async def ensure_unique_villa_name(
    villas: VillaRepository, name: str, exclude_id: int | None = None
) -> None:
    condition = func.lower(Villa.name) == name.lower()
    if exclude_id is not None:
        condition = and_(condition, Villa.id != exclude_id)
    if await villas.get(condition, tracked=False) is not None:
        raise ConstraintViolation(f"Villa {name!r} already exists")


async def ensure_villa_exists(villas: VillaRepository, villa_id: int) -> None:
    if villa_id <= 0 or await villas.get(Villa.id == villa_id, tracked=False) is None:
        raise ConstraintViolation(f"Villa id {villa_id} is invalid")
