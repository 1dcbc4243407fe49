"""Villa router: the unversioned base resource.

Handlers raise domain errors and let them propagate.  ValidationError,
NotFoundError and ConstraintViolation are answered by the app-level
exception handlers (400 / 404).  StoreUnavailable and any unexpected fault
are deliberately left unhandled and surface as a generic 500; only the
versioned villa-number routes capture failures into an envelope.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status
from sqlalchemy import and_, func

from src.api.checks import clamp_page_size, ensure_unique_villa_name, require_positive_id
from src.api.dependencies import get_repos
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models import VillaCreateDTO, VillaDTO, VillaUpdateDTO
from src.domain.services import PatchOperation, apply_patch_to_model
from src.infrastructure.persistence.mapping import (
    villa_from_create,
    villa_from_update,
    villa_to_dto,
    villa_to_update_dto,
)
from src.infrastructure.persistence.models.villas import Villa
from src.infrastructure.persistence.repositories import Repositories

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/villas", tags=["Villas"])


@router.get("", response_model=list[VillaDTO])
async def get_villas(
    occupancy: int | None = Query(default=None),
    search: str | None = Query(default=None),
    page_size: int | None = Query(default=None, alias="pageSize"),
    page_number: int = Query(default=1, alias="pageNumber"),
    repos: Repositories = Depends(get_repos),
) -> list[VillaDTO]:
    conditions = []
    if occupancy is not None:
        conditions.append(Villa.occupancy == occupancy)
    if search:
        conditions.append(func.lower(Villa.name).contains(search.lower(), autoescape=True))
    rows = await repos.villas.get_all(
        filter=and_(*conditions) if conditions else None,
        page_size=clamp_page_size(page_size),
        page_number=page_number,
    )
    return [villa_to_dto(row) for row in rows]


@router.get("/{id}", name="get_villa", response_model=VillaDTO)
async def get_villa(id: int, repos: Repositories = Depends(get_repos)) -> VillaDTO:
    require_positive_id(id, "Villa")
    row = await repos.villas.get(Villa.id == id)
    if row is None:
        raise NotFoundError(f"Villa {id} not found")
    return villa_to_dto(row)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=VillaDTO)
async def create_villa(
    request: Request,
    response: Response,
    payload: VillaCreateDTO | None = Body(default=None),
    repos: Repositories = Depends(get_repos),
) -> VillaDTO:
    if payload is None:
        raise ValidationError("A villa body is required")
    await ensure_unique_villa_name(repos.villas, payload.name)
    row = await repos.villas.create(villa_from_create(payload))
    logger.info("Created villa %s (%s)", row.id, row.name)
    response.headers["Location"] = str(request.url_for("get_villa", id=row.id))
    return villa_to_dto(row)


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_villa(
    id: int,
    payload: VillaUpdateDTO | None = Body(default=None),
    repos: Repositories = Depends(get_repos),
) -> Response:
    if payload is None or payload.id != id:
        raise ValidationError("The villa body is missing or its id does not match the path")
    require_positive_id(id, "Villa")
    await ensure_unique_villa_name(repos.villas, payload.name, exclude_id=id)
    await repos.villas.update(villa_from_update(payload))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_partial_villa(
    id: int,
    operations: list[PatchOperation] | None = Body(default=None),
    repos: Repositories = Depends(get_repos),
) -> Response:
    if operations is None:
        raise ValidationError("A JSON Patch document is required")
    require_positive_id(id, "Villa")

    # Untracked: the fetched row is only a template for the patched copy.
    row = await repos.villas.get(Villa.id == id, tracked=False)
    if row is None:
        raise NotFoundError(f"Villa {id} not found")

    patched, errors = apply_patch_to_model(villa_to_update_dto(row), operations)
    if patched is None:
        raise ValidationError(errors)
    if patched.id != id:
        raise ValidationError("The villa id cannot be changed")

    await ensure_unique_villa_name(repos.villas, patched.name, exclude_id=id)
    await repos.villas.update(villa_from_update(patched))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_villa(id: int, repos: Repositories = Depends(get_repos)) -> Response:
    require_positive_id(id, "Villa")
    row = await repos.villas.get(Villa.id == id)
    if row is None:
        raise NotFoundError(f"Villa {id} not found")
    await repos.villas.remove(row)
    logger.info("Deleted villa %s", id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
