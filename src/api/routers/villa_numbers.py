"""Villa-number routers, versioned by path segment.

Every v1/v2 endpoint answers with an APIResponse envelope.  Handler bodies
are plain coroutines returning an envelope; run_enveloped captures any
failure so nothing escapes as an unhandled fault.

v2 is a deliberately reduced surface: the listing and the diagnostic
string endpoint only.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.api.checks import clamp_page_size, ensure_villa_exists, require_positive_id
from src.api.dependencies import get_repos
from src.api.envelope import envelope_response, run_enveloped
from src.domain.errors import ConstraintViolation, NotFoundError, ValidationError
from src.domain.models import (
    APIResponse,
    EnvelopeStatus,
    VillaNumberCreateDTO,
    VillaNumberUpdateDTO,
)
from src.infrastructure.persistence.mapping import (
    villa_number_from_create,
    villa_number_from_update,
    villa_number_to_dto,
)
from src.infrastructure.persistence.models.villas import VillaNumber
from src.infrastructure.persistence.repositories import Repositories

logger = logging.getLogger(__name__)

v1_router = APIRouter(prefix="/v1/villanumbers", tags=["Villa Numbers v1"])
v2_router = APIRouter(prefix="/v2/villanumbers", tags=["Villa Numbers v2"])


# --- handler bodies ---

async def _list(repos: Repositories, page_size: int | None, page_number: int) -> APIResponse:
    rows = await repos.villa_numbers.get_all(
        include=("villa",),
        page_size=clamp_page_size(page_size),
        page_number=page_number,
    )
    return APIResponse.success([villa_number_to_dto(row) for row in rows])


async def _get(repos: Repositories, id: int) -> APIResponse:
    require_positive_id(id, "Villa number")
    row = await repos.villa_numbers.get(VillaNumber.villa_no == id, include=("villa",))
    if row is None:
        raise NotFoundError(f"Villa number {id} not found")
    return APIResponse.success(villa_number_to_dto(row))


async def _create(repos: Repositories, payload: VillaNumberCreateDTO | None) -> APIResponse:
    if payload is None:
        raise ValidationError("A villa number body is required")
    existing = await repos.villa_numbers.get(
        VillaNumber.villa_no == payload.villa_no, tracked=False
    )
    if existing is not None:
        raise ConstraintViolation(f"Villa number {payload.villa_no} already exists")
    await ensure_villa_exists(repos.villas, payload.villa_id)

    row = await repos.villa_numbers.create(villa_number_from_create(payload))
    logger.info("Created villa number %s for villa %s", row.villa_no, row.villa_id)
    return APIResponse.success(villa_number_to_dto(row), EnvelopeStatus.CREATED)


async def _update(
    repos: Repositories, id: int, payload: VillaNumberUpdateDTO | None
) -> APIResponse:
    if payload is None or payload.villa_no != id:
        raise ValidationError(
            "The villa number body is missing or its villaNo does not match the path"
        )
    require_positive_id(id, "Villa number")
    await ensure_villa_exists(repos.villas, payload.villa_id)
    await repos.villa_numbers.update(villa_number_from_update(payload))
    return APIResponse.success(status_code=EnvelopeStatus.NO_CONTENT)


async def _delete(repos: Repositories, id: int) -> APIResponse:
    require_positive_id(id, "Villa number")
    row = await repos.villa_numbers.get(VillaNumber.villa_no == id)
    if row is None:
        raise NotFoundError(f"Villa number {id} not found")
    await repos.villa_numbers.remove(row)
    logger.info("Deleted villa number %s", id)
    return APIResponse.success(status_code=EnvelopeStatus.NO_CONTENT)


# --- v1 ---

@v1_router.get("/getstring")
async def get_strings_v1() -> list[str]:
    return ["Gio1", "Test1"]


@v1_router.get("", response_model=APIResponse)
async def get_villa_numbers(
    page_size: int | None = Query(default=None, alias="pageSize"),
    page_number: int = Query(default=1, alias="pageNumber"),
    repos: Repositories = Depends(get_repos),
) -> JSONResponse:
    return envelope_response(await run_enveloped(_list(repos, page_size, page_number)))


@v1_router.get("/{id}", name="get_villa_number", response_model=APIResponse)
async def get_villa_number(id: int, repos: Repositories = Depends(get_repos)) -> JSONResponse:
    return envelope_response(await run_enveloped(_get(repos, id)))


@v1_router.post("", status_code=201, response_model=APIResponse)
async def create_villa_number(
    request: Request,
    payload: VillaNumberCreateDTO | None = Body(default=None),
    repos: Repositories = Depends(get_repos),
) -> JSONResponse:
    envelope = await run_enveloped(_create(repos, payload))
    headers = None
    if envelope.status_code is EnvelopeStatus.CREATED:
        location = request.url_for("get_villa_number", id=envelope.result.villa_no)
        headers = {"Location": str(location)}
    return envelope_response(envelope, headers)


@v1_router.put("/{id}", response_model=APIResponse)
async def update_villa_number(
    id: int,
    payload: VillaNumberUpdateDTO | None = Body(default=None),
    repos: Repositories = Depends(get_repos),
) -> JSONResponse:
    return envelope_response(await run_enveloped(_update(repos, id, payload)))


@v1_router.delete("/{id}", response_model=APIResponse)
async def delete_villa_number(id: int, repos: Repositories = Depends(get_repos)) -> JSONResponse:
    return envelope_response(await run_enveloped(_delete(repos, id)))


# --- v2 ---

@v2_router.get("/getstring")
async def get_strings_v2() -> list[str]:
    return ["Gio", "Test"]


@v2_router.get("", response_model=APIResponse)
async def get_villa_numbers_v2(
    page_size: int | None = Query(default=None, alias="pageSize"),
    page_number: int = Query(default=1, alias="pageNumber"),
    repos: Repositories = Depends(get_repos),
) -> JSONResponse:
    return envelope_response(await run_enveloped(_list(repos, page_size, page_number)))
