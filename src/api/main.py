"""FastAPI application entry point for the Magic Villa API.

create_app() wires routers, logging, and exception handlers:
- ValidationError / ConstraintViolation → 400, NotFoundError → 404, raised
  from the unversioned villa routes.
- Request-body validation failures → 400 (not FastAPI's default 422), with an
  envelope body on versioned paths.
- StoreUnavailable and unexpected exceptions from unversioned routes are not
  handled here and reach the client as a plain 500.
"""

from __future__ import annotations

import logging
import re

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.envelope import envelope_response
from src.api.routers import villa_numbers_v1_router, villa_numbers_v2_router, villas_router
from src.domain.errors import ConstraintViolation, NotFoundError, ValidationError, VillaAPIError
from src.domain.models import APIResponse, EnvelopeStatus
from src.infrastructure.database import Settings, settings

logger = logging.getLogger(__name__)

_VERSIONED_PATH = re.compile(r"^/v\d+/")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


async def domain_error_handler(request: Request, exc: VillaAPIError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=exc.status.value,
        content={"detail": str(exc), "errors": exc.messages},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}")
    logger.warning("%s %s invalid request: %s", request.method, request.url.path, messages)
    if _VERSIONED_PATH.match(request.url.path):
        return envelope_response(APIResponse.failure(EnvelopeStatus.BAD_REQUEST, messages))
    return JSONResponse(
        status_code=EnvelopeStatus.BAD_REQUEST.value,
        content={"detail": "; ".join(messages), "errors": messages},
    )


def create_app(app_settings: Settings = settings) -> FastAPI:
    configure_logging(app_settings.log_level)

    app = FastAPI(title=app_settings.app_name, version="1.0.0")
    app.include_router(villas_router)
    app.include_router(villa_numbers_v1_router)
    app.include_router(villa_numbers_v2_router)

    for error_type in (ValidationError, NotFoundError, ConstraintViolation):
        app.add_exception_handler(error_type, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    logger.info("%s configured", app_settings.app_name)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run("src.api.main:app", host="0.0.0.0", port=8000)
