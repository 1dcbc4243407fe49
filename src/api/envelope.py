"""Envelope capture and transport for versioned endpoints.

Versioned handlers never let an exception escape: known domain errors map
to their envelope status, anything else becomes InternalError.  The HTTP
status then mirrors the envelope's statusCode via
EnvelopeStatus.transport_status (NoContent travels as 200).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Mapping

from fastapi.responses import JSONResponse

from src.domain.errors import VillaAPIError
from src.domain.models import APIResponse, EnvelopeStatus

logger = logging.getLogger(__name__)


async def run_enveloped(operation: Awaitable[APIResponse]) -> APIResponse:
    """Await a handler body and capture any failure into a fresh envelope."""
    try:
        return await operation
    except VillaAPIError as exc:
        logger.warning("Request rejected (%s): %s", exc.status.name, exc)
        return APIResponse.failure(exc.status, exc.messages)
    except Exception as exc:
        logger.exception("Unexpected failure in versioned handler")
        return APIResponse.failure(
            EnvelopeStatus.INTERNAL_ERROR, [str(exc) or type(exc).__name__]
        )


def envelope_response(
    envelope: APIResponse, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=envelope.status_code.transport_status,
        content=envelope.model_dump(mode="json", by_alias=True),
        headers=dict(headers) if headers else None,
    )
