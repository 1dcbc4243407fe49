"""Tests for src/api/envelope.py — failure capture and transport status."""

import json

from src.api.envelope import envelope_response, run_enveloped
from src.domain.errors import ConstraintViolation, NotFoundError, StoreUnavailable
from src.domain.models import APIResponse, EnvelopeStatus


async def _returns(envelope):
    return envelope


async def _raises(exc):
    raise exc


async def test_successful_operation_passes_through():
    envelope = APIResponse.success([1])
    assert await run_enveloped(_returns(envelope)) is envelope


async def test_not_found_is_captured():
    envelope = await run_enveloped(_raises(NotFoundError("Villa number 5 not found")))
    assert envelope.status_code == EnvelopeStatus.NOT_FOUND
    assert envelope.is_success is False
    assert envelope.error_messages == ["Villa number 5 not found"]


async def test_constraint_violation_becomes_bad_request():
    envelope = await run_enveloped(_raises(ConstraintViolation("duplicate")))
    assert envelope.status_code == EnvelopeStatus.BAD_REQUEST


async def test_store_unavailable_becomes_internal_error():
    envelope = await run_enveloped(_raises(StoreUnavailable("down")))
    assert envelope.status_code == EnvelopeStatus.INTERNAL_ERROR
    assert envelope.error_messages == ["down"]


async def test_unexpected_exception_becomes_internal_error():
    envelope = await run_enveloped(_raises(RuntimeError("kaboom")))
    assert envelope.status_code == EnvelopeStatus.INTERNAL_ERROR
    assert envelope.error_messages == ["kaboom"]


async def test_unexpected_exception_without_message_uses_type_name():
    envelope = await run_enveloped(_raises(KeyError()))
    assert envelope.error_messages


def test_response_mirrors_logical_status():
    response = envelope_response(APIResponse.failure(EnvelopeStatus.NOT_FOUND, ["x"]))
    assert response.status_code == 404


def test_no_content_is_sent_as_200_with_body():
    response = envelope_response(APIResponse.success(status_code=EnvelopeStatus.NO_CONTENT))
    assert response.status_code == 200
    assert json.loads(response.body)["statusCode"] == 204


def test_response_includes_headers():
    response = envelope_response(APIResponse.success(), {"Location": "/v1/villanumbers/1"})
    assert response.headers["location"] == "/v1/villanumbers/1"
