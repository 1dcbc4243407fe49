"""Tests for src/domain/errors.py."""

from src.domain.errors import (
    ConstraintViolation,
    NotFoundError,
    StoreUnavailable,
    ValidationError,
    VillaAPIError,
)
from src.domain.models import EnvelopeStatus


def test_single_message_is_wrapped_in_list():
    assert ValidationError("bad id").messages == ["bad id"]


def test_multiple_messages_preserve_order():
    exc = ValidationError(["first", "second"])
    assert exc.messages == ["first", "second"]
    assert str(exc) == "first; second"


def test_empty_messages_fall_back_to_phrase():
    assert NotFoundError([]).messages == ["Not Found"]


def test_validation_error_maps_to_bad_request():
    assert ValidationError.status == EnvelopeStatus.BAD_REQUEST


def test_constraint_violation_maps_to_bad_request():
    assert ConstraintViolation.status == EnvelopeStatus.BAD_REQUEST


def test_not_found_maps_to_not_found():
    assert NotFoundError.status == EnvelopeStatus.NOT_FOUND


def test_store_unavailable_maps_to_internal_error():
    assert StoreUnavailable.status == EnvelopeStatus.INTERNAL_ERROR


def test_all_errors_share_base_class():
    for cls in (ValidationError, NotFoundError, ConstraintViolation, StoreUnavailable):
        assert issubclass(cls, VillaAPIError)
