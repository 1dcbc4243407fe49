"""Uniform response envelope returned by every versioned endpoint."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import EnvelopeStatus


class APIResponse(BaseModel):
    """Logical result of one request, independent of the transport status.

    An APIResponse is built once per request by the handler that owns it and
    is never shared between requests.  A failed response always carries at
    least one error message.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: EnvelopeStatus = EnvelopeStatus.OK
    is_success: bool = True
    error_messages: list[str] = Field(default_factory=list)
    result: Any = None

    @classmethod
    def success(
        cls, result: Any = None, status_code: EnvelopeStatus = EnvelopeStatus.OK
    ) -> APIResponse:
        return cls(status_code=status_code, is_success=True, result=result)

    @classmethod
    def failure(cls, status_code: EnvelopeStatus, messages: Iterable[str] = ()) -> APIResponse:
        errors = [m for m in messages if m]
        if not errors:
            errors = [status_code.phrase]
        return cls(status_code=status_code, is_success=False, error_messages=errors)
