"""Domain error taxonomy.

Every error raised by repositories and handlers derives from VillaAPIError
and carries an ordered list of human-readable messages plus the envelope
status it maps to.  Handlers translate these into responses; nothing below
the API layer knows about HTTP.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.domain.models.enums import EnvelopeStatus


class VillaAPIError(Exception):
    """Base class for all expected failures."""

    status: EnvelopeStatus = EnvelopeStatus.INTERNAL_ERROR

    def __init__(self, message: str | Iterable[str]) -> None:
        if isinstance(message, str):
            messages = [message]
        else:
            messages = [str(m) for m in message]
        if not messages:
            messages = [self.status.phrase]
        self.messages: list[str] = messages
        super().__init__("; ".join(messages))


class ValidationError(VillaAPIError):
    """Malformed or missing input, a zero/negative id, or a failed patch."""

    status = EnvelopeStatus.BAD_REQUEST


class NotFoundError(VillaAPIError):
    """No record exists for the requested identity."""

    status = EnvelopeStatus.NOT_FOUND


class ConstraintViolation(VillaAPIError):
    """A uniqueness or referential-integrity rule would be broken."""

    status = EnvelopeStatus.BAD_REQUEST


class StoreUnavailable(VillaAPIError):
    """The backing store could not be reached."""

    status = EnvelopeStatus.INTERNAL_ERROR
