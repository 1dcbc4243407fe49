"""Domain enumerations for the villa API.

EnvelopeStatus uses the int mixin so it serializes as the bare numeric
status code and stays comparable to plain ints and http.HTTPStatus members.
PatchOp uses the str mixin so JSON Patch documents validate straight into it.
"""

from enum import Enum, IntEnum
from http import HTTPStatus


class EnvelopeStatus(IntEnum):
    """Logical outcome carried in APIResponse.statusCode."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    NOT_FOUND = 404
    INTERNAL_ERROR = 500

    @property
    def phrase(self) -> str:
        return HTTPStatus(self.value).phrase

    @property
    def transport_status(self) -> int:
        """HTTP status used on the wire for this logical status.

        NoContent travels as 200 because a 204 response cannot carry the
        envelope body; every other status is mirrored unchanged.
        """
        if self is EnvelopeStatus.NO_CONTENT:
            return HTTPStatus.OK.value
        return self.value


class PatchOp(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"
