"""Domain model package.

Wire DTOs, the response envelope, and enumerations.  All objects here are
pure Pydantic models with no ORM or infrastructure dependencies.  Import
from this package to avoid coupling application code to individual module
paths.
"""

from .envelope import APIResponse
from .enums import EnvelopeStatus, PatchOp
from .villas import (
    VillaCreateDTO,
    VillaDTO,
    VillaNumberCreateDTO,
    VillaNumberDTO,
    VillaNumberUpdateDTO,
    VillaUpdateDTO,
)

__all__ = [
    # Envelope
    "APIResponse",
    # Enums
    "EnvelopeStatus",
    "PatchOp",
    # Villas
    "VillaDTO",
    "VillaCreateDTO",
    "VillaUpdateDTO",
    # Villa numbers
    "VillaNumberDTO",
    "VillaNumberCreateDTO",
    "VillaNumberUpdateDTO",
]
