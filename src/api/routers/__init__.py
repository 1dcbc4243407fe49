"""API routers.

villas          — unversioned base resource, plain DTO bodies.
villa_numbers   — /v1 and /v2 villa-number resource, envelope bodies.
"""

from .villa_numbers import v1_router as villa_numbers_v1_router
from .villa_numbers import v2_router as villa_numbers_v2_router
from .villas import router as villas_router

__all__ = ["villas_router", "villa_numbers_v1_router", "villa_numbers_v2_router"]
