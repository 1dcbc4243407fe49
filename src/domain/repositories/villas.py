"""Villa and villa-number repository interfaces."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from .base import Repository

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.villas import Villa, VillaNumber


class VillaRepository(Repository["Villa"]):
    """Read/write interface for Villa records.

    update() stamps updated_at before replacing the stored record.
    """

    @abstractmethod
    async def update(self, entity: Villa) -> None:
        """Stamp updated_at and replace the stored villa.  Raises NotFoundError if absent."""


class VillaNumberRepository(Repository["VillaNumber"]):
    """Read/write interface for VillaNumber records.

    update() stamps updated_at before replacing the stored record.  The
    referenced villa is not checked here; handlers validate villa_id.
    """

    @abstractmethod
    async def update(self, entity: VillaNumber) -> None:
        """Stamp updated_at and replace the stored villa number.  Raises NotFoundError if absent."""
