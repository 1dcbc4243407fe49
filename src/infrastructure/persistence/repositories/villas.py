"""SQLAlchemy implementations of VillaRepository and VillaNumberRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from src.domain.repositories.villas import VillaNumberRepository, VillaRepository
from src.infrastructure.persistence.models.villas import Villa, VillaNumber

from .base import SqlRepository


class SqlVillaRepository(SqlRepository[Villa], VillaRepository):
    model = Villa

    async def update(self, entity: Villa) -> None:
        entity.updated_at = datetime.now(timezone.utc)
        await super().update(entity)


class SqlVillaNumberRepository(SqlRepository[VillaNumber], VillaNumberRepository):
    model = VillaNumber

    async def update(self, entity: VillaNumber) -> None:
        entity.updated_at = datetime.now(timezone.utc)
        await super().update(entity)
