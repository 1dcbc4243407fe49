"""Concrete SQLAlchemy repository implementations.

Exports all SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary (FastAPI dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .base import SqlRepository
from .villas import SqlVillaNumberRepository, SqlVillaRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    villas: SqlVillaRepository
    villa_numbers: SqlVillaNumberRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use behind a FastAPI dependency:

        async def handler(
            session: AsyncSession = Depends(get_session),
        ) -> ...:
            repos = get_repositories(session)
            villa = await repos.villas.get(Villa.id == villa_id)
    """
    return Repositories(
        villas=SqlVillaRepository(session),
        villa_numbers=SqlVillaNumberRepository(session),
    )


__all__ = [
    "SqlRepository",
    "SqlVillaRepository",
    "SqlVillaNumberRepository",
    "Repositories",
    "get_repositories",
]
