"""FastAPI dependencies shared by all routers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database import get_session
from src.infrastructure.persistence.repositories import Repositories, get_repositories


async def get_repos(session: AsyncSession = Depends(get_session)) -> Repositories:
    """Repositories bound to the request's session."""
    return get_repositories(session)
