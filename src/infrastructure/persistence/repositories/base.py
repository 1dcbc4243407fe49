"""Generic SQLAlchemy implementation of Repository[T].

One class serves every entity type: the concrete subclass only names its
ORM model.  Filters arrive as boolean column expressions and are passed
straight to ``select().where()``.

Every write commits immediately.  Store exceptions are translated at this
boundary:
    IntegrityError                              → ConstraintViolation
    OperationalError / InterfaceError / timeout → StoreUnavailable
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.domain.errors import ConstraintViolation, NotFoundError, StoreUnavailable, ValidationError
from src.domain.repositories.base import Predicate, Repository

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Largest LIMIT/OFFSET a 64-bit store integer can hold.
_MAX_ROWS = 2**63 - 1


class SqlRepository(Repository[T]):
    """Repository over a single ORM model bound to one AsyncSession."""

    model: type[T]

    def __init__(self, session: AsyncSession, model: type[T] | None = None) -> None:
        self._session = session
        if model is not None:
            self.model = model

    @property
    def _name(self) -> str:
        return self.model.__name__

    @asynccontextmanager
    async def _translate_errors(self) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as exc:
            await self._session.rollback()
            raise ConstraintViolation(
                f"{self._name} violates a uniqueness or reference constraint: {exc.orig}"
            ) from exc
        except (OperationalError, InterfaceError, PoolTimeoutError, OSError) as exc:
            raise StoreUnavailable(f"The data store is unavailable: {exc}") from exc

    def _load_options(self, include: Sequence[str]) -> list[Any]:
        options = []
        for name in include:
            relation = inspect(self.model).relationships.get(name)
            if relation is None:
                raise ValueError(f"{self._name} has no relation named {name!r}")
            options.append(selectinload(relation.class_attribute))
        return options

    def _ordering(self, order_by: Any | None) -> list[Any]:
        if order_by is None:
            return list(inspect(self.model).primary_key)
        if isinstance(order_by, (list, tuple)):
            return list(order_by)
        return [order_by]

    def _identity(self, entity: T) -> tuple[Any, ...]:
        identity = tuple(inspect(self.model).primary_key_from_instance(entity))
        if any(part is None for part in identity):
            raise NotFoundError(f"{self._name} has no identity")
        return identity

    def _describe(self, identity: tuple[Any, ...]) -> str:
        key = identity[0] if len(identity) == 1 else identity
        return f"{self._name} {key}"

    async def get_all(
        self,
        filter: Predicate | None = None,
        include: Sequence[str] = (),
        order_by: Any | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> list[T]:
        stmt = select(self.model).options(*self._load_options(include))
        if filter is not None:
            stmt = stmt.where(filter)
        stmt = stmt.order_by(*self._ordering(order_by))
        if page_size is not None:
            number = 1 if page_number is None else page_number
            if page_size < 1 or number < 1:
                raise ValidationError("pageSize and pageNumber must be positive")
            offset = page_size * (number - 1)
            if offset > _MAX_ROWS:
                return []
            stmt = stmt.limit(min(page_size, _MAX_ROWS)).offset(offset)
        async with self._translate_errors():
            result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get(
        self,
        filter: Predicate,
        tracked: bool = True,
        include: Sequence[str] = (),
    ) -> T | None:
        stmt = select(self.model).where(filter).options(*self._load_options(include)).limit(1)
        async with self._translate_errors():
            result = await self._session.execute(stmt)
        entity = result.scalars().first()
        if entity is not None and not tracked:
            self._session.expunge(entity)
        return entity

    async def create(self, entity: T) -> T:
        self._session.add(entity)
        await self.save()
        logger.debug("Created %s", self._describe(self._identity(entity)))
        return entity

    async def update(self, entity: T) -> None:
        identity = self._identity(entity)
        async with self._translate_errors():
            existing = await self._session.get(self.model, identity)
            if existing is None:
                raise NotFoundError(f"{self._describe(identity)} not found")
            await self._session.merge(entity)
        await self.save()
        logger.debug("Updated %s", self._describe(identity))

    async def remove(self, entity: T) -> None:
        identity = self._identity(entity)
        async with self._translate_errors():
            existing = await self._session.get(self.model, identity)
            if existing is None:
                raise NotFoundError(f"{self._describe(identity)} not found")
            await self._session.delete(existing)
        await self.save()
        logger.debug("Removed %s", self._describe(identity))

    async def save(self) -> None:
        async with self._translate_errors():
            await self._session.commit()
