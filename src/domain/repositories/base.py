"""Generic repository base interface.

Repository[T] is the data-access contract shared by every entity type.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the persisted entity record type; DTOs never reach a repository.
  - Filters are boolean column expressions (``Villa.id == 3``), so the
    contract stays independent of any query language the caller would
    otherwise have to build.
  - Absence on read is a normal outcome (None / empty list).  Absence on
    update() and remove() raises NotFoundError.
  - Repositories never cache; every call is answered by the store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    Predicate = ColumnElement[bool]
else:
    Predicate = Any

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD interface for one entity type."""

    @abstractmethod
    async def get_all(
        self,
        filter: Predicate | None = None,
        include: Sequence[str] = (),
        order_by: Any | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> list[T]:
        """Return every entity matching filter (all entities when None).

        include names navigation relations to load eagerly.  Pagination is
        applied after filtering and ordering; page numbers are 1-based and a
        page past the end is empty.
        """

    @abstractmethod
    async def get(
        self,
        filter: Predicate,
        tracked: bool = True,
        include: Sequence[str] = (),
    ) -> T | None:
        """Return the first entity matching filter, or None.

        With tracked=False the entity is detached from the session, so
        in-place edits are never persisted implicitly.
        """

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it with store-assigned fields populated.

        Raises ConstraintViolation on a uniqueness breach and
        StoreUnavailable when the store cannot be reached.
        """

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Replace the stored record with entity's identity.  Raises NotFoundError if absent."""

    @abstractmethod
    async def remove(self, entity: T) -> None:
        """Delete the stored record with entity's identity.  Raises NotFoundError if absent."""

    @abstractmethod
    async def save(self) -> None:
        """Commit pending changes."""
