"""ORM models for villas and villa numbers.

Importing this package registers both mappers (and the lower(name) unique
index) with Base.metadata, which Alembic and the test fixtures rely on.
"""

from src.infrastructure.persistence.models.villas import Villa, VillaNumber

__all__ = [
    "Villa",
    "VillaNumber",
]
