"""Villa ORM models: villas and villa_numbers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Villa(Base):
    """Lodging unit.

    id is store-assigned.  name is unique under case-insensitive comparison,
    enforced by the functional index uq_villas_name_lower below.
    amenity is a JSON list of strings.
    """

    __tablename__ = "villas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    rate: Mapped[float] = mapped_column(Float, nullable=False)
    sqft: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    occupancy: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    amenity: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    # Python-side defaults: a server default would expire the attribute after
    # flush and force a lazy refresh, which async sessions cannot do implicitly.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    # Rows not loaded in the session are removed by ON DELETE CASCADE.
    villa_numbers: Mapped[list["VillaNumber"]] = relationship(
        back_populates="villa", cascade="all", passive_deletes=True
    )


Index("uq_villas_name_lower", func.lower(Villa.name), unique=True)


class VillaNumber(Base):
    """Numbered sub-unit of a villa.

    villa_no is supplied by the caller and is the primary key.  villa_id
    must reference an existing villa; the API layer checks this before
    every write.
    """

    __tablename__ = "villa_numbers"

    villa_no: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    villa_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("villas.id", ondelete="CASCADE"), nullable=False, index=True
    )
    special_details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    villa: Mapped["Villa"] = relationship(back_populates="villa_numbers")
