"""
crud-api Backend — Wine SQLAlchemy Model
=========================================

What:  ORM model representing the `wines` table.
Who:   Used by the wine ResourceService, the reset service, and Alembic.

Same shape as `books`: Python-generated UUID key, all content columns
nullable, created_at for insertion order only. `year` is an integer and
`price` a float; anything else sent for them fails to cast and the store
operation errors.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Float, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from crud_api.database import Base


class Wine(Base):
    """A bottle in the wine collection."""

    __tablename__ = "wines"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    country: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Wine(id={self.id}, name={self.name!r}, year={self.year})>"
