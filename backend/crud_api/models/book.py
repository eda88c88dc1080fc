"""
crud-api Backend — Book SQLAlchemy Model
=========================================

What:  ORM model representing the `books` table.
Why:   Maps Python objects to rows so services can work with records, not SQL.
Who:   Used by the book ResourceService, the reset service, and Alembic.

Table Design Rationale:
    - UUID primary key, generated in Python on insert: clients never choose ids.
    - Every content column is nullable: the collection is a loose document
      store, so a book with no author (or only a title) is a valid record.
    - release_date is optional and usually only filled in through an update.
    - created_at is bookkeeping only; it gives listings a stable insertion
      order and is never serialized.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from crud_api.database import Base


class Book(Base):
    """A book in the library collection."""

    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    release_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title={self.title!r})>"
