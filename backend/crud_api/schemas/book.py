"""
crud-api Backend — Book Request/Response Schemas
=================================================

What:  Pydantic models for the book wire format.
Why:   Keeps the JSON shape (`_id`, camelCase `releaseDate`) separate from
       the ORM columns, and gives OpenAPI a model to document.

BookFields is not a validation schema. Every field is optional, unknown
keys are dropped, and values are only cast to the column type. A value that
cannot be cast is reported by the service as a failed store operation.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crud_api.schemas.common import blank_to_none


def as_utc(v: Optional[datetime]) -> Optional[datetime]:
    """Naive timestamps are taken as UTC."""
    if v is not None and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


class BookFields(BaseModel):
    """
    What:  The writable fields of a book, as sent by a client.
    Who:   Parsed by ResourceService.create() and .update().

    Update is a full replace: a field missing from the payload comes out
    as None here and overwrites the stored value.
    """
    title: Optional[str] = None
    author: Optional[str] = None
    image: Optional[str] = None
    release_date: Optional[datetime] = Field(default=None, alias="releaseDate")

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("release_date", mode="before")
    @classmethod
    def blank_release_date(cls, v: Any) -> Any:
        """Empty form input means no release date."""
        return blank_to_none(v)

    @field_validator("release_date")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class BookResponse(BaseModel):
    """
    What:  A stored book as returned by every /books endpoint.
    """
    id: uuid.UUID = Field(alias="_id", description="Store-assigned identifier")
    title: Optional[str] = None
    author: Optional[str] = None
    image: Optional[str] = None
    release_date: Optional[datetime] = Field(default=None, alias="releaseDate")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("release_date")
    @classmethod
    def stored_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        # SQLite hands back timezone-aware columns as naive values
        return as_utc(v)
