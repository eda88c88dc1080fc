"""
crud-api Backend — Wine Request/Response Schemas
=================================================

Same conventions as the book schemas: `_id` on the way out, all fields
optional on the way in, casting only. `"2009"` becomes 2009 for `year`;
`"vintage"` does not, and the create/update fails.
"""

import uuid
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crud_api.schemas.common import blank_to_none


class WineFields(BaseModel):
    """The writable fields of a wine, as sent by a client."""
    name: Optional[str] = None
    year: Optional[int] = None
    country: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        allow_inf_nan=False,
    )

    @field_validator("year", "price", mode="before")
    @classmethod
    def blank_numbers(cls, v: Any) -> Any:
        return blank_to_none(v)


class WineResponse(BaseModel):
    """A stored wine as returned by every /wines endpoint."""
    id: uuid.UUID = Field(alias="_id", description="Store-assigned identifier")
    name: Optional[str] = None
    year: Optional[int] = None
    country: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)
