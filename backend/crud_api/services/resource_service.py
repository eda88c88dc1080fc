"""
crud-api Backend — Resource Service (generic CRUD over one collection)
=======================================================================

What:  List/create/get/update/delete for a single record type.
Why:   Books and wines follow exactly the same contract, so one class
       parameterized by ORM model and schemas serves both.
How:   Each public method performs one store operation on the session it
       is given, commits writes before returning, and converts every
       driver failure into a StoreError carrying the driver's message.
Who:   Called by the resource routers and by ResetService.

Contract Summary:
    list_records   → every record, insertion order
    create_record  → cast payload, insert, return stored record
    get_record     → record or None (absence is not an error)
    update_record  → full replace of every writable field; missing record
                     raises RecordNotFoundError
    delete_record  → removed record or None

Design Decision:
    Payloads are cast, never validated. Unknown keys are dropped and fields
    missing from an update are written as None. A value that cannot be cast
    to its column type fails the operation like any other store error.
"""

import logging
import uuid
from typing import Any, Generic, List, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as CastError
from sqlalchemy import delete, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from crud_api.database import Base
from crud_api.exceptions import RecordNotFoundError, StoreError
from crud_api.models import Book, Wine
from crud_api.schemas.book import BookFields, BookResponse
from crud_api.schemas.wine import WineFields, WineResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# sqlite3 raises OverflowError unwrapped when binding an integer past 64 bits
STORE_FAILURES = (SQLAlchemyError, OverflowError)


def describe_store_failure(exc: Exception) -> str:
    """
    Returns the driver-level message for a SQLAlchemy failure.

    DBAPIError's own str() appends the SQL statement and bound parameters;
    the wrapped driver exception holds just the failure itself.
    """
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class ResourceService(Generic[ModelT]):
    """
    CRUD operations for one collection.

    Attributes:
        model:           ORM class backing the collection (e.g. Book)
        fields_schema:   Pydantic model of the writable fields
        response_schema: Pydantic model returned to clients
        resource:        Singular name used in log lines and error messages
    """

    def __init__(
        self,
        model: Type[ModelT],
        fields_schema: Type[BaseModel],
        response_schema: Type[BaseModel],
        resource: str,
    ):
        self.model = model
        self.fields_schema = fields_schema
        self.response_schema = response_schema
        self.resource = resource

    # ── Helpers ───────────────────────────────────────────────────────────

    @property
    def field_names(self) -> List[str]:
        """Writable fields, i.e. the ones a full-replace update overwrites."""
        return list(self.fields_schema.model_fields)

    def cast_fields(self, payload: Mapping[str, Any]) -> BaseModel:
        """
        Casts a client payload onto the writable fields.

        Raises:
            StoreError: A value could not be cast to its field's type.
        """
        try:
            return self.fields_schema.model_validate(dict(payload))
        except CastError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise StoreError(
                message=f"{self.resource.capitalize()} cast failed: {problems}",
                context={"resource": self.resource},
            )

    def parse_id(self, record_id: Any) -> uuid.UUID:
        """
        Converts a path identifier to a UUID.

        Raises:
            StoreError: The identifier is not a UUID, so no lookup can run.
        """
        if isinstance(record_id, uuid.UUID):
            return record_id
        try:
            return uuid.UUID(str(record_id))
        except ValueError:
            raise StoreError(
                message=f"Cast to UUID failed for value \"{record_id}\" at path \"_id\" "
                        f"for {self.resource}",
                context={"resource": self.resource, "resource_id": str(record_id)},
            )

    def to_response(self, record: Optional[ModelT]) -> Optional[BaseModel]:
        # Read columns by field name; the schema's aliases are wire names only
        if record is None:
            return None
        return self.response_schema.model_validate(
            {name: getattr(record, name) for name in self.response_schema.model_fields}
        )

    async def _store_failure(
        self, db: AsyncSession, exc: Exception, operation: str
    ) -> StoreError:
        """Rolls back the session and builds the StoreError to raise."""
        message = describe_store_failure(exc)
        logger.error("%s %s failed: %s", self.resource, operation, message)
        try:
            await db.rollback()
        except SQLAlchemyError:
            logger.error("Rollback after failed %s %s also failed", self.resource, operation)
        return StoreError(
            message=message,
            context={"resource": self.resource, "operation": operation},
        )

    # ── Operations ────────────────────────────────────────────────────────

    async def list_records(self, db: AsyncSession) -> List[BaseModel]:
        """Returns every record in insertion order."""
        try:
            result = await db.execute(select(self.model).order_by(self.model.created_at))
            records = result.scalars().all()
        except STORE_FAILURES as e:
            raise await self._store_failure(db, e, "list")
        return [self.to_response(record) for record in records]

    async def create_record(self, db: AsyncSession, payload: Mapping[str, Any]) -> BaseModel:
        """
        Inserts a new record built from the payload.

        Any identifier in the payload is ignored; the store assigns one.
        """
        fields = self.cast_fields(payload)
        record = self.model(**fields.model_dump())
        try:
            db.add(record)
            await db.commit()
        except STORE_FAILURES as e:
            raise await self._store_failure(db, e, "create")
        logger.info("Created %s %s", self.resource, record.id)
        return self.to_response(record)

    async def create_many(
        self, db: AsyncSession, payloads: Sequence[Mapping[str, Any]]
    ) -> List[BaseModel]:
        """Inserts several records in a single commit. Used for seeding."""
        records = [self.model(**self.cast_fields(p).model_dump()) for p in payloads]
        try:
            db.add_all(records)
            await db.commit()
        except STORE_FAILURES as e:
            raise await self._store_failure(db, e, "create")
        logger.info("Created %d %s records", len(records), self.resource)
        return [self.to_response(record) for record in records]

    async def get_record(self, db: AsyncSession, record_id: Any) -> Optional[BaseModel]:
        """Returns the record, or None when no record has this identifier."""
        rid = self.parse_id(record_id)
        try:
            record = await db.get(self.model, rid)
        except STORE_FAILURES as e:
            raise await self._store_failure(db, e, "get")
        return self.to_response(record)

    async def update_record(
        self, db: AsyncSession, record_id: Any, payload: Mapping[str, Any]
    ) -> BaseModel:
        """
        Overwrites every writable field of an existing record.

        Find and save are two separate store operations with nothing
        holding the row in between; a concurrent update wins or loses
        purely on timing.

        Raises:
            RecordNotFoundError: No record has this identifier.
            StoreError: Lookup, cast or save failed.
        """
        rid = self.parse_id(record_id)
        try:
            record = await db.get(self.model, rid)
        except STORE_FAILURES as e:
            raise await self._store_failure(db, e, "update")

        if record is None:
            logger.warning("Update of missing %s %s", self.resource, rid)
            raise RecordNotFoundError(resource=self.resource, resource_id=str(rid))

        fields = self.cast_fields(payload)
        for name in self.field_names:
            setattr(record, name, getattr(fields, name))

        try:
            await db.commit()
        except STORE_FAILURES as e:
            raise await self._store_failure(db, e, "update")
        logger.info("Updated %s %s", self.resource, rid)
        return self.to_response(record)

    async def delete_record(self, db: AsyncSession, record_id: Any) -> Optional[BaseModel]:
        """Removes the record and returns it, or returns None if nothing matched."""
        rid = self.parse_id(record_id)
        try:
            record = await db.get(self.model, rid)
            if record is None:
                return None
            removed = self.to_response(record)
            await db.delete(record)
            await db.commit()
        except STORE_FAILURES as e:
            raise await self._store_failure(db, e, "delete")
        logger.info("Deleted %s %s", self.resource, rid)
        return removed

    async def delete_all(self, db: AsyncSession) -> int:
        """Removes every record in the collection. Returns the number removed."""
        try:
            result = await db.execute(delete(self.model))
            await db.commit()
        except STORE_FAILURES as e:
            raise await self._store_failure(db, e, "clear")
        removed = result.rowcount or 0
        logger.info("Removed %d %s records", removed, self.resource)
        return removed


# ── Service Instances ─────────────────────────────────────────────────────
book_service: ResourceService[Book] = ResourceService(Book, BookFields, BookResponse, "book")
wine_service: ResourceService[Wine] = ResourceService(Wine, WineFields, WineResponse, "wine")
