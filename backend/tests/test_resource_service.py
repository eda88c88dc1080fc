"""
crud-api Backend — Resource Service Unit Tests
===============================================

What:  Tests for ResourceService (list, create, get, update, delete).
How:   Real SQLite session for the happy paths; a mock session for
       injected store failures.

What we test:
    ✅ Create assigns an id and get returns the same record
    ✅ Client-supplied ids and unknown keys are ignored
    ✅ Update is a full replace and fails for a missing record
    ✅ Delete returns the removed record, then get returns None
    ✅ Cast failures and malformed ids are StoreErrors
    ✅ Driver failures roll back and surface the driver message
"""

import uuid
from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from crud_api.exceptions import RecordNotFoundError, StoreError
from crud_api.services.resource_service import book_service, wine_service


class TestCreateAndGet:
    """create_record followed by get_record."""

    @pytest.mark.asyncio
    async def test_create_then_get_returns_same_record(self, db_session, sample_book):
        created = await book_service.create_record(db_session, sample_book)

        assert isinstance(created.id, uuid.UUID)
        assert created.title == "Dune"
        assert created.author == "Frank Herbert"

        fetched = await book_service.get_record(db_session, str(created.id))
        assert fetched == created

    @pytest.mark.asyncio
    async def test_client_id_is_ignored(self, db_session, sample_book):
        chosen = str(uuid.uuid4())
        created = await book_service.create_record(
            db_session, {**sample_book, "_id": chosen, "id": chosen}
        )
        assert str(created.id) != chosen

    @pytest.mark.asyncio
    async def test_unknown_fields_are_dropped(self, db_session):
        created = await book_service.create_record(
            db_session, {"title": "Solaris", "publisher": "Faber"}
        )
        dumped = created.model_dump(by_alias=True)
        assert "publisher" not in dumped
        assert dumped["author"] is None

    @pytest.mark.asyncio
    async def test_wine_strings_are_cast_to_numbers(self, db_session):
        created = await wine_service.create_record(
            db_session, {"name": "Txakoli", "year": "2019", "price": "18.25"}
        )
        assert created.year == 2019
        assert created.price == 18.25

    @pytest.mark.asyncio
    async def test_uncastable_value_is_store_error(self, db_session):
        with pytest.raises(StoreError) as exc_info:
            await wine_service.create_record(db_session, {"name": "Mystery", "year": "vintage"})
        assert "year" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_non_finite_price_is_store_error(self, db_session):
        for price in ("nan", "inf", "-inf"):
            with pytest.raises(StoreError) as exc_info:
                await wine_service.create_record(db_session, {"name": "Mystery", "price": price})
            assert "price" in exc_info.value.message
        assert await wine_service.list_records(db_session) == []

    @pytest.mark.asyncio
    async def test_out_of_range_year_is_store_error(self, db_session):
        with pytest.raises(StoreError):
            await wine_service.create_record(db_session, {"name": "Far Future", "year": 10**20})

        # Session was rolled back and stays usable
        assert await wine_service.list_records(db_session) == []

    @pytest.mark.asyncio
    async def test_get_missing_record_returns_none(self, db_session):
        assert await book_service.get_record(db_session, str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_get_malformed_id_is_store_error(self, db_session):
        with pytest.raises(StoreError) as exc_info:
            await book_service.get_record(db_session, "not-an-id")
        assert "not-an-id" in exc_info.value.message


class TestList:
    """list_records."""

    @pytest.mark.asyncio
    async def test_list_empty(self, db_session):
        assert await wine_service.list_records(db_session) == []

    @pytest.mark.asyncio
    async def test_list_contains_created_record(self, db_session, sample_wine):
        created = await wine_service.create_record(db_session, sample_wine)
        records = await wine_service.list_records(db_session)
        assert [r.id for r in records] == [created.id]
        assert records[0].name == sample_wine["name"]
        assert records[0].price == sample_wine["price"]


class TestUpdate:
    """update_record: full replace semantics."""

    @pytest.mark.asyncio
    async def test_update_overwrites_every_field(self, db_session, sample_book):
        created = await book_service.create_record(db_session, sample_book)

        updated = await book_service.update_record(
            db_session,
            str(created.id),
            {"title": "Dune Messiah", "releaseDate": "1969-10-15T00:00:00"},
        )

        assert updated.id == created.id
        assert updated.title == "Dune Messiah"
        # Missing from the payload, so cleared rather than kept
        assert updated.author is None
        assert updated.image is None
        assert updated.release_date.replace(tzinfo=None) == datetime(1969, 10, 15)

        fetched = await book_service.get_record(db_session, created.id)
        assert fetched.title == "Dune Messiah"
        assert fetched.author is None

    @pytest.mark.asyncio
    async def test_update_missing_record_fails(self, db_session, sample_book):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await book_service.update_record(db_session, str(uuid.uuid4()), sample_book)
        assert isinstance(exc_info.value, StoreError)
        assert exc_info.value.resource == "book"

    @pytest.mark.asyncio
    async def test_update_with_uncastable_value_keeps_record(self, db_session, sample_wine):
        created = await wine_service.create_record(db_session, sample_wine)

        with pytest.raises(StoreError):
            await wine_service.update_record(
                db_session, created.id, {**sample_wine, "price": "expensive"}
            )

        fetched = await wine_service.get_record(db_session, created.id)
        assert fetched.price == sample_wine["price"]


class TestDelete:
    """delete_record and delete_all."""

    @pytest.mark.asyncio
    async def test_delete_returns_removed_record(self, db_session, sample_book):
        created = await book_service.create_record(db_session, sample_book)

        removed = await book_service.delete_record(db_session, str(created.id))

        assert removed == created
        assert await book_service.get_record(db_session, created.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_record_returns_none(self, db_session):
        assert await book_service.delete_record(db_session, str(uuid.uuid4())) is None

    @pytest.mark.asyncio
    async def test_delete_all_empties_collection(self, db_session, sample_wine):
        await wine_service.create_many(db_session, [sample_wine, sample_wine])

        removed = await wine_service.delete_all(db_session)

        assert removed == 2
        assert await wine_service.list_records(db_session) == []


class TestStoreFailures:
    """Driver errors are wrapped, rolled back, and never retried."""

    @staticmethod
    def _driver_error(message: str) -> OperationalError:
        return OperationalError("SELECT", {}, Exception(message))

    @pytest.mark.asyncio
    async def test_list_failure_surfaces_driver_message(self, mock_db_session):
        mock_db_session.execute.side_effect = self._driver_error("connection refused")

        with pytest.raises(StoreError) as exc_info:
            await book_service.list_records(mock_db_session)

        assert exc_info.value.message == "connection refused"
        mock_db_session.execute.assert_awaited_once()
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_commit_failure(self, mock_db_session, sample_book):
        mock_db_session.commit.side_effect = self._driver_error("disk I/O error")

        with pytest.raises(StoreError) as exc_info:
            await book_service.create_record(mock_db_session, sample_book)

        assert exc_info.value.message == "disk I/O error"
        mock_db_session.add.assert_called_once()
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_lookup_failure(self, mock_db_session, sample_book):
        mock_db_session.get.side_effect = self._driver_error("database is locked")

        with pytest.raises(StoreError) as exc_info:
            await book_service.update_record(mock_db_session, uuid.uuid4(), sample_book)

        assert not isinstance(exc_info.value, RecordNotFoundError)
        mock_db_session.commit.assert_not_awaited()
