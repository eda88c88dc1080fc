"""
crud-api Backend — Book and Wine Endpoint Tests
================================================

What:  End-to-end HTTP tests for /books and /wines.
How:   HTTPX AsyncClient over ASGITransport against a SQLite store.

What we test:
    ✅ POST → GET → DELETE → GET round trip (null after delete)
    ✅ List contains created records
    ✅ PUT is a full replace; PUT on a missing id is a 500 with a text body
    ✅ Form-encoded bodies are accepted; unparseable JSON is a 400
    ✅ Store failures are 500 text/plain with the failure message
    ✅ releaseDate reads back exactly as create returned it
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest

from crud_api.exceptions import StoreError


class TestBooksEndpoints:

    @pytest.mark.asyncio
    async def test_create_get_delete_round_trip(self, test_client):
        response = await test_client.post("/books", json={"title": "Dune", "author": "Herbert"})

        assert response.status_code == 200
        book = response.json()
        assert book["title"] == "Dune"
        assert book["author"] == "Herbert"
        book_id = book["_id"]
        uuid.UUID(book_id)

        response = await test_client.get(f"/books/{book_id}")
        assert response.status_code == 200
        assert response.json() == book

        response = await test_client.delete(f"/books/{book_id}")
        assert response.status_code == 200
        assert response.json() == book

        response = await test_client.get(f"/books/{book_id}")
        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_release_date_reads_back_unchanged(self, test_client):
        created = (
            await test_client.post("/books", json={"title": "Dune", "releaseDate": "1965-08-01T00:00:00"})
        ).json()

        fetched = (await test_client.get(f"/books/{created['_id']}")).json()

        assert fetched == created
        assert (await test_client.get("/books")).json() == [created]

    @pytest.mark.asyncio
    async def test_list_contains_created_book(self, test_client, sample_book):
        created = (await test_client.post("/books", json=sample_book)).json()

        response = await test_client.get("/books")

        assert response.status_code == 200
        assert created in response.json()

    @pytest.mark.asyncio
    async def test_put_is_full_replace(self, test_client, sample_book):
        created = (await test_client.post("/books", json=sample_book)).json()

        response = await test_client.put(
            f"/books/{created['_id']}",
            json={"title": "Children of Dune", "releaseDate": "1976-04-01T00:00:00"},
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["_id"] == created["_id"]
        assert updated["title"] == "Children of Dune"
        assert updated["author"] is None
        assert updated["image"] is None
        assert updated["releaseDate"].startswith("1976-04-01")

        fetched = (await test_client.get(f"/books/{created['_id']}")).json()
        assert fetched["title"] == "Children of Dune"
        assert fetched["author"] is None
        assert fetched["releaseDate"].startswith("1976-04-01")

    @pytest.mark.asyncio
    async def test_put_missing_book_is_500(self, test_client, sample_book):
        missing = str(uuid.uuid4())

        response = await test_client.put(f"/books/{missing}", json=sample_book)

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert missing in response.text

    @pytest.mark.asyncio
    async def test_delete_missing_book_returns_null(self, test_client):
        response = await test_client.delete(f"/books/{uuid.uuid4()}")
        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_malformed_id_is_500(self, test_client):
        response = await test_client.get("/books/12345")
        assert response.status_code == 500
        assert "12345" in response.text

    @pytest.mark.asyncio
    async def test_form_encoded_body(self, test_client):
        response = await test_client.post(
            "/books", data={"title": "Kindred", "author": "Octavia E. Butler", "releaseDate": ""}
        )

        assert response.status_code == 200
        assert response.json()["author"] == "Octavia E. Butler"
        assert response.json()["releaseDate"] is None

    @pytest.mark.asyncio
    async def test_invalid_json_body_is_400(self, test_client):
        response = await test_client.post(
            "/books", content=b"{not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_store_failure_is_500_with_message(self, test_client):
        with patch(
            "crud_api.services.resource_service.book_service.list_records",
            new=AsyncMock(side_effect=StoreError("connection reset by peer")),
        ):
            response = await test_client.get("/books")

        assert response.status_code == 500
        assert response.text == "connection reset by peer"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/books", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"


class TestWinesEndpoints:

    @pytest.mark.asyncio
    async def test_create_and_get_wine(self, test_client, sample_wine):
        response = await test_client.post("/wines", json=sample_wine)

        assert response.status_code == 200
        wine = response.json()
        assert {k: wine[k] for k in sample_wine} == sample_wine

        fetched = (await test_client.get(f"/wines/{wine['_id']}")).json()
        assert fetched == wine

    @pytest.mark.asyncio
    async def test_put_replaces_wine_fields(self, test_client, sample_wine):
        created = (await test_client.post("/wines", json=sample_wine)).json()
        replacement = {
            "name": "Barolo Cannubi Riserva",
            "year": "2013",
            "country": "Italy",
            "description": "Older and softer.",
            "image": "/images/wines/barolo_riserva.jpg",
            "price": "89",
        }

        response = await test_client.put(f"/wines/{created['_id']}", json=replacement)

        assert response.status_code == 200
        updated = response.json()
        assert updated["year"] == 2013
        assert updated["price"] == 89.0
        assert updated["name"] == replacement["name"]

    @pytest.mark.asyncio
    async def test_put_missing_wine_is_500(self, test_client, sample_wine):
        response = await test_client.put(f"/wines/{uuid.uuid4()}", json=sample_wine)
        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_uncastable_year_is_500(self, test_client):
        response = await test_client.post("/wines", json={"name": "Odd", "year": "MMXV"})
        assert response.status_code == 500
        assert "year" in response.text

    @pytest.mark.asyncio
    async def test_nan_price_is_500(self, test_client):
        response = await test_client.post("/wines", json={"name": "Odd", "price": "NaN"})
        assert response.status_code == 500
        assert "price" in response.text
        assert (await test_client.get("/wines")).json() == []

    @pytest.mark.asyncio
    async def test_collections_are_independent(self, test_client, sample_book, sample_wine):
        book = (await test_client.post("/books", json=sample_book)).json()
        await test_client.post("/wines", json=sample_wine)

        assert (await test_client.get(f"/wines/{book['_id']}")).json() is None
        assert len((await test_client.get("/books")).json()) == 1
        assert len((await test_client.get("/wines")).json()) == 1
