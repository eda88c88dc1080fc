"""
crud-api Backend — Resource Route Factory
==========================================

What:  Builds the five CRUD routes for one collection.
Why:   /books and /wines expose the identical contract; only the service
       behind them differs.
How:   `create_resource_router()` closes over a ResourceService and returns
       an APIRouter mounted at the collection's prefix.

Route Shape (for prefix /books):
    GET    /books        → list          200 [records]
    POST   /books        → create        200 record
    GET    /books/{id}   → get           200 record | null
    PUT    /books/{id}   → update        200 record
    DELETE /books/{id}   → delete        200 record | null

    Every store failure surfaces as 500 with the failure message as
    text/plain (StoreError handler in main.py).

Bodies:
    Clients may send JSON objects or urlencoded/multipart forms. The body
    is read from the raw request instead of a Pydantic parameter so that
    nothing is validated before the service casts it.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from crud_api.database import get_db_session
from crud_api.exceptions import PayloadError
from crud_api.services.resource_service import ResourceService

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Reads the request body as a flat dict of fields.

    Form bodies become {field: value}; a JSON body must be an object.
    An empty body is an empty payload.

    Raises:
        PayloadError: The body is not JSON, or is JSON but not an object.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = await request.json()
    except ValueError:
        raise PayloadError(message="Request body is not valid JSON")
    if not isinstance(data, dict):
        raise PayloadError(
            message=f"Request body must be a JSON object, got {type(data).__name__}"
        )
    return data


def create_resource_router(service: ResourceService, prefix: str, tag: str) -> APIRouter:
    """
    Builds the CRUD router for one collection.

    Args:
        service: ResourceService for the collection
        prefix:  URL prefix, e.g. "/books"
        tag:     OpenAPI tag grouping the routes
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    record_model = service.response_schema
    plural = f"{service.resource}s"

    # Documents the accepted body even though it is read from the raw request
    body_docs = {
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": service.fields_schema.model_json_schema(by_alias=True),
                },
                "application/x-www-form-urlencoded": {
                    "schema": service.fields_schema.model_json_schema(by_alias=True),
                },
            },
        },
    }
    failure = {500: {"description": "Store operation failed (plain text message)"}}

    @router.get(
        "",
        response_model=List[record_model],
        responses=failure,
        summary=f"List all {plural}",
    )
    async def list_records(db: AsyncSession = Depends(get_db_session)):
        return await service.list_records(db)

    @router.post(
        "",
        response_model=record_model,
        responses=failure,
        summary=f"Create a {service.resource}",
        openapi_extra=body_docs,
    )
    async def create_record(
        payload: Dict[str, Any] = Depends(read_payload),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.create_record(db, payload)

    @router.get(
        "/{record_id}",
        response_model=Optional[record_model],
        responses=failure,
        summary=f"Get one {service.resource} (null when absent)",
    )
    async def get_record(record_id: str, db: AsyncSession = Depends(get_db_session)):
        return await service.get_record(db, record_id)

    @router.put(
        "/{record_id}",
        response_model=record_model,
        responses=failure,
        summary=f"Replace every field of a {service.resource}",
        description=(
            "Full replace: fields missing from the body are cleared. "
            "Updating a record that does not exist fails with 500."
        ),
        openapi_extra=body_docs,
    )
    async def update_record(
        record_id: str,
        payload: Dict[str, Any] = Depends(read_payload),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.update_record(db, record_id, payload)

    @router.delete(
        "/{record_id}",
        response_model=Optional[record_model],
        responses=failure,
        summary=f"Delete a {service.resource} (returns it, or null)",
    )
    async def delete_record(record_id: str, db: AsyncSession = Depends(get_db_session)):
        return await service.delete_record(db, record_id)

    return router
