"""
crud-api Backend — Site Routes (home and reset)
================================================

What:  GET / (home page), GET /reset (confirmation page), POST /reset.
Who:   Browsers use the pages; scripts and tests call POST /reset?format=json.

POST /reset Responses:
    format == "json" → 200 with the newly created books followed by wines,
                       or 500 (text/plain) if any reset step failed
    anything else    → 302 redirect to /, whatever happened in between

The format hint is read from the query string first, then from the body
(form field or JSON key), so both `curl -X POST /reset?format=json` and a
form with a hidden `format` input work.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from crud_api import views
from crud_api.database import get_db_session
from crud_api.exceptions import PayloadError
from crud_api.routes.resource import read_payload
from crud_api.services.reset_service import reset_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Site"])


@router.get("/", response_class=HTMLResponse, summary="Home page")
async def home() -> HTMLResponse:
    return HTMLResponse(views.render_home())


@router.get("/reset", response_class=HTMLResponse, summary="Reset confirmation page")
async def confirm_reset() -> HTMLResponse:
    return HTMLResponse(views.render_reset_confirmation())


@router.post(
    "/reset",
    responses={
        200: {"description": "Created books and wines (format=json)"},
        302: {"description": "Redirect to the home page"},
        500: {"description": "A reset step failed (format=json only)"},
    },
    summary="Reload both collections from seed data",
)
async def reset(
    request: Request,
    format: Optional[str] = Query(default=None, description="'json' to get the created records back"),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Clear and reseed books, then wines.

    The four steps run in order without a surrounding transaction; see
    ResetService for what happens when one fails.
    """
    if format is None:
        try:
            payload = await read_payload(request)
        except PayloadError:
            # The body only ever carries the format hint; an unreadable one means no hint
            payload = {}
        hint = payload.get("format")
        format = hint if isinstance(hint, str) else None

    result = await reset_service.reset(db)

    if format == "json":
        if result.first_error is not None:
            raise result.first_error
        return JSONResponse(
            content=[record.model_dump(mode="json", by_alias=True) for record in result.created]
        )

    if result.errors:
        logger.warning("Reset finished with %d failed steps; redirecting anyway", len(result.errors))
    return RedirectResponse(url="/", status_code=302)
