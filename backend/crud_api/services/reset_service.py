"""
crud-api Backend — Reset Service
=================================

What:  Clears both collections and reloads the seed datasets.
Who:   Called by POST /reset.

Sequence (each step commits before the next starts):
    1. remove all books
    2. insert seed books
    3. remove all wines
    4. insert seed wines

There is no rollback across steps. A failing step is logged and recorded,
and the remaining steps still run, so a failure can leave the collections
in any intermediate state.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from crud_api.exceptions import StoreError
from crud_api.seeds import SEED_BOOKS, SEED_WINES
from crud_api.services.resource_service import ResourceService, book_service, wine_service

logger = logging.getLogger(__name__)


@dataclass
class ResetResult:
    """Outcome of one reset run."""
    books: List[BaseModel] = field(default_factory=list)
    wines: List[BaseModel] = field(default_factory=list)
    errors: List[StoreError] = field(default_factory=list)

    @property
    def created(self) -> List[BaseModel]:
        """Newly created books followed by newly created wines."""
        return self.books + self.wines

    @property
    def first_error(self) -> Optional[StoreError]:
        return self.errors[0] if self.errors else None


class ResetService:
    """Reseeds the book and wine collections."""

    def __init__(
        self,
        books: ResourceService = book_service,
        wines: ResourceService = wine_service,
        seed_books: Optional[List[dict]] = None,
        seed_wines: Optional[List[dict]] = None,
    ):
        self.books = books
        self.wines = wines
        self.seed_books = SEED_BOOKS if seed_books is None else seed_books
        self.seed_wines = SEED_WINES if seed_wines is None else seed_wines

    async def _step(
        self,
        result: ResetResult,
        name: str,
        operation: Callable[[], Awaitable[Any]],
    ) -> Any:
        try:
            return await operation()
        except StoreError as e:
            logger.error("Reset step '%s' failed: %s", name, e.message)
            result.errors.append(e)
            return None

    async def reset(self, db: AsyncSession) -> ResetResult:
        """Runs the four reset steps in order and reports what was created."""
        result = ResetResult()
        logger.info("Resetting books and wines to seed data")

        await self._step(result, "remove books", lambda: self.books.delete_all(db))
        books = await self._step(
            result, "create books", lambda: self.books.create_many(db, self.seed_books)
        )
        await self._step(result, "remove wines", lambda: self.wines.delete_all(db))
        wines = await self._step(
            result, "create wines", lambda: self.wines.create_many(db, self.seed_wines)
        )

        result.books = books or []
        result.wines = wines or []
        logger.info(
            "Reset complete: %d books, %d wines, %d failed steps",
            len(result.books),
            len(result.wines),
            len(result.errors),
        )
        return result


reset_service = ResetService()
