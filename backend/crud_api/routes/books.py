"""
crud-api Backend — Book Routes
===============================

What:  GET/POST /books and GET/PUT/DELETE /books/{id}.
How:   The generic resource router bound to `book_service`.

PUT /books/{id} overwrites title, author, image and releaseDate.
"""

from crud_api.routes.resource import create_resource_router
from crud_api.services.resource_service import book_service

router = create_resource_router(book_service, prefix="/books", tag="Books")
