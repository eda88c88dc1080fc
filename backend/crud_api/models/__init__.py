"""ORM models for the record store. Importing this package registers every table on `Base.metadata`."""

from crud_api.models.book import Book
from crud_api.models.wine import Wine

__all__ = ["Book", "Wine"]
