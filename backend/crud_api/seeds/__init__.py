"""
Seed datasets reloaded by POST /reset.

Each seed is a plain dict in wire format (camelCase keys, no `_id`), so it
goes through the same field casting as a client payload.
"""

from crud_api.seeds.books import SEED_BOOKS
from crud_api.seeds.wines import SEED_WINES

__all__ = ["SEED_BOOKS", "SEED_WINES"]
