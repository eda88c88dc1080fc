# Services package init
"""
crud-api Backend — Services Layer
==================================

What:  Store-facing logic sitting between routes (HTTP) and the database.
Why:   Routes handle HTTP, services handle records.

Service Inventory:
    - ResourceService: generic CRUD over one collection
      (instances: book_service, wine_service)
    - ResetService: clear-then-reseed across both collections

Every service method receives the request's AsyncSession as an argument;
services hold no connection state of their own.
"""
