# Routes package init
"""
crud-api Backend — API Routes Package
======================================

Route Inventory:
    - books.py:   /books, /books/{id}        (resource router for books)
    - wines.py:   /wines, /wines/{id}        (resource router for wines)
    - resource.py: factory shared by books and wines, plus body parsing
    - site.py:    GET /, GET /reset, POST /reset
    - health.py:  GET /health

Routes stay thin: read the path and body, call one service method,
return what it returns. Errors are formatted by the handlers in main.py.
"""
