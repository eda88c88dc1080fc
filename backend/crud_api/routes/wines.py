"""
crud-api Backend — Wine Routes
===============================

What:  GET/POST /wines and GET/PUT/DELETE /wines/{id}.
How:   The generic resource router bound to `wine_service`.

PUT /wines/{id} overwrites name, year, country, description, image and price.
"""

from crud_api.routes.resource import create_resource_router
from crud_api.services.resource_service import wine_service

router = create_resource_router(wine_service, prefix="/wines", tag="Wines")
