"""
FastAPI dependencies shared by the endpoints.

The product store belongs to the application instance that created
it (``app.state.product_store``); handlers receive it through
``Depends(get_product_store)`` instead of importing a module global.
"""

from fastapi import Request

from product_store_api.app.services.product_service import ProductStore


def get_product_store(request: Request) -> ProductStore:
    """Return the store owned by the application serving ``request``."""
    return request.app.state.product_store
