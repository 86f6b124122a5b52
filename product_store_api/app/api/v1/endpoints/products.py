"""
Product endpoints for API v1.

``POST /products`` validates and stores a product and answers with its
identifier.  ``GET /products`` lists stored products, optionally
filtered by type.  Rule violations raised by the store are rendered as
400 responses by the application‑level error handler.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from product_store_api.app.api.deps import get_product_store
from product_store_api.app.schemas.product import Product, ProductDetails, ProductId
from product_store_api.app.services.product_service import ProductStore

router = APIRouter()


@router.post("", response_model=ProductId, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductDetails,
    store: ProductStore = Depends(get_product_store),
) -> ProductId:
    """Create a new product and return its identifier."""
    product_id = store.create_product(product_in)
    return ProductId(id=product_id)


@router.get("", response_model=List[Product])
async def list_products(
    product_type: Optional[str] = Query(None, alias="type"),
    store: ProductStore = Depends(get_product_store),
) -> List[Product]:
    """Return all products, or only those whose type matches ``type``.

    The type filter is case‑insensitive.  An unknown type yields
    HTTP 400.
    """
    return store.list_products(product_type)
