"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
