"""
Service layer for products.

``ProductStore`` keeps every product created during the life of the
process in a dictionary keyed by identifier.  Identifiers come from a
counter seeded at 1; allocation and insertion happen under one lock,
so concurrent requests receive distinct, strictly increasing ids and
readers never observe a half‑inserted product.

Validation rules are applied in a fixed order and the first failing
rule decides the error message:

* the name must not be blank, contain a digit or equal ``true`` /
  ``false`` (case‑insensitive);
* the type must be one of :data:`ALLOWED_PRODUCT_TYPES` (exact match);
* the inventory must lie between 1 and 9999;
* the cost must be provided and non‑negative.

Listing filters by type case‑insensitively, while creation matches the
type exactly.  Both behaviours are kept as they are.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Dict, List, Optional

from product_store_api.app.core.errors import ProductValidationError
from product_store_api.app.schemas.product import (
    ALLOWED_PRODUCT_TYPES,
    MAX_INVENTORY,
    MIN_INVENTORY,
    Product,
    ProductDetails,
)


logger = logging.getLogger(__name__)

NAME_ERROR = "Product name cannot be blank or contain numbers"
INVENTORY_ERROR = f"Inventory must be between {MIN_INVENTORY} and {MAX_INVENTORY}"
COST_MISSING_ERROR = "Cost must be provided"
COST_NEGATIVE_ERROR = "Cost must be non-negative"


def invalid_type_error(product_type: Optional[str]) -> str:
    return f"Invalid product type: {product_type}"


class ProductStore:
    """In‑memory, thread‑safe store of validated products."""

    def __init__(self) -> None:
        self._products: Dict[int, Product] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    @staticmethod
    def validate(details: ProductDetails) -> None:
        """Check ``details`` against the product rules.

        Raises :class:`ProductValidationError` with the message of the
        first rule that fails.  Returns ``None`` when all rules pass.
        """
        name = details.name
        if (
            not name.strip()
            or any(ch.isdecimal() for ch in name)
            or name.lower() in {"true", "false"}
        ):
            raise ProductValidationError(NAME_ERROR)
        if details.type not in ALLOWED_PRODUCT_TYPES:
            raise ProductValidationError(invalid_type_error(details.type))
        if not MIN_INVENTORY <= details.inventory <= MAX_INVENTORY:
            raise ProductValidationError(INVENTORY_ERROR)
        if details.cost is None:
            raise ProductValidationError(COST_MISSING_ERROR)
        if details.cost < 0.0:
            raise ProductValidationError(COST_NEGATIVE_ERROR)

    def create_product(self, details: ProductDetails) -> int:
        """Validate ``details``, store a new product and return its id.

        Nothing is stored when validation fails.
        """
        self.validate(details)
        with self._lock:
            product_id = next(self._ids)
            self._products[product_id] = Product(
                id=product_id,
                name=details.name,
                type=details.type,
                inventory=details.inventory,
                cost=details.cost,
            )
        logger.info("Created product %s (%s, type=%s)", product_id, details.name, details.type)
        return product_id

    def list_products(self, product_type: Optional[str] = None) -> List[Product]:
        """Return stored products, optionally only those of ``product_type``.

        The filter is compared case‑insensitively both against the
        allowed types and against the stored products.  An unknown
        type raises :class:`ProductValidationError`.
        """
        if product_type is not None and product_type.lower() not in ALLOWED_PRODUCT_TYPES:
            raise ProductValidationError(invalid_type_error(product_type))
        with self._lock:
            products = list(self._products.values())
        if product_type is None:
            return products
        wanted = product_type.lower()
        return [p for p in products if p.type.lower() == wanted]
