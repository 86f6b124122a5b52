"""Shared fixtures for the Product Store API tests."""

import pytest
from fastapi.testclient import TestClient

from product_store_api.app.core.config import Settings
from product_store_api.app.main import create_app
from product_store_api.app.schemas.product import ProductDetails
from product_store_api.app.services.product_service import ProductStore


@pytest.fixture
def store():
    """Fresh, empty product store."""
    return ProductStore()


@pytest.fixture
def client():
    """Test client bound to a new application with its own store."""
    app = create_app(Settings())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_payload():
    """A request body that passes every product rule."""
    return {"name": "iPhone", "type": "gadget", "inventory": 100, "cost": 699.99}


@pytest.fixture
def make_details(valid_payload):
    """Build ``ProductDetails`` from the valid payload with overrides."""

    def _make(**overrides):
        data = dict(valid_payload)
        data.update(overrides)
        return ProductDetails(**data)

    return _make
