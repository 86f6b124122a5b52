"""Tests for the requests-based ProductStoreAPI client.

These tests verify:
- Request construction (method, URL, params, JSON body)
- Success payload handling
- Server rejections surfaced as error dictionaries
- Transport failures surfaced as error dictionaries
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from product_store_client import ProductStoreAPI


def make_response(status_code, payload=None, url="http://store.test/products"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    return response


class TestProductStoreAPI:
    """ProductStoreAPI against a mocked session."""

    @pytest.fixture
    def session(self):
        return MagicMock(spec=requests.Session)

    @pytest.fixture
    def api(self, session):
        return ProductStoreAPI(base_url="http://store.test/", session=session)

    def test_create_product_returns_id(self, api, session, valid_payload):
        session.request.return_value = make_response(201, {"id": 7})

        product_id, error = api.create_product(valid_payload)

        assert (product_id, error) == (7, None)
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "http://store.test/products"
        assert kwargs["json"] == valid_payload

    def test_create_product_rejected(self, api, session, valid_payload):
        session.request.return_value = make_response(
            400,
            {
                "timestamp": "2024-01-01T00:00:00",
                "status": 400,
                "error": "Cost must be provided",
                "path": "/products",
            },
        )

        product_id, error = api.create_product(valid_payload)

        assert product_id is None
        assert error == {"status_code": 400, "message": "Cost must be provided"}

    def test_list_products_with_filter(self, api, session):
        products = [{"id": 1, "name": "iPhone", "type": "gadget", "inventory": 1, "cost": 1.0}]
        session.request.return_value = make_response(200, products, url="http://store.test/products?type=gadget")

        result, error = api.list_products("gadget")

        assert (result, error) == (products, None)
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["params"] == {"type": "gadget"}

    def test_list_products_without_filter(self, api, session):
        session.request.return_value = make_response(200, [])

        assert api.list_products() == ([], None)
        assert session.request.call_args.kwargs["params"] is None

    def test_list_products_unknown_type(self, api, session):
        session.request.return_value = make_response(400, {"status": 400, "error": "Invalid product type: bogus"})

        result, error = api.list_products("bogus")

        assert result == []
        assert error == {"status_code": 400, "message": "Invalid product type: bogus"}

    def test_transport_failure(self, api, session):
        session.request.side_effect = requests.ConnectionError("connection refused")

        product_id, error = api.create_product({"name": "x"})

        assert product_id is None
        assert error["status_code"] is None
        assert "connection refused" in error["message"]
