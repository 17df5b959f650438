import json

import pytest

from fakturownia_mcp.errors import InvalidParamsError
from fakturownia_mcp.tools import NOT_HANDLED
from fakturownia_mcp.tools.products import PRODUCT_METHODS, handle_products_methods


@pytest.mark.asyncio
async def test_list_products_with_warehouse(api, transport):
    await handle_products_methods("fakt_get_products", {"warehouseId": 2}, api)
    assert transport.last.url.path == "/products.json"
    assert dict(transport.last.url.params) == {
        "api_token": "tok",
        "page": "1",
        "per_page": "10",
        "warehouse_id": "2",
    }


@pytest.mark.asyncio
async def test_get_product_passes_warehouse_when_given(api, transport):
    await handle_products_methods("fakt_get_product", {"productId": 5}, api)
    assert dict(transport.last.url.params) == {"api_token": "tok"}

    await handle_products_methods("fakt_get_product", {"productId": 5, "warehouseId": 2}, api)
    assert transport.last.url.path == "/products/5.json"
    assert dict(transport.last.url.params) == {"api_token": "tok", "warehouse_id": "2"}


@pytest.mark.asyncio
async def test_create_update_product(api, transport):
    await handle_products_methods("fakt_create_product", {"productData": {"name": "Kubek"}}, api)
    assert json.loads(transport.last.content) == {"api_token": "tok", "product": {"name": "Kubek"}}
    await handle_products_methods("fakt_update_product", {"productId": 5, "productData": {"tax": 23}}, api)
    assert transport.last.method == "PUT"


@pytest.mark.asyncio
async def test_products_have_no_delete(api, transport):
    assert "fakt_delete_product" not in PRODUCT_METHODS
    assert await handle_products_methods("fakt_delete_product", {"productId": 5}, api) is NOT_HANDLED
    assert transport.requests == []


@pytest.mark.asyncio
async def test_product_required_fields(api):
    with pytest.raises(InvalidParamsError, match="Product ID is required for updating a product"):
        await handle_products_methods("fakt_update_product", {"productData": {}}, api)
