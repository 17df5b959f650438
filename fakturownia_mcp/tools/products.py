"""Product tools. The API offers no product deletion, so none is exposed."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fakturownia_mcp.fakturownia_api import FakturowniaApiClient
from fakturownia_mcp.tools.base import (
    MethodHandler,
    Params,
    Resource,
    create_record,
    dispatch,
    get_record,
    list_records,
    update_record,
)

PRODUCTS = Resource(
    name="product",
    id_param="productId",
    data_param="productData",
    body_key="product",
    path="/products",
)


async def get_products(params: Params, client: FakturowniaApiClient) -> Any:
    query = {"warehouse_id": params.get("warehouseId")}
    return await list_records(PRODUCTS, params, client, query=query)


async def get_product(params: Params, client: FakturowniaApiClient) -> Any:
    # Stock levels in the response depend on warehouse_id.
    query = {"warehouse_id": params.get("warehouseId")}
    return await get_record(PRODUCTS, params, client, query=query)


async def create_product(params: Params, client: FakturowniaApiClient) -> Any:
    return await create_record(PRODUCTS, params, client)


async def update_product(params: Params, client: FakturowniaApiClient) -> Any:
    return await update_record(PRODUCTS, params, client)


PRODUCT_METHODS: Dict[str, MethodHandler] = {
    "fakt_get_products": get_products,
    "fakt_get_product": get_product,
    "fakt_create_product": create_product,
    "fakt_update_product": update_product,
}


async def handle_products_methods(
    method: str, params: Optional[Params], client: FakturowniaApiClient
) -> Any:
    return await dispatch(PRODUCT_METHODS, method, params, client)
