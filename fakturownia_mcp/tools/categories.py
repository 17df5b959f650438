"""Category tools."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fakturownia_mcp.fakturownia_api import FakturowniaApiClient
from fakturownia_mcp.tools.base import (
    MethodHandler,
    Params,
    Resource,
    create_record,
    delete_record,
    dispatch,
    get_record,
    list_records,
    update_record,
)

CATEGORIES = Resource(
    name="category",
    id_param="categoryId",
    data_param="categoryData",
    body_key="category",
    path="/categories",
)


async def get_categories(params: Params, client: FakturowniaApiClient) -> Any:
    return await list_records(CATEGORIES, params, client, paginate=False)


async def get_category(params: Params, client: FakturowniaApiClient) -> Any:
    return await get_record(CATEGORIES, params, client)


async def create_category(params: Params, client: FakturowniaApiClient) -> Any:
    return await create_record(CATEGORIES, params, client)


async def update_category(params: Params, client: FakturowniaApiClient) -> Any:
    return await update_record(CATEGORIES, params, client)


async def delete_category(params: Params, client: FakturowniaApiClient) -> Any:
    return await delete_record(CATEGORIES, params, client)


CATEGORY_METHODS: Dict[str, MethodHandler] = {
    "fakt_get_categories": get_categories,
    "fakt_get_category": get_category,
    "fakt_create_category": create_category,
    "fakt_update_category": update_category,
    "fakt_delete_category": delete_category,
}


async def handle_categories_methods(
    method: str, params: Optional[Params], client: FakturowniaApiClient
) -> Any:
    """Run a category method, or return ``NOT_HANDLED`` for any other name."""
    return await dispatch(CATEGORY_METHODS, method, params, client)
