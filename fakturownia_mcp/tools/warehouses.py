"""Warehouse tools, including warehouse documents (stock receipts and issues)."""

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

WAREHOUSES = Resource(
    name="warehouse",
    id_param="warehouseId",
    data_param="warehouseData",
    body_key="warehouse",
    path="/warehouses",
)

WAREHOUSE_DOCUMENTS = Resource(
    name="warehouse document",
    id_param="documentId",
    data_param="documentData",
    body_key="warehouse_document",
    path="/warehouse_documents",
    subject="Document",
    error_prefix="Warehouse",
)


async def get_warehouses(params: Params, client: FakturowniaApiClient) -> Any:
    return await list_records(WAREHOUSES, params, client, paginate=False)


async def get_warehouse(params: Params, client: FakturowniaApiClient) -> Any:
    return await get_record(WAREHOUSES, params, client)


async def create_warehouse(params: Params, client: FakturowniaApiClient) -> Any:
    return await create_record(WAREHOUSES, params, client)


async def update_warehouse(params: Params, client: FakturowniaApiClient) -> Any:
    return await update_record(WAREHOUSES, params, client)


async def delete_warehouse(params: Params, client: FakturowniaApiClient) -> Any:
    return await delete_record(WAREHOUSES, params, client)


async def get_warehouse_documents(params: Params, client: FakturowniaApiClient) -> Any:
    return await list_records(WAREHOUSE_DOCUMENTS, params, client)


async def get_warehouse_document(params: Params, client: FakturowniaApiClient) -> Any:
    return await get_record(WAREHOUSE_DOCUMENTS, params, client)


async def create_warehouse_document(params: Params, client: FakturowniaApiClient) -> Any:
    return await create_record(WAREHOUSE_DOCUMENTS, params, client)


async def update_warehouse_document(params: Params, client: FakturowniaApiClient) -> Any:
    return await update_record(WAREHOUSE_DOCUMENTS, params, client)


async def delete_warehouse_document(params: Params, client: FakturowniaApiClient) -> Any:
    return await delete_record(WAREHOUSE_DOCUMENTS, params, client)


WAREHOUSE_METHODS: Dict[str, MethodHandler] = {
    "fakt_get_warehouses": get_warehouses,
    "fakt_get_warehouse": get_warehouse,
    "fakt_create_warehouse": create_warehouse,
    "fakt_update_warehouse": update_warehouse,
    "fakt_delete_warehouse": delete_warehouse,
    "fakt_get_warehouse_documents": get_warehouse_documents,
    "fakt_get_warehouse_document": get_warehouse_document,
    "fakt_create_warehouse_document": create_warehouse_document,
    "fakt_update_warehouse_document": update_warehouse_document,
    "fakt_delete_warehouse_document": delete_warehouse_document,
}


async def handle_warehouses_methods(
    method: str, params: Optional[Params], client: FakturowniaApiClient
) -> Any:
    """Run a warehouse or warehouse document method, or return ``NOT_HANDLED``."""
    return await dispatch(WAREHOUSE_METHODS, method, params, client)
