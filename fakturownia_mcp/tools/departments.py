"""Department tools."""

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

DEPARTMENTS = Resource(
    name="department",
    id_param="departmentId",
    data_param="departmentData",
    body_key="department",
    path="/departments",
)


async def get_departments(params: Params, client: FakturowniaApiClient) -> Any:
    return await list_records(DEPARTMENTS, params, client, paginate=False)


async def get_department(params: Params, client: FakturowniaApiClient) -> Any:
    return await get_record(DEPARTMENTS, params, client)


async def create_department(params: Params, client: FakturowniaApiClient) -> Any:
    return await create_record(DEPARTMENTS, params, client)


async def update_department(params: Params, client: FakturowniaApiClient) -> Any:
    return await update_record(DEPARTMENTS, params, client)


async def delete_department(params: Params, client: FakturowniaApiClient) -> Any:
    return await delete_record(DEPARTMENTS, params, client)


DEPARTMENT_METHODS: Dict[str, MethodHandler] = {
    "fakt_get_departments": get_departments,
    "fakt_get_department": get_department,
    "fakt_create_department": create_department,
    "fakt_update_department": update_department,
    "fakt_delete_department": delete_department,
}


async def handle_departments_methods(
    method: str, params: Optional[Params], client: FakturowniaApiClient
) -> Any:
    return await dispatch(DEPARTMENT_METHODS, method, params, client)
