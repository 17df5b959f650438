"""Client (buyer) tools."""

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

CLIENTS = Resource(
    name="client",
    id_param="clientId",
    data_param="clientData",
    body_key="client",
    path="/clients",
)


async def get_clients(params: Params, client: FakturowniaApiClient) -> Any:
    # Search fields map onto the API's snake_case names.
    query = {
        "name": params.get("name"),
        "email": params.get("email"),
        "tax_no": params.get("taxNo"),
    }
    return await list_records(CLIENTS, params, client, query=query)


async def get_client(params: Params, client: FakturowniaApiClient) -> Any:
    return await get_record(CLIENTS, params, client)


async def create_client(params: Params, client: FakturowniaApiClient) -> Any:
    return await create_record(CLIENTS, params, client)


async def update_client(params: Params, client: FakturowniaApiClient) -> Any:
    return await update_record(CLIENTS, params, client)


async def delete_client(params: Params, client: FakturowniaApiClient) -> Any:
    return await delete_record(CLIENTS, params, client)


CLIENT_METHODS: Dict[str, MethodHandler] = {
    "fakt_get_clients": get_clients,
    "fakt_get_client": get_client,
    "fakt_create_client": create_client,
    "fakt_update_client": update_client,
    "fakt_delete_client": delete_client,
}


async def handle_clients_methods(
    method: str, params: Optional[Params], client: FakturowniaApiClient
) -> Any:
    return await dispatch(CLIENT_METHODS, method, params, client)
