"""Banking payment tools."""

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

# Single payments are read from /banking/payment/{id}.json but updated and
# deleted through /banking/payments/{id}.json.
PAYMENTS = Resource(
    name="payment",
    id_param="paymentId",
    data_param="paymentData",
    body_key="banking_payment",
    path="/banking/payments",
    get_path="/banking/payment",
    update_verb="PATCH",
)


async def get_payments(params: Params, client: FakturowniaApiClient) -> Any:
    return await list_records(PAYMENTS, params, client, query={"include": params.get("include")})


async def get_payment(params: Params, client: FakturowniaApiClient) -> Any:
    return await get_record(PAYMENTS, params, client)


async def create_payment(params: Params, client: FakturowniaApiClient) -> Any:
    return await create_record(PAYMENTS, params, client)


async def update_payment(params: Params, client: FakturowniaApiClient) -> Any:
    return await update_record(PAYMENTS, params, client)


async def delete_payment(params: Params, client: FakturowniaApiClient) -> Any:
    return await delete_record(PAYMENTS, params, client)


PAYMENT_METHODS: Dict[str, MethodHandler] = {
    "fakt_get_payments": get_payments,
    "fakt_get_payment": get_payment,
    "fakt_create_payment": create_payment,
    "fakt_update_payment": update_payment,
    "fakt_delete_payment": delete_payment,
}


async def handle_payments_methods(
    method: str, params: Optional[Params], client: FakturowniaApiClient
) -> Any:
    return await dispatch(PAYMENT_METHODS, method, params, client)
