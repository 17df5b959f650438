"""
Invoice tools.

Besides CRUD, invoices can be e-mailed, moved to another status, and
downloaded as PDF. The PDF is returned base64-encoded so that it survives JSON
serialization.
"""

from __future__ import annotations

import base64
from typing import Any, Dict, Optional

from fakturownia_mcp.fakturownia_api import FakturowniaApiClient
from fakturownia_mcp.tools.base import (
    MethodHandler,
    Params,
    Resource,
    call_api,
    create_record,
    delete_record,
    dispatch,
    get_record,
    list_records,
    update_record,
)
from fakturownia_mcp.tools.validators import merge_query, or_default, require

DEFAULT_PERIOD = "this_month"
PDF_CONTENT_TYPE = "application/pdf"

INVOICES = Resource(
    name="invoice",
    article="an",
    id_param="invoiceId",
    data_param="invoiceData",
    body_key="invoice",
    path="/invoices",
)


async def get_invoices(params: Params, client: FakturowniaApiClient) -> Any:
    query = {
        "period": or_default(params.get("period"), DEFAULT_PERIOD),
        "include_positions": bool(params.get("includePositions") or False),
    }
    return await list_records(INVOICES, params, client, query=query)


async def get_invoice(params: Params, client: FakturowniaApiClient) -> Any:
    return await get_record(INVOICES, params, client)


async def create_invoice(params: Params, client: FakturowniaApiClient) -> Any:
    return await create_record(INVOICES, params, client)


async def update_invoice(params: Params, client: FakturowniaApiClient) -> Any:
    return await update_record(INVOICES, params, client)


async def delete_invoice(params: Params, client: FakturowniaApiClient) -> Any:
    return await delete_record(INVOICES, params, client)


async def send_invoice_by_email(params: Params, client: FakturowniaApiClient) -> Any:
    """POST with an empty body; recipients and the PDF flag travel in the query string."""
    invoice_id = require(params, "invoiceId", "Invoice ID is required for sending by email")
    email_pdf = params.get("emailPdf")
    query = merge_query(
        client.api_token,
        {
            "email_to": params.get("emailTo"),
            "email_cc": params.get("emailCc"),
            "email_pdf": True if email_pdf is None else bool(email_pdf),
        },
    )
    return await call_api(
        INVOICES,
        client,
        "POST",
        f"/invoices/{invoice_id}/send_by_email.json",
        params=query,
        json_body={},
    )


async def change_invoice_status(params: Params, client: FakturowniaApiClient) -> Any:
    invoice_id = require(params, "invoiceId", "Invoice ID is required for changing status")
    status = require(params, "status", "Status is required")
    query = merge_query(client.api_token, {"status": status})
    return await call_api(
        INVOICES,
        client,
        "POST",
        f"/invoices/{invoice_id}/change_status.json",
        params=query,
        json_body={},
    )


async def get_invoice_pdf(params: Params, client: FakturowniaApiClient) -> Dict[str, str]:
    invoice_id = require(params, "invoiceId", "Invoice ID is required for getting PDF")
    content = await call_api(
        INVOICES,
        client,
        "GET",
        f"/invoices/{invoice_id}.pdf",
        params=merge_query(client.api_token),
        binary=True,
    )
    return {
        "data": base64.b64encode(content).decode("ascii"),
        "contentType": PDF_CONTENT_TYPE,
    }


INVOICE_METHODS: Dict[str, MethodHandler] = {
    "fakt_get_invoices": get_invoices,
    "fakt_get_invoice": get_invoice,
    "fakt_create_invoice": create_invoice,
    "fakt_update_invoice": update_invoice,
    "fakt_delete_invoice": delete_invoice,
    "fakt_send_invoice_by_email": send_invoice_by_email,
    "fakt_change_invoice_status": change_invoice_status,
    "fakt_get_invoice_pdf": get_invoice_pdf,
}


async def handle_invoices_methods(
    method: str, params: Optional[Params], client: FakturowniaApiClient
) -> Any:
    """Run an invoice method, or return ``NOT_HANDLED`` for any other name."""
    return await dispatch(INVOICE_METHODS, method, params, client)
