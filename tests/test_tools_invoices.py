import base64
import json

import httpx
import pytest

from fakturownia_mcp.errors import InvalidParamsError, RemoteApiError
from fakturownia_mcp.tools import NOT_HANDLED
from fakturownia_mcp.tools.invoices import handle_invoices_methods


@pytest.mark.asyncio
async def test_list_invoices_defaults(api, transport):
    await handle_invoices_methods("fakt_get_invoices", {}, api)
    assert transport.last.url.path == "/invoices.json"
    assert dict(transport.last.url.params) == {
        "api_token": "tok",
        "page": "1",
        "per_page": "10",
        "period": "this_month",
        "include_positions": "false",
    }


@pytest.mark.asyncio
async def test_list_invoices_custom_period_and_filters(api, transport):
    await handle_invoices_methods(
        "fakt_get_invoices",
        {"period": "more", "includePositions": True, "filters": {"date_from": "2024-01-01", "period": "last_year"}},
        api,
    )
    params = dict(transport.last.url.params)
    assert params["period"] == "last_year"
    assert params["include_positions"] == "true"
    assert params["date_from"] == "2024-01-01"


@pytest.mark.asyncio
async def test_create_invoice_wraps_data(api, transport):
    data = {"kind": "vat", "buyer_name": "Acme", "positions": [{"name": "Usługa", "quantity": 1}]}
    await handle_invoices_methods("fakt_create_invoice", {"invoiceData": data}, api)
    assert json.loads(transport.last.content) == {"api_token": "tok", "invoice": data}


@pytest.mark.asyncio
async def test_send_by_email_uses_query_and_empty_body(api, transport):
    await handle_invoices_methods(
        "fakt_send_invoice_by_email", {"invoiceId": 100, "emailTo": "buyer@acme.pl"}, api
    )
    request = transport.last
    assert request.method == "POST"
    assert request.url.path == "/invoices/100/send_by_email.json"
    assert json.loads(request.content) == {}
    assert dict(request.url.params) == {
        "api_token": "tok",
        "email_to": "buyer@acme.pl",
        "email_pdf": "true",
    }


@pytest.mark.asyncio
async def test_send_by_email_honours_explicit_false(api, transport):
    await handle_invoices_methods(
        "fakt_send_invoice_by_email", {"invoiceId": 100, "emailCc": "cc@acme.pl", "emailPdf": False}, api
    )
    params = dict(transport.last.url.params)
    assert params["email_pdf"] == "false"
    assert params["email_cc"] == "cc@acme.pl"


@pytest.mark.asyncio
async def test_change_status(api, transport):
    await handle_invoices_methods("fakt_change_invoice_status", {"invoiceId": 100, "status": "paid"}, api)
    request = transport.last
    assert request.url.path == "/invoices/100/change_status.json"
    assert dict(request.url.params) == {"api_token": "tok", "status": "paid"}
    assert json.loads(request.content) == {}


@pytest.mark.asyncio
async def test_change_status_requires_status(api, transport):
    with pytest.raises(InvalidParamsError, match="^Status is required$"):
        await handle_invoices_methods("fakt_change_invoice_status", {"invoiceId": 100}, api)
    with pytest.raises(InvalidParamsError, match="Invoice ID is required for changing status"):
        await handle_invoices_methods("fakt_change_invoice_status", {"status": "paid"}, api)
    assert transport.requests == []


@pytest.mark.asyncio
async def test_pdf_is_base64_encoded(api, transport):
    pdf_bytes = b"%PDF-1.4\n\x00\x01\xfe\xff binary"
    transport.responder = lambda request: httpx.Response(
        200, content=pdf_bytes, headers={"Content-Type": "application/pdf"}
    )
    result = await handle_invoices_methods("fakt_get_invoice_pdf", {"invoiceId": 100}, api)
    assert transport.last.url.path == "/invoices/100.pdf"
    assert result["contentType"] == "application/pdf"
    assert base64.b64decode(result["data"]) == pdf_bytes


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,message",
    [
        ("fakt_get_invoice", "Invoice ID is required"),
        ("fakt_update_invoice", "Invoice ID is required for updating an invoice"),
        ("fakt_delete_invoice", "Invoice ID is required for deleting an invoice"),
        ("fakt_send_invoice_by_email", "Invoice ID is required for sending by email"),
        ("fakt_get_invoice_pdf", "Invoice ID is required for getting PDF"),
        ("fakt_create_invoice", "Invoice data is required for creating an invoice"),
    ],
)
async def test_invoice_required_fields(api, method, message):
    with pytest.raises(InvalidParamsError) as excinfo:
        await handle_invoices_methods(method, {}, api)
    assert str(excinfo.value) == message


@pytest.mark.asyncio
async def test_invoice_remote_error(api, transport):
    transport.responder = lambda request: httpx.Response(422, json={"code": "error", "message": "Brak nabywcy"})
    with pytest.raises(RemoteApiError, match="^Invoice API error: Brak nabywcy$"):
        await handle_invoices_methods("fakt_create_invoice", {"invoiceData": {"kind": "vat"}}, api)


@pytest.mark.asyncio
async def test_invoice_handler_ignores_unknown(api):
    assert await handle_invoices_methods("fakt_get_warehouses", {}, api) is NOT_HANDLED
    assert await handle_invoices_methods(None, {}, api) is NOT_HANDLED
