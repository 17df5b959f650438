import json

import httpx
import pytest

from fakturownia_mcp.credentials import Credentials
from fakturownia_mcp.errors import RemoteApiError, TransportError
from fakturownia_mcp.fakturownia_api import FakturowniaApiClient


@pytest.mark.asyncio
async def test_get_returns_body_verbatim_and_drops_none_params(api, transport):
    transport.responder = lambda request: httpx.Response(200, json=[{"id": 1}, {"id": 2}])
    result = await api.request("GET", "/categories.json", params={"api_token": "tok", "page": None, "flag": True})
    assert result == [{"id": 1}, {"id": 2}]
    request = transport.last
    assert request.url.host == "acme.fakturownia.pl"
    assert request.url.path == "/categories.json"
    assert dict(request.url.params) == {"api_token": "tok", "flag": "true"}


@pytest.mark.asyncio
async def test_post_sends_json_body(api, transport):
    await api.request("POST", "/invoices/1/send_by_email.json", params={"api_token": "tok"}, json_body={})
    request = transport.last
    assert request.method == "POST"
    assert json.loads(request.content) == {}
    assert request.url.params["api_token"] == "tok"


@pytest.mark.asyncio
async def test_non_json_success_body_returned_as_text(api, transport):
    transport.responder = lambda request: httpx.Response(200, text="OK")
    assert await api.request("DELETE", "/clients/1.json") == "OK"


@pytest.mark.asyncio
async def test_binary_download(api, transport):
    transport.responder = lambda request: httpx.Response(200, content=b"%PDF-1.4\x00\xff")
    assert await api.request("GET", "/invoices/1.pdf", binary=True) == b"%PDF-1.4\x00\xff"


@pytest.mark.asyncio
async def test_error_status_carries_remote_message(api, transport):
    transport.responder = lambda request: httpx.Response(
        422, json={"code": "error", "message": "Nazwa jest wymagana"}
    )
    with pytest.raises(RemoteApiError) as excinfo:
        await api.request("POST", "/categories.json", json_body={"category": {}})
    assert str(excinfo.value) == "Nazwa jest wymagana"
    assert excinfo.value.status_code == 422
    assert excinfo.value.code == "error"


@pytest.mark.asyncio
async def test_structured_remote_message_is_json_encoded(api, transport):
    transport.responder = lambda request: httpx.Response(
        422, json={"code": "error", "message": {"name": ["nie może być puste"]}}
    )
    with pytest.raises(RemoteApiError) as excinfo:
        await api.request("POST", "/clients.json", json_body={"client": {}})
    assert str(excinfo.value) == '{"name": ["nie może być puste"]}'


@pytest.mark.asyncio
async def test_error_status_without_message_uses_status(api, transport):
    transport.responder = lambda request: httpx.Response(404, text="Not Found")
    with pytest.raises(RemoteApiError, match="Request failed with status code 404"):
        await api.request("GET", "/categories/9.json")


@pytest.mark.asyncio
async def test_network_failure_maps_to_transport_error():
    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    credentials = Credentials(domain="acme", api_token="tok")
    client = FakturowniaApiClient(
        credentials,
        async_client=httpx.AsyncClient(base_url=credentials.base_url, transport=httpx.MockTransport(fail)),
    )
    with pytest.raises(TransportError, match="connection refused"):
        await client.request("GET", "/categories.json")


@pytest.mark.asyncio
async def test_aclose_closes_owned_client():
    client = FakturowniaApiClient(Credentials(domain="acme", api_token="tok"))
    inner = await client._get_client()
    assert str(inner.base_url).startswith("https://acme.fakturownia.pl")
    await client.aclose()
    assert client._client is None


@pytest.mark.asyncio
async def test_aclose_leaves_injected_client_open(api):
    await api.aclose()
    assert api._client is not None
    assert not api._client.is_closed
