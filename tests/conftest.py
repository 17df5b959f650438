import os
import sys

import httpx
import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from fakturownia_mcp.credentials import Credentials  # noqa: E402
from fakturownia_mcp.fakturownia_api import FakturowniaApiClient  # noqa: E402
from fakturownia_mcp.metrics import default_metrics  # noqa: E402


class RecordingTransport:
    """httpx.MockTransport handler that records every outbound request."""

    def __init__(self):
        self.requests = []
        self.responder = lambda request: httpx.Response(200, json={"ok": True})

    def __call__(self, request):
        self.requests.append(request)
        return self.responder(request)

    def bind(self, credentials):
        return FakturowniaApiClient(
            credentials,
            async_client=httpx.AsyncClient(
                base_url=credentials.base_url, transport=httpx.MockTransport(self)
            ),
        )

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def api(transport):
    return transport.bind(Credentials(domain="acme", api_token="tok"))
