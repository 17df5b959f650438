"""HTTP client wrappers for the Fakturownia REST API."""

from fakturownia_mcp.errors import FakturowniaApiError, RemoteApiError, TransportError

from .client import FakturowniaApiClient

__all__ = [
    "FakturowniaApiClient",
    "FakturowniaApiError",
    "RemoteApiError",
    "TransportError",
]
