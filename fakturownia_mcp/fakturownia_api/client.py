"""
Thin async HTTP client for one Fakturownia account.

The client is bound to ``https://{domain}.fakturownia.pl`` and returns response
bodies verbatim. Error statuses become ``RemoteApiError``; network failures
become ``TransportError``. Resource-specific message prefixes are added by the
tool layer.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from fakturownia_mcp.config import FakturowniaConfig, default_config
from fakturownia_mcp.credentials import Credentials
from fakturownia_mcp.errors import RemoteApiError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def _drop_none(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None}


def _remote_message(data: Any, status_code: int) -> str:
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
        if message:
            return json.dumps(message, ensure_ascii=False)
    return f"Request failed with status code {status_code}"


class FakturowniaApiClient:
    """Async client for the Fakturownia REST API of a single account."""

    def __init__(
        self,
        credentials: Credentials,
        config: FakturowniaConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.credentials = credentials
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    @property
    def api_token(self) -> str:
        return self.credentials.api_token

    @property
    def base_url(self) -> str:
        return self.credentials.base_url

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.config.timeout,
                headers=DEFAULT_HEADERS,
            )
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _process_response(self, response: httpx.Response, *, binary: bool) -> Any:
        if response.status_code >= 400:
            try:
                data = response.json()
            except ValueError:
                data = None
            code = data.get("code") if isinstance(data, dict) else None
            raise RemoteApiError(
                _remote_message(data, response.status_code),
                code=code if isinstance(code, str) else None,
                status_code=response.status_code,
                payload=data,
            )

        if binary:
            return response.content

        try:
            return response.json()
        except ValueError:
            return response.text

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        binary: bool = False,
    ) -> Any:
        """
        Issue one REST call and return the decoded body.

        Args:
            method: HTTP verb.
            path: Path relative to the account base URL.
            params: Query parameters; ``None`` values are omitted.
            json_body: JSON request body for POST/PUT/PATCH.
            binary: Return raw bytes instead of decoding JSON.
        """
        client = await self._get_client()
        try:
            response = await client.request(
                method, path, params=_drop_none(params), json=json_body
            )
        except httpx.RequestError as exc:
            logger.warning("Fakturownia API unreachable for %s %s", method, path)
            raise TransportError(str(exc) or "Network error") from exc
        return self._process_response(response, binary=binary)
