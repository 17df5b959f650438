"""
Generic REST operations shared by every resource handler.

Each resource is described by a ``Resource`` value; the functions below issue
exactly one call per operation and rewrite remote errors with the resource's
message prefix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from fakturownia_mcp.errors import RemoteApiError
from fakturownia_mcp.fakturownia_api import FakturowniaApiClient
from fakturownia_mcp.tools.validators import merge_query, pagination, require

logger = logging.getLogger(__name__)


class _NotHandled:
    """Marker returned when a handler does not recognize a method name."""

    def __repr__(self) -> str:
        return "NOT_HANDLED"


NOT_HANDLED = _NotHandled()

Params = Mapping[str, Any]
MethodHandler = Callable[[Params, FakturowniaApiClient], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class Resource:
    """Naming and routing details for one Fakturownia object family."""

    name: str
    id_param: str
    data_param: str
    body_key: str
    path: str
    article: str = "a"
    subject: Optional[str] = None
    error_prefix: Optional[str] = None
    get_path: Optional[str] = None
    update_verb: str = "PUT"

    @property
    def label(self) -> str:
        return self.subject or self.name.capitalize()

    @property
    def collection(self) -> str:
        return f"{self.path}.json"

    def member(self, record_id: Any) -> str:
        return f"{self.path}/{record_id}.json"

    def member_for_get(self, record_id: Any) -> str:
        return f"{self.get_path or self.path}/{record_id}.json"

    def id_required(self, action: Optional[str] = None) -> str:
        if action is None:
            return f"{self.label} ID is required"
        return f"{self.label} ID is required for {action} {self.article} {self.name}"

    def data_required(self, action: str) -> str:
        return f"{self.label} data is required for {action} {self.article} {self.name}"


async def call_api(
    resource: Resource,
    client: FakturowniaApiClient,
    method: str,
    path: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    binary: bool = False,
) -> Any:
    """Issue one call; remote errors get the ``"<Resource> API error: "`` prefix, others pass through."""
    try:
        return await client.request(method, path, params=params, json_body=json_body, binary=binary)
    except RemoteApiError as exc:
        prefix = resource.error_prefix or resource.name.capitalize()
        logger.debug("%s API error status=%s", prefix, exc.status_code)
        raise RemoteApiError(
            f"{prefix} API error: {exc}",
            code=exc.code,
            status_code=exc.status_code,
            payload=exc.payload,
        ) from exc


async def list_records(
    resource: Resource,
    params: Params,
    client: FakturowniaApiClient,
    *,
    query: Optional[Mapping[str, Any]] = None,
    paginate: bool = True,
) -> Any:
    merged = merge_query(
        client.api_token,
        pagination(params, defaults=paginate),
        query,
        filters=params.get("filters"),
    )
    return await call_api(resource, client, "GET", resource.collection, params=merged)


async def get_record(
    resource: Resource,
    params: Params,
    client: FakturowniaApiClient,
    *,
    query: Optional[Mapping[str, Any]] = None,
) -> Any:
    record_id = require(params, resource.id_param, resource.id_required())
    merged = merge_query(client.api_token, query)
    return await call_api(resource, client, "GET", resource.member_for_get(record_id), params=merged)


async def create_record(resource: Resource, params: Params, client: FakturowniaApiClient) -> Any:
    data = require(params, resource.data_param, resource.data_required("creating"))
    body = {"api_token": client.api_token, resource.body_key: data}
    return await call_api(resource, client, "POST", resource.collection, json_body=body)


async def update_record(resource: Resource, params: Params, client: FakturowniaApiClient) -> Any:
    record_id = require(params, resource.id_param, resource.id_required("updating"))
    data = require(params, resource.data_param, resource.data_required("updating"))
    body = {"api_token": client.api_token, resource.body_key: data}
    return await call_api(
        resource, client, resource.update_verb, resource.member(record_id), json_body=body
    )


async def delete_record(resource: Resource, params: Params, client: FakturowniaApiClient) -> Any:
    record_id = require(params, resource.id_param, resource.id_required("deleting"))
    merged = merge_query(client.api_token)
    return await call_api(resource, client, "DELETE", resource.member(record_id), params=merged)


async def dispatch(
    methods: Mapping[str, MethodHandler],
    method: str,
    params: Optional[Params],
    client: FakturowniaApiClient,
) -> Any:
    """Run the handler registered for ``method`` or return ``NOT_HANDLED``."""
    handler = methods.get(method) if isinstance(method, str) else None
    if handler is None:
        return NOT_HANDLED
    return await handler(params or {}, client)
