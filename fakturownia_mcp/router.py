"""Dispatch of unscoped method names across every resource handler."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Optional, Tuple

from fakturownia_mcp.errors import UnsupportedMethodError
from fakturownia_mcp.fakturownia_api import FakturowniaApiClient
from fakturownia_mcp.tools import (
    NOT_HANDLED,
    handle_categories_methods,
    handle_clients_methods,
    handle_departments_methods,
    handle_invoices_methods,
    handle_payments_methods,
    handle_products_methods,
    handle_warehouses_methods,
)
from fakturownia_mcp.tools.base import Params

ResourceHandler = Callable[[str, Optional[Params], FakturowniaApiClient], Awaitable[Any]]

# Method names are unique across resources, so the order only affects how
# many handlers are consulted.
RESOURCE_HANDLERS: Tuple[ResourceHandler, ...] = (
    handle_invoices_methods,
    handle_clients_methods,
    handle_products_methods,
    handle_payments_methods,
    handle_categories_methods,
    handle_warehouses_methods,
    handle_departments_methods,
)


async def route_method(
    method: str,
    params: Optional[Params],
    client: FakturowniaApiClient,
    *,
    handlers: Optional[List[ResourceHandler]] = None,
) -> Any:
    """
    Return the result of the first handler that recognizes ``method``.

    Raises:
        UnsupportedMethodError: if no handler recognizes the name.
    """
    for handler in handlers or RESOURCE_HANDLERS:
        result = await handler(method, params, client)
        if result is not NOT_HANDLED:
            return result
    raise UnsupportedMethodError(f"Unknown method: {method}")
