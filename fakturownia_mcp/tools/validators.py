"""Shared argument helpers for Fakturownia tools."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from fakturownia_mcp.errors import InvalidParamsError

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


def is_missing(value: Any) -> bool:
    """Treat ``None``, empty strings, zero and ``False`` as absent; containers count as present."""
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value
    return False


def require(params: Mapping[str, Any], key: str, message: str) -> Any:
    """Return ``params[key]`` or raise ``InvalidParamsError`` with ``message``."""
    value = params.get(key)
    if is_missing(value):
        raise InvalidParamsError(message)
    return value


def or_default(value: Any, default: Any) -> Any:
    return default if is_missing(value) else value


def pagination(params: Mapping[str, Any], *, defaults: bool = True) -> Dict[str, Any]:
    """
    Build ``page`` / ``per_page`` query parameters from ``page`` / ``perPage``.

    With ``defaults=False`` only the values the caller supplied are returned.
    """
    if defaults:
        return {
            "page": or_default(params.get("page"), DEFAULT_PAGE),
            "per_page": or_default(params.get("perPage"), DEFAULT_PER_PAGE),
        }
    query: Dict[str, Any] = {}
    if not is_missing(params.get("page")):
        query["page"] = params["page"]
    if not is_missing(params.get("perPage")):
        query["per_page"] = params["perPage"]
    return query


def merge_query(api_token: str, *parts: Optional[Mapping[str, Any]], filters: Any = None) -> Dict[str, Any]:
    """Merge query fragments after ``api_token``; a ``filters`` mapping is applied last and wins."""
    query: Dict[str, Any] = {"api_token": api_token}
    for part in parts:
        if part:
            query.update(part)
    if isinstance(filters, Mapping):
        query.update(filters)
    return query
