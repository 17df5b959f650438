"""Minimal read-only sanity checks against a live Fakturownia account."""

from __future__ import annotations

import asyncio
import json
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from fakturownia_mcp.config import default_config  # noqa: E402
from fakturownia_mcp.credentials import resolve_credentials  # noqa: E402
from fakturownia_mcp.errors import FakturowniaError  # noqa: E402
from fakturownia_mcp.fakturownia_api import FakturowniaApiClient  # noqa: E402
from fakturownia_mcp.router import route_method  # noqa: E402

# Read-only calls only; nothing here creates or modifies records.
READ_ONLY_CALLS = [
    ("fakt_get_categories", {}),
    ("fakt_get_departments", {}),
    ("fakt_get_warehouses", {}),
    ("fakt_get_clients", {"perPage": 3}),
    ("fakt_get_products", {"perPage": 3}),
    ("fakt_get_payments", {"perPage": 3}),
    ("fakt_get_invoices", {"perPage": 3}),
]


def _preview(result: object, limit: int = 400) -> str:
    text = json.dumps(result, ensure_ascii=False)
    return text if len(text) <= limit else text[:limit] + "... (truncated)"


async def main() -> int:
    try:
        credentials = resolve_credentials(default_config)
    except FakturowniaError as exc:
        print(f"{exc}; set FAKTUROWNIA_DOMAIN and FAKTUROWNIA_API_TOKEN.")
        return 1

    client = FakturowniaApiClient(credentials)
    try:
        for method, params in READ_ONLY_CALLS:
            try:
                print(f"{method}:", _preview(await route_method(method, params, client)))
            except FakturowniaError as exc:
                print(f"{method}: error: {exc}")
    finally:
        await client.aclose()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
