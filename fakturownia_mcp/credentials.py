"""Resolution of the account domain and API token for one outbound call."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from fakturownia_mcp.config import FakturowniaConfig
from fakturownia_mcp.errors import InvalidDomainError, MissingCredentialsError

BASE_URL_TEMPLATE = "https://{domain}.fakturownia.pl"

# A single DNS label: the account name in front of ``.fakturownia.pl``.
DOMAIN_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")


@dataclass(frozen=True, slots=True)
class Credentials:
    domain: str
    api_token: str

    @property
    def base_url(self) -> str:
        return BASE_URL_TEMPLATE.format(domain=self.domain)

    def __repr__(self) -> str:
        return f"Credentials(domain={self.domain!r}, api_token='***')"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def resolve_credentials(
    config: FakturowniaConfig, arguments: Optional[Mapping[str, Any]] = None
) -> Credentials:
    """
    Combine process-wide credentials with per-call overrides.

    Configured values win; a value missing from the configuration is taken
    from the ``domain`` / ``api_token`` tool arguments instead.

    Raises:
        MissingCredentialsError: if either value is still empty.
        InvalidDomainError: if the domain is not a single subdomain label.
    """
    arguments = arguments or {}
    domain = config.domain or _as_text(arguments.get("domain"))
    api_token = config.api_token or _as_text(arguments.get("api_token"))
    if not domain or not api_token:
        raise MissingCredentialsError("Domain and API token are required")
    if not DOMAIN_PATTERN.fullmatch(domain):
        raise InvalidDomainError("Domain must be a fakturownia.pl account name, e.g. 'mycompany'")
    return Credentials(domain=domain, api_token=api_token)
