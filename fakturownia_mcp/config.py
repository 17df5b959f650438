"""
Configuration helpers for the Fakturownia MCP server.

This module centralizes the default account domain, API token loading, HTTP
timeouts, and logging options. No secrets are stored in the repository; the
API token is read from the environment or a local file if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DOMAIN_ENV_VAR = "FAKTUROWNIA_DOMAIN"
API_TOKEN_ENV_VAR = "FAKTUROWNIA_API_TOKEN"
API_TOKEN_FILE_ENV_VAR = "FAKTUROWNIA_API_TOKEN_FILE"

DEFAULT_TIMEOUT = 30.0
PROTOCOL_VERSION = "2024-11-05"
SERVER_VERSION = "1.0.0"


def _load_timeout() -> float:
    raw_timeout = os.getenv("FAKTUROWNIA_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return DEFAULT_TIMEOUT
    return DEFAULT_TIMEOUT


def load_domain() -> str:
    """Return the account subdomain configured for the process, or ``""``."""
    return (os.getenv(DOMAIN_ENV_VAR) or "").strip()


def load_api_token() -> str:
    """
    Load the Fakturownia API token from environment or a token file.

    Returns:
        The token string if available, otherwise an empty string. The token
        is never logged or returned to callers.
    """
    env_token = os.getenv(API_TOKEN_ENV_VAR)
    if env_token:
        return env_token.strip()

    token_path = os.getenv(API_TOKEN_FILE_ENV_VAR)
    if token_path:
        path = Path(token_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip()

    return ""


@dataclass(slots=True)
class FakturowniaConfig:
    """Runtime configuration, read once at process start."""

    domain: str = field(default_factory=load_domain)
    api_token: str = field(default_factory=load_api_token)
    timeout: float = field(default_factory=_load_timeout)
    log_level: str = field(default_factory=lambda: os.getenv("FAKTUROWNIA_MCP_LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: os.getenv("FAKTUROWNIA_MCP_LOG_FORMAT", "json"))
    protocol_version: str = PROTOCOL_VERSION
    server_version: str = SERVER_VERSION


default_config = FakturowniaConfig()
