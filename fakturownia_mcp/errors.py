"""Exception types shared by the REST client, the tool handlers and the endpoints."""

from __future__ import annotations

from typing import Any, Optional


class FakturowniaError(Exception):
    """Base exception for every failure surfaced to MCP callers."""


class InvalidParamsError(FakturowniaError):
    """Raised when a required tool argument is missing."""


class MissingCredentialsError(FakturowniaError):
    """Raised when no domain/API token pair can be resolved."""


class InvalidDomainError(MissingCredentialsError):
    """Raised when the account domain is not a single subdomain label."""


class UnsupportedMethodError(FakturowniaError):
    """Raised when no handler recognizes a tool or method name."""


class FakturowniaApiError(FakturowniaError):
    """Base exception for failures talking to the Fakturownia API."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.payload = payload


class RemoteApiError(FakturowniaApiError):
    """Raised when the API answers with an error status."""


class TransportError(FakturowniaApiError):
    """Raised when the API cannot be reached at all."""
