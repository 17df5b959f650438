"""
Fakturownia.pl MCP server package.

This package exposes JSON-RPC / MCP tool endpoints that forward to the
Fakturownia REST API. See DESIGN.md for full details.
"""

__all__ = ["config"]
