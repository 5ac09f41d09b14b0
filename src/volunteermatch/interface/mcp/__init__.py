"""MCP server exposing the volunteer matcher."""

from .server import create_server

__all__ = ["create_server"]
