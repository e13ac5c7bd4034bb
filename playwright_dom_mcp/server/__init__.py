"""MCP server module."""

from playwright_dom_mcp.server.app import build_server, serve, ResourceNotifier
from playwright_dom_mcp.server.resources import (
    CONSOLE_URI,
    list_resources,
    read_resource,
    screenshot_uri,
)

__all__ = [
    "build_server",
    "serve",
    "ResourceNotifier",
    "CONSOLE_URI",
    "list_resources",
    "read_resource",
    "screenshot_uri",
]
