"""Tool system for browser automation."""

from playwright_dom_mcp.tools.registry import ToolRegistry
from playwright_dom_mcp.tools.actions import (
    register_default_actions,
    create_default_registry,
)
from playwright_dom_mcp.tools.views import (
    ActionResult,
    ActionDefinition,
    ImageItem,
    TextItem,
)

__all__ = [
    "ToolRegistry",
    "register_default_actions",
    "create_default_registry",
    "ActionResult",
    "ActionDefinition",
    "ImageItem",
    "TextItem",
]
