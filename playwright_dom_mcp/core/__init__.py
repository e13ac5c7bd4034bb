"""Core framework components - configuration, logging, and exceptions."""

from playwright_dom_mcp.core.config import BrowserConfig, Config, DOMConfig, ServerConfig
from playwright_dom_mcp.core.exceptions import (
    BrowserAutomationError,
    BrowserError,
    ActionError,
    DOMError,
    DOMExtractionError,
    UnsupportedElementError,
    ResourceNotFoundError,
)
from playwright_dom_mcp.core.logging import setup_logging, get_logger

__all__ = [
    "Config",
    "BrowserConfig",
    "DOMConfig",
    "ServerConfig",
    "BrowserAutomationError",
    "BrowserError",
    "ActionError",
    "DOMError",
    "DOMExtractionError",
    "UnsupportedElementError",
    "ResourceNotFoundError",
    "setup_logging",
    "get_logger",
]
