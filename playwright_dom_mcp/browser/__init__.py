"""Browser automation module - Playwright driver and session."""

from playwright_dom_mcp.browser.driver import BrowserDriver
from playwright_dom_mcp.browser.session import (
    BrowserSession,
    CONSOLE_CHANGED,
    SCREENSHOTS_CHANGED,
)
from playwright_dom_mcp.browser.views import EvaluationResult, Screenshot

__all__ = [
    "BrowserDriver",
    "BrowserSession",
    "CONSOLE_CHANGED",
    "SCREENSHOTS_CHANGED",
    "EvaluationResult",
    "Screenshot",
]
