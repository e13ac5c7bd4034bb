"""
Playwright DOM MCP
==================

An MCP server that drives a Chromium page through Playwright and hands
LLM agents a compressed view of its DOM: noise elements pruned, hidden
and disabled elements dropped, shadow roots and slots flattened, and
every kept element tagged with a stable `_id`.

Main Components:
- BrowserSession: Owns the page, console log and screenshots
- DOMService: Captures a snapshot and compresses it to JSON or markup
- ToolRegistry: The playwright_* tools exposed to clients
- build_server: The MCP server wiring tools and resources together

Quick Start:
    >>> from playwright_dom_mcp import BrowserSession
    >>>
    >>> async def main():
    ...     async with BrowserSession() as session:
    ...         await session.navigate("https://example.com")
    ...         return await session.extract_dom("markup")
"""

__version__ = "0.1.0"

# Lazy imports for better performance
_LAZY_IMPORTS = {
    "BrowserSession": ("playwright_dom_mcp.browser.session", "BrowserSession"),
    "BrowserDriver": ("playwright_dom_mcp.browser.driver", "BrowserDriver"),
    "ToolRegistry": ("playwright_dom_mcp.tools.registry", "ToolRegistry"),
    "ActionResult": ("playwright_dom_mcp.tools.views", "ActionResult"),
    "DOMExtractor": ("playwright_dom_mcp.dom.extractor", "DOMExtractor"),
    "DOMSerializer": ("playwright_dom_mcp.dom.serializer", "DOMSerializer"),
    "DOMService": ("playwright_dom_mcp.dom.service", "DOMService"),
    "Config": ("playwright_dom_mcp.core.config", "Config"),
    "build_server": ("playwright_dom_mcp.server.app", "build_server"),
}


def __getattr__(name: str):
    """Lazy import mechanism for main components."""
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        from importlib import import_module
        module = import_module(module_path)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "BrowserSession",
    "BrowserDriver",
    "ToolRegistry",
    "ActionResult",
    "DOMExtractor",
    "DOMSerializer",
    "DOMService",
    "Config",
    "build_server",
    "__version__",
]
