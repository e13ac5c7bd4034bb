"""MCP server exposing the browser tools and resources over stdio."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Set, Union

import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from playwright_dom_mcp.core.config import Config
from playwright_dom_mcp.core.exceptions import ActionNotFoundError, ToolFailedError
from playwright_dom_mcp.browser.session import BrowserSession, CONSOLE_CHANGED
from playwright_dom_mcp.server.resources import CONSOLE_URI, list_resources, read_resource
from playwright_dom_mcp.tools.actions import create_default_registry
from playwright_dom_mcp.tools.registry import ToolRegistry
from playwright_dom_mcp.tools.views import ActionResult, ImageItem

logger = logging.getLogger(__name__)

ToolContent = Union[types.TextContent, types.ImageContent]


class ResourceNotifier:
    """
    Forwards session store changes to the connected client.

    Console messages become resources/updated for the log URI, new
    screenshots become resources/list_changed. Nothing is sent until a
    client session has been bound.
    """

    def __init__(self):
        self._client = None
        self._tasks: Set[asyncio.Task] = set()

    def bind(self, client) -> None:
        """Remember the client session to notify."""
        self._client = client

    def __call__(self, change: str) -> None:
        if self._client is None:
            return

        if change == CONSOLE_CHANGED:
            coro = self._client.send_resource_updated(AnyUrl(CONSOLE_URI))
        else:
            coro = self._client.send_resource_list_changed()

        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._finished)

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.warning(f"Resource notification failed: {task.exception()}")


def to_tool_content(result: ActionResult) -> List[ToolContent]:
    """Convert an ActionResult into MCP content blocks."""
    content: List[ToolContent] = []
    for item in result.content:
        if isinstance(item, ImageItem):
            content.append(types.ImageContent(type="image", data=item.data, mimeType=item.mime_type))
        else:
            content.append(types.TextContent(type="text", text=item.text))
    return content


async def call_tool(
    registry: ToolRegistry,
    browser_session: BrowserSession,
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> ActionResult:
    """Run one tool, mapping an unknown name to an error result."""
    try:
        return await registry.execute(name, arguments or {}, browser_session=browser_session)
    except ActionNotFoundError:
        return ActionResult.error(f"Unknown tool: {name}")


def build_server(
    browser_session: BrowserSession,
    registry: Optional[ToolRegistry] = None,
    config: Optional[Config] = None,
) -> Server:
    """
    Build the MCP server with tool and resource handlers.

    Args:
        browser_session: Session shared by every request
        registry: Tools to expose (defaults to the playwright_* tools)
        config: Server configuration

    Returns:
        Configured low-level MCP server
    """
    config = config or Config.from_env()
    registry = registry or create_default_registry()

    server = Server(config.server.name, version=config.server.version)
    notifier = ResourceNotifier()
    browser_session.subscribe(notifier)

    def bind_client() -> None:
        notifier.bind(server.request_context.session)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        bind_client()
        return [
            types.Tool(
                name=schema["name"],
                description=schema["description"],
                inputSchema=schema["inputSchema"],
            )
            for schema in registry.get_actions_schema()
        ]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[ToolContent]:
        bind_client()
        result = await call_tool(registry, browser_session, name, arguments)
        if result.is_error:
            # Raised errors reach the client as isError results carrying this text
            raise ToolFailedError(name, result.text_content)
        return to_tool_content(result)

    @server.list_resources()
    async def handle_list_resources() -> List[types.Resource]:
        bind_client()
        return list_resources(browser_session)

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl):
        bind_client()
        return read_resource(browser_session, str(uri))

    return server


async def serve(config: Optional[Config] = None) -> None:
    """Run the server over stdio until the client disconnects."""
    config = config or Config.from_env()
    browser_session = BrowserSession(config.browser, config.dom)
    server = build_server(browser_session, config=config)

    options = server.create_initialization_options(
        notification_options=NotificationOptions(resources_changed=True),
    )

    logger.info(f"Starting MCP server '{config.server.name}' on stdio")
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, options)
    finally:
        await browser_session.stop()
        logger.info("MCP server stopped")
