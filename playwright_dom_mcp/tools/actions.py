"""Default browser tools implementation."""

import json
import logging
from typing import Any, Optional

from playwright_dom_mcp.tools.registry import ToolRegistry
from playwright_dom_mcp.tools.views import (
    ActionResult,
    ImageItem,
    TextItem,
    NavigateParams,
    ScreenshotParams,
    ClickParams,
    ExtractDomParams,
    FillParams,
    SelectParams,
    HoverParams,
    EvaluateParams,
)

logger = logging.getLogger(__name__)


def format_evaluation(result: Any, logs: list) -> str:
    """Render a script result and its console output for the caller."""
    rendered = json.dumps(result, indent=2, ensure_ascii=False)
    return f"Execution result:\n{rendered}\n\nConsole output:\n" + "\n".join(logs)


def register_default_actions(registry: ToolRegistry) -> None:
    """
    Register all default browser tools with the registry.

    Args:
        registry: ToolRegistry to register tools with
    """

    @registry.action(
        "playwright_navigate",
        description="Navigate to a URL",
        param_model=NavigateParams,
    )
    async def navigate(params: NavigateParams, browser_session: Any) -> ActionResult:
        """Navigate to a URL."""
        try:
            await browser_session.navigate(params.url)
        except Exception as e:
            return ActionResult.error(f"Failed to navigate to {params.url}: {e}")

        logger.info(f"🔗 Navigated to {params.url}")
        return ActionResult.text(f"Navigated to {params.url}")

    @registry.action(
        "playwright_screenshot",
        description="Take a screenshot of the current page or a specific element",
        param_model=ScreenshotParams,
    )
    async def screenshot(params: ScreenshotParams, browser_session: Any) -> ActionResult:
        """Take a named screenshot."""
        try:
            shot = await browser_session.screenshot(
                params.name,
                selector=params.selector,
                width=params.width,
                height=params.height,
            )
        except Exception as e:
            return ActionResult.error(f"Screenshot failed: {e}")

        logger.info(f"📸 Screenshot '{params.name}' stored")
        return ActionResult(content=[
            TextItem(text=f"Screenshot '{params.name}' taken at {params.width}x{params.height}"),
            ImageItem(data=shot.data, mime_type=shot.mime_type),
        ])

    @registry.action(
        "playwright_click",
        description="Click an element on the page",
        param_model=ClickParams,
    )
    async def click(params: ClickParams, browser_session: Any) -> ActionResult:
        """Click an element."""
        try:
            await browser_session.click(params.selector)
        except Exception as e:
            return ActionResult.error(f"Failed to click {params.selector}: {e}")

        logger.info(f"🖱️ Clicked {params.selector}")
        return ActionResult.text(f"Clicked: {params.selector}")

    @registry.action(
        "playwright_extract_dom",
        description="Extract the DOM of the current page",
        param_model=ExtractDomParams,
    )
    async def extract_dom(params: ExtractDomParams, browser_session: Any) -> ActionResult:
        """Extract the compressed DOM of the current page."""
        try:
            payload = await browser_session.extract_dom(params.format)
        except Exception as e:
            return ActionResult.error(f"Failed to extract DOM: {e}")

        return ActionResult.text(payload)

    @registry.action(
        "playwright_fill",
        description="Fill out an input field",
        param_model=FillParams,
    )
    async def fill(params: FillParams, browser_session: Any) -> ActionResult:
        """Fill an input field."""
        try:
            await browser_session.fill(params.selector, params.value)
        except Exception as e:
            return ActionResult.error(f"Failed to fill {params.selector}: {e}")

        # Values may be credentials
        logger.debug(f"⌨️ Filled {params.selector}")
        return ActionResult.text(f"Filled {params.selector} with: {params.value}")

    @registry.action(
        "playwright_select",
        description="Select an element on the page with Select tag",
        param_model=SelectParams,
    )
    async def select(params: SelectParams, browser_session: Any) -> ActionResult:
        """Select an option."""
        try:
            await browser_session.select_option(params.selector, params.value)
        except Exception as e:
            return ActionResult.error(f"Failed to select {params.selector}: {e}")

        logger.info(f"Selected {params.value} in {params.selector}")
        return ActionResult.text(f"Selected {params.selector} with: {params.value}")

    @registry.action(
        "playwright_hover",
        description="Hover an element on the page",
        param_model=HoverParams,
    )
    async def hover(params: HoverParams, browser_session: Any) -> ActionResult:
        """Hover over an element."""
        try:
            await browser_session.hover(params.selector)
        except Exception as e:
            return ActionResult.error(f"Failed to hover {params.selector}: {e}")

        return ActionResult.text(f"Hovered {params.selector}")

    @registry.action(
        "playwright_evaluate",
        description="Execute JavaScript in the browser console",
        param_model=EvaluateParams,
    )
    async def evaluate(params: EvaluateParams, browser_session: Any) -> ActionResult:
        """Execute JavaScript."""
        try:
            outcome = await browser_session.evaluate(params.script)
        except Exception as e:
            return ActionResult.error(f"Script execution failed: {e}")

        logger.debug(f"JavaScript executed, {len(outcome.logs)} console lines")
        return ActionResult.text(format_evaluation(outcome.result, outcome.logs))

    logger.debug(f"Registered {len(registry)} default tools")


def create_default_registry(
    exclude_actions: Optional[list] = None
) -> ToolRegistry:
    """
    Create a ToolRegistry with all default tools registered.

    Args:
        exclude_actions: List of tool names to exclude

    Returns:
        Configured ToolRegistry
    """
    registry = ToolRegistry(exclude_actions=exclude_actions)
    register_default_actions(registry)
    return registry
