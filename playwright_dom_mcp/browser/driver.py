"""Browser driver using Playwright for browser automation."""

import base64
import logging
from typing import Any, Callable, Dict, List, Optional
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    ConsoleMessage,
    Locator,
    Page,
    Playwright,
)

from playwright_dom_mcp.core.config import BrowserConfig
from playwright_dom_mcp.core.exceptions import (
    BrowserError,
    ElementNotFoundError,
    NavigationError,
)
from playwright_dom_mcp.core.logging import log_browser_event
from playwright_dom_mcp.browser.views import EvaluationResult

logger = logging.getLogger(__name__)


# Runs a script with console.log/info/warn/error teed into a buffer, and
# restores the console whether or not the script throws.
EVALUATE_WITH_CONSOLE_JS = """
(script) => {
    const logs = [];
    const originalConsole = { ...console };

    ['log', 'info', 'warn', 'error'].forEach((method) => {
        console[method] = (...args) => {
            logs.push(`[${method}] ${args.join(' ')}`);
            originalConsole[method](...args);
        };
    });

    try {
        const result = eval(script);
        return { result, logs };
    } finally {
        Object.assign(console, originalConsole);
    }
}
"""

ConsoleListener = Callable[[str], None]


class BrowserDriver:
    """
    Low-level browser driver using Playwright.

    Handles launching Chromium, selector-based interactions with explicit
    waits, screenshots, script evaluation and console capture.
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig.from_env()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._console_listeners: List[ConsoleListener] = []

    async def launch(self) -> None:
        """Launch the browser instance."""
        logger.info("Launching browser...")

        self._playwright = await async_playwright().start()

        launch_options: Dict[str, Any] = {
            "headless": self.config.headless,
            "slow_mo": self.config.slow_mo,
        }
        if self.config.executable_path:
            launch_options["executable_path"] = self.config.executable_path

        self._browser = await self._playwright.chromium.launch(**launch_options)

        context_options: Dict[str, Any] = {
            "viewport": {
                "width": self.config.viewport_width,
                "height": self.config.viewport_height,
            },
            "ignore_https_errors": self.config.ignore_https_errors,
        }
        if self.config.user_agent:
            context_options["user_agent"] = self.config.user_agent

        self._context = await self._browser.new_context(**context_options)
        self._page = await self._context.new_page()
        self._page.set_default_timeout(self.config.timeout)
        self._page.on("console", self._handle_console)

        logger.info(f"Browser launched (headless={self.config.headless})")

    async def close(self) -> None:
        """Close the browser instance."""
        logger.info("Closing browser...")

        if self._context:
            await self._context.close()
            self._context = None
            self._page = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.info("Browser closed")

    @property
    def page(self) -> Page:
        """Get the current page."""
        if not self._page:
            raise BrowserError("Browser not launched")
        return self._page

    def add_console_listener(self, listener: ConsoleListener) -> None:
        """Subscribe to formatted console messages ("[type] text")."""
        self._console_listeners.append(listener)

    def _handle_console(self, message: ConsoleMessage) -> None:
        entry = f"[{message.type}] {message.text}"
        log_browser_event("console", message_type=message.type)
        for listener in self._console_listeners:
            listener(entry)

    async def navigate(
        self,
        url: str,
        wait_until: str = "load",
        timeout: Optional[int] = None
    ) -> None:
        """Navigate to a URL."""
        timeout = timeout or self.config.timeout

        try:
            logger.info(f"Navigating to: {url}")
            await self.page.goto(url, wait_until=wait_until, timeout=timeout)
            log_browser_event("navigation", url=url)
        except Exception as e:
            raise NavigationError(str(e))

    async def locate(self, selector: str, timeout: Optional[int] = None) -> Locator:
        """
        Resolve a selector and wait until it is attached and visible.

        Raises:
            ElementNotFoundError: If the element does not appear in time
        """
        locator = self.page.locator(selector)
        try:
            await locator.wait_for(timeout=timeout or self.config.timeout)
        except Exception as e:
            raise ElementNotFoundError(selector, f"Element not found: {selector} ({e})")
        return locator

    async def click(self, selector: str) -> None:
        """Click an element."""
        locator = await self.locate(selector)
        await locator.click()
        log_browser_event("click", selector=selector)

    async def fill(self, selector: str, value: str) -> None:
        """Fill an input field."""
        locator = await self.locate(selector)
        await locator.fill(value)
        log_browser_event("fill", selector=selector)

    async def select_option(self, selector: str, value: str) -> List[str]:
        """Select an option in a <select> element."""
        locator = await self.locate(selector)
        selected = await locator.select_option(value)
        log_browser_event("select", selector=selector, selected=selected)
        return selected

    async def hover(self, selector: str) -> None:
        """Hover over an element."""
        locator = await self.locate(selector)
        await locator.hover()
        log_browser_event("hover", selector=selector)

    async def screenshot(
        self,
        selector: Optional[str] = None,
        width: int = 800,
        height: int = 600,
    ) -> str:
        """
        Take a screenshot of the page or of one element.

        Args:
            selector: CSS selector of the element to capture (None = page)
            width: Viewport width to set before capturing
            height: Viewport height to set before capturing

        Returns:
            Base64 encoded PNG
        """
        await self.page.set_viewport_size({"width": width, "height": height})

        if selector:
            locator = await self.locate(selector)
            screenshot_bytes = await locator.screenshot(type="png")
        else:
            screenshot_bytes = await self.page.screenshot(type="png")

        log_browser_event("screenshot", selector=selector, width=width, height=height)
        return base64.b64encode(screenshot_bytes).decode("utf-8")

    async def evaluate(self, script: str) -> EvaluationResult:
        """Execute JavaScript in the page, capturing console output."""
        try:
            raw = await self.page.evaluate(EVALUATE_WITH_CONSOLE_JS, script)
        except Exception as e:
            raise BrowserError(str(e))
        return EvaluationResult(
            result=raw.get("result") if raw else None,
            logs=raw.get("logs", []) if raw else [],
        )
