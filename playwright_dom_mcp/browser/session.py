"""Browser session management with console and screenshot tracking."""

import asyncio
import logging
from typing import Callable, Dict, List, Optional, Union
from uuid import uuid4

from playwright_dom_mcp.core.config import BrowserConfig, DOMConfig
from playwright_dom_mcp.core.exceptions import SessionExpiredError
from playwright_dom_mcp.browser.driver import BrowserDriver
from playwright_dom_mcp.browser.views import EvaluationResult, Screenshot
from playwright_dom_mcp.dom.service import DOMService
from playwright_dom_mcp.dom.views import OutputFormat

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str], None]

CONSOLE_CHANGED = "console"
SCREENSHOTS_CHANGED = "screenshots"


class BrowserSession:
    """
    High-level browser session manager.

    Provides:
    - Lazy browser launch on first use
    - One-at-a-time execution of page operations
    - Console log and named screenshot stores
    - Change notifications for the stores
    - DOM extraction of the current page
    """

    def __init__(
        self,
        config: Optional[BrowserConfig] = None,
        dom_config: Optional[DOMConfig] = None,
        driver: Optional[BrowserDriver] = None,
    ):
        """
        Initialize a browser session.

        Args:
            config: Browser configuration
            dom_config: DOM extraction configuration
            driver: Pre-built driver (mainly for tests)
        """
        self.config = config or BrowserConfig.from_env()
        self.session_id = str(uuid4())[:8]
        self.dom_service = DOMService(dom_config)

        self._driver = driver
        self._is_active = False
        self._lock = asyncio.Lock()

        self._console_logs: List[str] = []
        self._screenshots: Dict[str, Screenshot] = {}
        self._listeners: List[ChangeListener] = []

    async def start(self) -> "BrowserSession":
        """Start the browser session."""
        if self._is_active:
            logger.warning("Session already active")
            return self

        logger.info(f"Starting browser session {self.session_id}")

        if self._driver is None:
            self._driver = BrowserDriver(self.config)
        self._driver.add_console_listener(self._record_console)
        await self._driver.launch()

        self._is_active = True
        return self

    async def stop(self) -> None:
        """Stop the browser session."""
        if not self._is_active:
            return

        logger.info(f"Stopping browser session {self.session_id}")

        if self._driver:
            await self._driver.close()
            self._driver = None

        self._is_active = False

    async def ensure_started(self) -> BrowserDriver:
        """Launch the browser if needed and return its driver."""
        if not self._is_active:
            await self.start()
        return self.driver

    async def __aenter__(self) -> "BrowserSession":
        """Async context manager entry."""
        return await self.start()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.stop()

    @property
    def driver(self) -> BrowserDriver:
        """Get the browser driver."""
        if not self._is_active or not self._driver:
            raise SessionExpiredError(self.session_id)
        return self._driver

    @property
    def is_active(self) -> bool:
        """Check if session is active."""
        return self._is_active

    # Change notifications

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a callback receiving CONSOLE_CHANGED or SCREENSHOTS_CHANGED."""
        self._listeners.append(listener)

    def _notify(self, change: str) -> None:
        for listener in self._listeners:
            try:
                listener(change)
            except Exception as e:
                logger.warning(f"Change listener failed: {e}")

    def _record_console(self, entry: str) -> None:
        self._console_logs.append(entry)
        self._notify(CONSOLE_CHANGED)

    # Stores

    @property
    def console_logs(self) -> List[str]:
        """Console messages captured so far, oldest first."""
        return self._console_logs.copy()

    @property
    def screenshots(self) -> Dict[str, Screenshot]:
        """Stored screenshots by name."""
        return self._screenshots.copy()

    def get_screenshot(self, name: str) -> Optional[Screenshot]:
        """Get a stored screenshot by name."""
        return self._screenshots.get(name)

    # Page operations

    async def navigate(self, url: str) -> None:
        """Navigate to a URL."""
        async with self._lock:
            driver = await self.ensure_started()
            await driver.navigate(url)

    async def click(self, selector: str) -> None:
        """Click an element."""
        async with self._lock:
            driver = await self.ensure_started()
            await driver.click(selector)

    async def fill(self, selector: str, value: str) -> None:
        """Fill an input field."""
        async with self._lock:
            driver = await self.ensure_started()
            await driver.fill(selector, value)

    async def select_option(self, selector: str, value: str) -> List[str]:
        """Select an option in a <select> element."""
        async with self._lock:
            driver = await self.ensure_started()
            return await driver.select_option(selector, value)

    async def hover(self, selector: str) -> None:
        """Hover over an element."""
        async with self._lock:
            driver = await self.ensure_started()
            await driver.hover(selector)

    async def screenshot(
        self,
        name: str,
        selector: Optional[str] = None,
        width: int = 800,
        height: int = 600,
    ) -> Screenshot:
        """Take a screenshot and store it under a name."""
        async with self._lock:
            driver = await self.ensure_started()
            data = await driver.screenshot(selector=selector, width=width, height=height)

        shot = Screenshot(
            name=name,
            data=data,
            width=width,
            height=height,
            selector=selector or "",
        )
        self._screenshots[name] = shot
        self._notify(SCREENSHOTS_CHANGED)
        return shot

    async def evaluate(self, script: str) -> EvaluationResult:
        """Execute JavaScript in the page, capturing console output."""
        async with self._lock:
            driver = await self.ensure_started()
            return await driver.evaluate(script)

    async def extract_dom(
        self,
        output_format: Union[OutputFormat, str, None] = None,
    ) -> str:
        """Extract the compressed DOM of the current page."""
        async with self._lock:
            driver = await self.ensure_started()
            return await self.dom_service.extract(driver.page, output_format)

