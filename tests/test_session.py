"""Tests for BrowserSession state handling, using a fake driver."""

import asyncio

import pytest

from conftest import FakeDriver, PNG_BASE64
from playwright_dom_mcp.browser.session import (
    BrowserSession,
    CONSOLE_CHANGED,
    SCREENSHOTS_CHANGED,
)
from playwright_dom_mcp.core.config import BrowserConfig, DOMConfig
from playwright_dom_mcp.core.exceptions import SessionError, SessionExpiredError


def make_session(driver):
    return BrowserSession(BrowserConfig(), DOMConfig(), driver=driver)


class TestLifecycle:
    def test_launches_lazily(self, fake_driver):
        session = make_session(fake_driver)
        assert not session.is_active
        assert not fake_driver.launched

        asyncio.run(session.navigate("https://example.com"))

        assert session.is_active
        assert fake_driver.launched
        assert fake_driver.calls == [("navigate", "https://example.com")]

    def test_context_manager_stops(self, fake_driver):
        async def run():
            async with make_session(fake_driver) as session:
                assert session.is_active
            return session

        session = asyncio.run(run())
        assert fake_driver.closed
        assert not session.is_active

    def test_driver_unavailable_when_stopped(self, fake_driver):
        session = make_session(fake_driver)
        with pytest.raises(SessionExpiredError) as exc_info:
            session.driver
        assert isinstance(exc_info.value, SessionError)
        assert exc_info.value.session_id == session.session_id
        assert not exc_info.value.recoverable


class TestConsole:
    def test_console_messages_are_recorded_and_announced(self, fake_driver):
        session = make_session(fake_driver)
        changes = []
        session.subscribe(changes.append)

        asyncio.run(session.ensure_started())
        fake_driver.emit_console("[log] one")
        fake_driver.emit_console("[error] two")

        assert session.console_logs == ["[log] one", "[error] two"]
        assert changes == [CONSOLE_CHANGED, CONSOLE_CHANGED]

    def test_failing_listener_does_not_break_recording(self, fake_driver):
        session = make_session(fake_driver)

        def broken(change):
            raise RuntimeError("boom")

        session.subscribe(broken)
        asyncio.run(session.ensure_started())
        fake_driver.emit_console("[log] still here")

        assert session.console_logs == ["[log] still here"]


class TestScreenshots:
    def test_screenshot_is_stored_by_name(self, fake_driver):
        session = make_session(fake_driver)
        changes = []
        session.subscribe(changes.append)

        shot = asyncio.run(session.screenshot("home", width=640, height=480))

        assert shot.data == PNG_BASE64
        assert (shot.width, shot.height) == (640, 480)
        assert session.get_screenshot("home") is shot
        assert fake_driver.calls == [("screenshot", None, 640, 480)]
        assert changes == [SCREENSHOTS_CHANGED]

    def test_same_name_overwrites(self, fake_driver):
        session = make_session(fake_driver)

        async def run():
            await session.screenshot("s")
            await session.screenshot("s", selector="#main")

        asyncio.run(run())
        assert list(session.screenshots) == ["s"]
        assert session.get_screenshot("s").selector == "#main"

    def test_unknown_screenshot(self, fake_driver):
        assert make_session(fake_driver).get_screenshot("nope") is None


class TestPageOperations:
    def test_interactions_delegate_to_driver(self, fake_driver):
        session = make_session(fake_driver)

        async def run():
            await session.click("#go")
            await session.fill("#q", "cats")
            await session.select_option("#color", "red")
            await session.hover("#menu")

        asyncio.run(run())
        assert fake_driver.calls == [
            ("click", "#go"),
            ("fill", "#q", "cats"),
            ("select", "#color", "red"),
            ("hover", "#menu"),
        ]

    def test_evaluate(self, fake_driver):
        outcome = asyncio.run(make_session(fake_driver).evaluate("1 + 1"))
        assert outcome.result == {"answer": 42}
        assert outcome.logs == ["[log] hi"]

    def test_extract_dom(self, doc):
        body = doc.element("BODY", children=[doc.text("hello")])
        driver = FakeDriver(payload=doc.payload(body))

        payload = asyncio.run(make_session(driver).extract_dom("markup"))

        assert payload == '<body _id="1">\nhello\n</body>'
