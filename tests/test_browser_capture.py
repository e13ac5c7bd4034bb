"""End-to-end capture tests against a real Chromium page.

Skipped when Playwright cannot launch Chromium.
"""

import asyncio
import json

import pytest
from playwright.async_api import async_playwright

from playwright_dom_mcp.core.config import DOMConfig
from playwright_dom_mcp.core.exceptions import UnsupportedElementError
from playwright_dom_mcp.dom.service import DOMService
from playwright_dom_mcp.dom.snapshot import capture_snapshot

SHADOW_CARD = """
<x-card><span slot="s">Hi</span></x-card>
<script>
    document.querySelector("x-card").attachShadow({ mode: "open" }).innerHTML =
        '<slot name="s"></slot>';
</script>
"""


async def _launch_chromium():
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        await browser.close()


@pytest.fixture(scope="module")
def chromium():
    try:
        asyncio.run(_launch_chromium())
    except Exception as e:
        pytest.skip(f"Chromium unavailable: {e}")


async def _capture(html):
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        try:
            page = await browser.new_page()
            await page.set_content(html)
            return await capture_snapshot(page)
        finally:
            await browser.close()


def render(html, output_format="json"):
    snapshot = asyncio.run(_capture(html))
    return DOMService(DOMConfig()).compress(snapshot, output_format)


def elements(tree):
    """Element dicts of a JSON tree in preorder, with their parent tag."""
    stack = [(tree, None)]
    while stack:
        node, parent = stack.pop()
        if node["type"] != "element":
            continue
        yield node, parent
        for child in reversed(node["children"]):
            stack.append((child, node["tagName"]))


@pytest.mark.usefixtures("chromium")
class TestBrowserCapture:
    def test_script_pruned_and_text_collapsed(self):
        tree = json.loads(render("<script>var marker = 1;</script><div>  Hello\n  world </div>"))

        assert tree["tagName"] == "BODY"
        assert [child["tagName"] for child in tree["children"]] == ["DIV"]
        assert tree["children"][0]["children"] == [{"type": "text", "text": "Hello world"}]

    def test_inline_script_text_not_captured(self):
        snapshot = asyncio.run(_capture("<script>var marker = 1;</script><p>ok</p>"))
        texts = [node.text for node in snapshot.nodes if node.is_text]
        assert not any("marker" in text for text in texts)
        assert "ok" in texts

    def test_hidden_input_pruned_and_live_value_kept(self):
        tree = json.loads(render(
            '<form><input type="hidden" name="csrf" value="tok"><input name="q"></form>'
            '<script>document.querySelector("[name=q]").value = "cats";</script>'
        ))

        form = tree["children"][0]
        assert len(form["children"]) == 1
        field = form["children"][0]
        assert field["tagName"] == "INPUT"
        assert field["attributes"][1:] == [
            {"name": "value", "value": "cats"},
            {"name": "name", "value": "q"},
        ]

    def test_slotted_span_appears_once_under_its_slot(self):
        tree = json.loads(render(SHADOW_CARD))

        spans = [(node, parent) for node, parent in elements(tree) if node["tagName"] == "SPAN"]
        assert len(spans) == 1
        span, parent = spans[0]
        assert parent == "SLOT"
        assert span["children"] == [{"type": "text", "text": "Hi"}]

        card = tree["children"][0]
        assert card["tagName"] == "X-CARD"
        assert [child["tagName"] for child in card["children"]] == ["SLOT"]

    def test_iframe_fails_extraction(self):
        with pytest.raises(UnsupportedElementError, match="IFRAME not supported"):
            render('<div><iframe src="about:blank"></iframe></div>')

    def test_link_markup_on_one_line(self):
        markup = render('<a href="/x">Go</a>', "markup")
        assert markup == '<body _id="1">\n<a _id="2" href="/x">Go</a>\n</body>'
