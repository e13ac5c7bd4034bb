"""Shared builders and fakes for the test suite."""

import base64
from typing import Any, Dict, List, Optional

import pytest

from playwright_dom_mcp.browser.views import EvaluationResult
from playwright_dom_mcp.core.exceptions import ElementNotFoundError
from playwright_dom_mcp.dom.snapshot import DOMSnapshot

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode("utf-8")


class DocBuilder:
    """
    Builds snapshot payloads shaped like the in-page capture script output.

    Nodes are created bottom-up: children first, then the element holding
    them. Every method returns the new node's table index.
    """

    def __init__(self):
        self.nodes: List[Dict[str, Any]] = []

    def _add(self, node: Dict[str, Any]) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def text(self, text: str) -> int:
        return self._add({"kind": "text", "text": text})

    def element(
        self,
        tag: str,
        attrs: Optional[Dict[str, Optional[str]]] = None,
        children: Optional[List[int]] = None,
        shadow: Optional[List[int]] = None,
        control: Optional[str] = None,
        value: Any = None,
    ) -> int:
        tag = tag.upper()
        return self._add({
            "kind": "element",
            "tagName": tag,
            "attributes": [[name, val] for name, val in (attrs or {}).items()],
            "children": list(children or []),
            "shadowChildren": list(shadow) if shadow is not None else None,
            "assignedSlot": None,
            "assignedNodes": [] if tag == "SLOT" else None,
            "control": control,
            "value": value,
        })

    def assign(self, node: int, slot: int) -> None:
        """Project a light-DOM node into a slot."""
        self.nodes[node]["assignedSlot"] = slot
        self.nodes[slot]["assignedNodes"].append(node)

    def payload(self, root: Optional[int]) -> Dict[str, Any]:
        return {"root": root, "nodes": self.nodes}

    def build(self, root: Optional[int]) -> DOMSnapshot:
        return DOMSnapshot.from_payload(self.payload(root))


class FakePage:
    """Stands in for a Playwright Page during DOM capture."""

    def __init__(self, payload: Any):
        self.payload = payload
        self.scripts: List[str] = []
        self.args: List[Any] = []

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        self.scripts.append(script)
        self.args.append(arg)
        return self.payload


class FakeDriver:
    """Records calls made by BrowserSession instead of driving Chromium."""

    def __init__(self, payload: Optional[Dict[str, Any]] = None, missing: tuple = ()):
        self.calls: List[tuple] = []
        self.launched = False
        self.closed = False
        self.missing = set(missing)
        self.evaluation = EvaluationResult(result={"answer": 42}, logs=["[log] hi"])
        self.page = FakePage(payload or {"root": None, "nodes": []})
        self._console_listeners = []

    def add_console_listener(self, listener) -> None:
        self._console_listeners.append(listener)

    def emit_console(self, entry: str) -> None:
        for listener in self._console_listeners:
            listener(entry)

    async def launch(self) -> None:
        self.launched = True

    async def close(self) -> None:
        self.closed = True

    def _check(self, selector: Optional[str]) -> None:
        if selector in self.missing:
            raise ElementNotFoundError(selector)

    async def navigate(self, url: str) -> None:
        self.calls.append(("navigate", url))

    async def click(self, selector: str) -> None:
        self._check(selector)
        self.calls.append(("click", selector))

    async def fill(self, selector: str, value: str) -> None:
        self._check(selector)
        self.calls.append(("fill", selector, value))

    async def select_option(self, selector: str, value: str) -> List[str]:
        self._check(selector)
        self.calls.append(("select", selector, value))
        return [value]

    async def hover(self, selector: str) -> None:
        self._check(selector)
        self.calls.append(("hover", selector))

    async def screenshot(self, selector: Optional[str] = None, width: int = 800, height: int = 600) -> str:
        self._check(selector)
        self.calls.append(("screenshot", selector, width, height))
        return PNG_BASE64

    async def evaluate(self, script: str) -> EvaluationResult:
        self.calls.append(("evaluate", script))
        return self.evaluation


@pytest.fixture
def doc() -> DocBuilder:
    return DocBuilder()


@pytest.fixture
def fake_driver() -> FakeDriver:
    return FakeDriver()
