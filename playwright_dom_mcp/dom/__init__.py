"""DOM extraction and serialization module."""

from playwright_dom_mcp.dom.extractor import DOMExtractor, IdentifierAssigner
from playwright_dom_mcp.dom.serializer import DOMSerializer
from playwright_dom_mcp.dom.service import DOMService
from playwright_dom_mcp.dom.snapshot import (
    DOM_SNAPSHOT_JS,
    DOMSnapshot,
    SnapshotNode,
    capture_snapshot,
)
from playwright_dom_mcp.dom.views import (
    ElementNode,
    OutputFormat,
    TextNode,
)

__all__ = [
    "DOMExtractor",
    "IdentifierAssigner",
    "DOMSerializer",
    "DOMService",
    "DOM_SNAPSHOT_JS",
    "DOMSnapshot",
    "SnapshotNode",
    "capture_snapshot",
    "ElementNode",
    "OutputFormat",
    "TextNode",
]
