"""In-page DOM snapshot capture and its validated Python representation."""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from playwright_dom_mcp.core.exceptions import SnapshotError

logger = logging.getLogger(__name__)


# Copies the composed document into a flat node table in one synchronous
# evaluation. Nodes are indexed on first reference so that shadow roots,
# slot assignments and assigned nodes can point at each other by index.
# Only Text nodes and HTML elements are recorded. Children of opaque tags
# are not captured; the walker prunes those elements whole.
DOM_SNAPSHOT_JS = """
(opaqueTags) => {
    const OPAQUE = new Set(opaqueTags || []);
    const CONTROLS = [
        [HTMLButtonElement, "button"],
        [HTMLInputElement, "input"],
        [HTMLTextAreaElement, "textarea"],
        [HTMLLIElement, "list_item"],
        [HTMLOptionElement, "option"],
    ];
    const live = [];
    const indexes = new Map();

    const ref = (node) => {
        if (!(node instanceof Text) && !(node instanceof HTMLElement)) return null;
        let index = indexes.get(node);
        if (index === undefined) {
            index = live.length;
            indexes.set(node, index);
            live.push(node);
        }
        return index;
    };
    const refs = (list) => Array.from(list || [], ref).filter((index) => index !== null);

    const root = document.body ? ref(document.body) : null;
    const nodes = [];

    for (let i = 0; i < live.length; i++) {
        const node = live[i];
        if (node instanceof Text) {
            nodes.push({ kind: "text", text: node.textContent });
            continue;
        }

        const match = CONTROLS.find(([cls]) => node instanceof cls);
        const isSlot = node.tagName === "SLOT" && typeof node.assignedNodes === "function";
        const opaque = OPAQUE.has(node.tagName);
        nodes.push({
            kind: "element",
            tagName: node.tagName,
            attributes: node.getAttributeNames().map((name) => [name, node.getAttribute(name)]),
            children: opaque ? [] : refs(node.childNodes),
            shadowChildren: node.shadowRoot && !opaque ? refs(node.shadowRoot.childNodes) : null,
            assignedSlot: node.assignedSlot ? ref(node.assignedSlot) : null,
            assignedNodes: isSlot ? refs(node.assignedNodes()) : null,
            control: match ? match[1] : null,
            value: match ? node.value : null,
        });
    }

    return { root, nodes };
}
"""

# Elements pruned with their subtree in every pruning mode. Their text
# (inline scripts and stylesheets) is never part of the output.
OPAQUE_TAGS = ("SCRIPT", "STYLE", "NOSCRIPT", "HEAD", "CODE")


class NodeKind(str, Enum):
    """Kinds of captured DOM nodes."""
    TEXT = "text"
    ELEMENT = "element"


class ControlKind(str, Enum):
    """Form-control-like element classes that expose a live value."""
    BUTTON = "button"
    INPUT = "input"
    TEXTAREA = "textarea"
    LIST_ITEM = "list_item"
    OPTION = "option"


class SnapshotNode(BaseModel):
    """One captured node, referring to others by table index."""

    model_config = ConfigDict(populate_by_name=True)

    kind: NodeKind
    text: Optional[str] = None
    tag_name: str = Field(default="", alias="tagName")
    attributes: List[Tuple[str, Optional[str]]] = Field(default_factory=list)
    children: List[int] = Field(default_factory=list)
    shadow_children: Optional[List[int]] = Field(default=None, alias="shadowChildren")
    assigned_slot: Optional[int] = Field(default=None, alias="assignedSlot")
    assigned_nodes: Optional[List[int]] = Field(default=None, alias="assignedNodes")
    control: Optional[ControlKind] = None
    value: Union[int, float, str, None] = None

    @property
    def is_text(self) -> bool:
        """Check if this is a text node."""
        return self.kind == NodeKind.TEXT

    @property
    def tag(self) -> str:
        """Upper-cased tag name."""
        return self.tag_name.upper()

    @property
    def is_slot(self) -> bool:
        """Check if this is a <slot> element."""
        return not self.is_text and self.tag == "SLOT"

    def get_attribute(self, name: str) -> Optional[str]:
        """Get a raw attribute value, or None if absent."""
        for attr_name, attr_value in self.attributes:
            if attr_name == name:
                return attr_value
        return None


class DOMSnapshot(BaseModel):
    """Flat table of captured nodes with the document body as root."""

    root: Optional[int] = None
    nodes: List[SnapshotNode] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "DOMSnapshot":
        """
        Validate a payload produced by DOM_SNAPSHOT_JS.

        Raises:
            SnapshotError: If the payload does not match the snapshot shape
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise SnapshotError("Malformed DOM snapshot", details=str(e)) from e

    def get(self, index: Optional[int]) -> Optional[SnapshotNode]:
        """Get a node by index; dangling indexes resolve to None."""
        if index is None or not 0 <= index < len(self.nodes):
            return None
        return self.nodes[index]

    @property
    def root_node(self) -> Optional[SnapshotNode]:
        """The captured document body, if any."""
        return self.get(self.root)

    def child_indexes(self, index: int) -> List[int]:
        """
        Traversal order of a node's children: own children, then shadow-root
        children, then (for slots) the nodes projected into it.
        """
        node = self.get(index)
        if node is None or node.is_text:
            return []
        indexes = list(node.children)
        if node.shadow_children:
            indexes.extend(node.shadow_children)
        if node.is_slot and node.assigned_nodes:
            indexes.extend(node.assigned_nodes)
        return indexes


async def capture_snapshot(page: Any) -> DOMSnapshot:
    """
    Capture a snapshot of the page's document.

    Args:
        page: Anything with an async ``evaluate(script, arg)``, usually a Playwright Page

    Returns:
        Validated DOMSnapshot
    """
    payload = await page.evaluate(DOM_SNAPSHOT_JS, list(OPAQUE_TAGS))
    if not isinstance(payload, dict):
        raise SnapshotError(f"Unexpected snapshot payload type: {type(payload).__name__}")
    snapshot = DOMSnapshot.from_payload(payload)
    logger.debug(f"Captured DOM snapshot with {len(snapshot.nodes)} nodes")
    return snapshot
