"""Compressed tree extraction from a captured DOM snapshot."""

import logging
from typing import List, Optional, Tuple

from playwright_dom_mcp.dom.attributes import (
    extract_value,
    normalize_attributes,
    normalize_whitespace,
)
from playwright_dom_mcp.dom.classifier import Classification, classify_node
from playwright_dom_mcp.dom.snapshot import DOMSnapshot
from playwright_dom_mcp.dom.views import ElementNode, Node, TextNode

logger = logging.getLogger(__name__)


class IdentifierAssigner:
    """Hands out "1", "2", ... for the lifetime of one extraction."""

    def __init__(self):
        self._last = 0

    def next(self) -> str:
        self._last += 1
        return str(self._last)

    @property
    def issued(self) -> int:
        """Number of identifiers handed out so far."""
        return self._last


# (snapshot index, slot context, children list of the parent)
_WorkItem = Tuple[int, Optional[int], List[Node]]


class DOMExtractor:
    """
    Walks a DOMSnapshot into a compressed tree of TextNode/ElementNode.

    The walk crosses shadow roots and slot projections:
    - an element's children are its own child nodes, then its shadow
      root's children, then (for a slot) its assigned nodes
    - the slot being traversed is carried as context so that a slotted
      element is emitted only under its slot
    - noise, hidden and iframe elements are handled by the classifier

    The traversal is depth-first with an explicit stack; identifiers are
    assigned in preorder.
    """

    def __init__(self, strict_pruning: bool = True):
        """
        Initialize the extractor.

        Args:
            strict_pruning: Also prune FONT and BR elements
        """
        self.strict_pruning = strict_pruning

    def extract(self, snapshot: DOMSnapshot) -> Optional[ElementNode]:
        """
        Extract the compressed tree rooted at the snapshot's body.

        Returns:
            Root ElementNode, or None when the body is missing or dropped

        Raises:
            UnsupportedElementError: If an iframe is reached
        """
        if snapshot.root_node is None:
            logger.debug("Snapshot has no body, nothing to extract")
            return None

        ids = IdentifierAssigner()
        top: List[Node] = []
        stack: List[_WorkItem] = [(snapshot.root, None, top)]

        while stack:
            index, slot_context, siblings = stack.pop()
            node = snapshot.get(index)
            if node is None:
                continue

            if node.is_text:
                text = normalize_whitespace(node.text)
                if text:
                    siblings.append(TextNode(text=text))
                continue

            classification = classify_node(node, slot_context, strict=self.strict_pruning)
            if classification != Classification.KEEP:
                continue

            node_id = ids.next()
            synthetic, value = extract_value(node)
            element = ElementNode(
                tag_name=node.tag_name,
                node_id=node_id,
                attributes=synthetic + normalize_attributes(node.tag_name, node.attributes),
                value=value,
            )
            siblings.append(element)

            child_context = index if node.is_slot else slot_context
            for child_index in reversed(snapshot.child_indexes(index)):
                stack.append((child_index, child_context, element.children))

        logger.debug(f"Extracted {ids.issued} elements")

        root = top[0] if top else None
        return root if isinstance(root, ElementNode) else None
