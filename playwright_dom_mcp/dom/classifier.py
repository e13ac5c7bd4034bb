"""Per-element keep/skip/prune decisions."""

from enum import Enum
from typing import FrozenSet, Optional

from playwright_dom_mcp.core.exceptions import UnsupportedElementError
from playwright_dom_mcp.dom.snapshot import SnapshotNode


class Classification(str, Enum):
    """Outcome of classifying one element."""
    KEEP = "keep"
    SKIP = "skip"
    PRUNE = "prune"


NOISE_TAGS: FrozenSet[str] = frozenset({
    "STYLE", "SCRIPT", "NOSCRIPT", "LINK", "META", "HEAD", "CODE", "SVG",
})
STRICT_NOISE_TAGS: FrozenSet[str] = NOISE_TAGS | {"FONT", "BR"}

# Attribute values that hide an element and its subtree
HIDING_ATTRIBUTES = (
    ("type", "hidden"),
    ("disabled", "true"),
    ("aria-hidden", "true"),
)

UNSUPPORTED_TAGS: FrozenSet[str] = frozenset({"IFRAME"})


def noise_tags(strict: bool = True) -> FrozenSet[str]:
    """Tags whose elements are pruned with their whole subtree."""
    return STRICT_NOISE_TAGS if strict else NOISE_TAGS


def classify_node(
    node: SnapshotNode,
    slot_context: Optional[int],
    strict: bool = True,
) -> Classification:
    """
    Decide what to do with an element during the tree walk.

    Args:
        node: Element being visited
        slot_context: Snapshot index of the slot currently traversed, if any
        strict: Use the extended noise tag set

    Returns:
        PRUNE for noise and hidden elements, SKIP for elements projected
        into a slot other than the current one, KEEP otherwise

    Raises:
        UnsupportedElementError: For iframes
    """
    tag = node.tag
    if tag in noise_tags(strict):
        return Classification.PRUNE
    for name, hidden_value in HIDING_ATTRIBUTES:
        if node.get_attribute(name) == hidden_value:
            return Classification.PRUNE

    if node.assigned_slot is not None and node.assigned_slot != slot_context:
        return Classification.SKIP

    if tag in UNSUPPORTED_TAGS:
        raise UnsupportedElementError(tag)

    return Classification.KEEP
