"""Attribute normalization and control value extraction."""

import re
from typing import List, Optional, Sequence, Tuple, Union

from playwright_dom_mcp.dom.snapshot import ControlKind, SnapshotNode

_WHITESPACE = re.compile(r"\s+")

Attribute = Tuple[str, str]
ControlValue = Union[str, int, float, None]


def normalize_whitespace(text: Optional[str]) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


def _is_boilerplate(tag_name: str, name: str, value: str) -> bool:
    if name == "role" and value == "presentation":
        return True
    return tag_name.upper() == "BUTTON" and name == "type" and value == "button"


def normalize_attributes(
    tag_name: str,
    attributes: Sequence[Tuple[str, Optional[str]]],
) -> List[Attribute]:
    """
    Filter and clean an element's attributes, keeping DOM order.

    Absent and blank values are dropped, as are role="presentation" and
    type="button" on buttons. Kept values are whitespace-collapsed.
    """
    normalized = []
    for name, raw_value in attributes:
        if raw_value is None:
            continue
        value = raw_value.strip()
        if not value or _is_boilerplate(tag_name, name, value):
            continue
        normalized.append((name, normalize_whitespace(value)))
    return normalized


def extract_value(node: SnapshotNode) -> Tuple[List[Attribute], ControlValue]:
    """
    Compute the live value of a form-control-like element.

    Inputs report their value as a synthetic ``value`` attribute. Buttons,
    textareas, list items and options report it as the node value: strings
    when non-blank, numbers unchanged.

    Returns:
        Tuple of (synthetic attributes, node value)
    """
    if node.control is None:
        return [], None

    raw = node.value
    if node.control == ControlKind.INPUT:
        text = normalize_whitespace(raw if isinstance(raw, str) else None)
        if text:
            return [("value", text)], None
        return [], None

    if isinstance(raw, str):
        return [], normalize_whitespace(raw) or None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return [], raw
    return [], None
