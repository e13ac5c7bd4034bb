"""Serialization of compressed DOM trees."""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from playwright_dom_mcp.core.exceptions import DOMSerializationError
from playwright_dom_mcp.dom.views import ElementNode, Node, OutputFormat, TextNode

logger = logging.getLogger(__name__)


class DOMSerializer:
    """
    Renders a compressed tree as JSON or as indented pseudo-markup.

    Markup output puts each element's opening tag, children and closing
    tag on separate lines. The indent grows by one unit every two levels
    of depth. Links holding a single text child stay on one line.
    """

    def __init__(self, indent: str = "  ", id_attribute: str = "_id"):
        """
        Initialize the serializer.

        Args:
            indent: Indent unit for markup output
            id_attribute: Attribute name under which node identifiers are rendered
        """
        self.indent = indent
        self.id_attribute = id_attribute

    def serialize(
        self,
        tree: Optional[ElementNode],
        output_format: Union[OutputFormat, str] = OutputFormat.JSON,
    ) -> str:
        """
        Serialize a tree.

        Args:
            tree: Root element, or None for an empty extraction
            output_format: json or markup

        Returns:
            Text payload
        """
        try:
            output_format = OutputFormat(output_format)
        except ValueError:
            raise DOMSerializationError(f"Unknown output format: {output_format}")

        if output_format == OutputFormat.MARKUP:
            return self.to_markup(tree)
        return self.to_json(tree)

    def _attributes(self, element: ElementNode) -> List[Tuple[str, str]]:
        if element.node_id is None:
            return list(element.attributes)
        return [(self.id_attribute, element.node_id)] + list(element.attributes)

    # Structured mode

    def to_dict(self, node: Node) -> Dict[str, Any]:
        """Convert a node and its subtree to plain dicts."""
        if isinstance(node, TextNode):
            return {"type": "text", "text": node.text}
        return {
            "type": "element",
            "tagName": node.tag_name,
            "attributes": [
                {"name": name, "value": value}
                for name, value in self._attributes(node)
            ],
            "children": [self.to_dict(child) for child in node.children],
            "value": node.value,
        }

    def to_json(self, tree: Optional[ElementNode]) -> str:
        """Compact JSON encoding of the tree."""
        data = self.to_dict(tree) if tree is not None else None
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))

    # Pseudo-markup mode

    def _open_tag(self, element: ElementNode) -> str:
        tag = element.tag_name.lower()
        parts = [tag] + [
            f'{name}="{value.replace(chr(34), "&quot;")}"'
            for name, value in self._attributes(element)
        ]
        return f"<{' '.join(parts)}>"

    def _render(self, node: Node, depth: int, lines: List[str]) -> None:
        prefix = self.indent * (depth // 2)

        if isinstance(node, TextNode):
            lines.append(f"{prefix}{node.text}")
            return

        tag = node.tag_name.lower()
        if tag == "a" and len(node.children) == 1 and isinstance(node.children[0], TextNode):
            lines.append(f"{prefix}{self._open_tag(node)}{node.children[0].text}</{tag}>")
            return

        lines.append(f"{prefix}{self._open_tag(node)}")
        for child in node.children:
            self._render(child, depth + 1, lines)
        lines.append(f"{prefix}</{tag}>")

    def to_markup(self, tree: Optional[ElementNode]) -> str:
        """Indented pseudo-markup rendering of the tree."""
        if tree is None:
            return ""
        lines: List[str] = []
        self._render(tree, 0, lines)
        return "\n".join(lines)
