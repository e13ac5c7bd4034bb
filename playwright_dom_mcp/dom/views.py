"""Data models for the compressed DOM tree."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union


class OutputFormat(str, Enum):
    """Serialization formats for an extracted tree."""
    JSON = "json"
    MARKUP = "markup"


@dataclass
class TextNode:
    """A whitespace-collapsed, non-empty run of text."""
    text: str


@dataclass
class ElementNode:
    """A kept element of the compressed tree."""

    tag_name: str
    node_id: Optional[str] = None
    attributes: List[Tuple[str, str]] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)
    value: Union[str, int, float, None] = None

    def get_attribute(self, name: str) -> Optional[str]:
        """Get the first value recorded for an attribute."""
        for attr_name, attr_value in self.attributes:
            if attr_name == name:
                return attr_value
        return None

    def iter_elements(self) -> Iterator["ElementNode"]:
        """Iterate over this element and all descendant elements in preorder."""
        stack: List[ElementNode] = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(
                child for child in reversed(element.children)
                if isinstance(child, ElementNode)
            )

    def count_elements(self) -> int:
        """Count this element and all descendant elements."""
        return sum(1 for _ in self.iter_elements())


Node = Union[TextNode, ElementNode]
