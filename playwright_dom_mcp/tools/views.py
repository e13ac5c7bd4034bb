"""Data models for tools and results."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional, Type, Union
from pydantic import BaseModel, Field


class TextItem(BaseModel):
    """Text content returned by a tool."""
    type: Literal["text"] = "text"
    text: str


class ImageItem(BaseModel):
    """Image content returned by a tool."""
    type: Literal["image"] = "image"
    data: str = Field(description="Base64 encoded image data")
    mime_type: str = Field(default="image/png", alias="mimeType")

    model_config = {"populate_by_name": True}


ContentItem = Union[TextItem, ImageItem]


class ActionResult(BaseModel):
    """Result of executing a tool."""

    content: List[ContentItem] = Field(default_factory=list, description="Content items")
    is_error: bool = Field(default=False, alias="isError", description="Tool failed")

    model_config = {"populate_by_name": True}

    @classmethod
    def text(cls, text: str) -> "ActionResult":
        """Successful result carrying one text item."""
        return cls(content=[TextItem(text=text)])

    @classmethod
    def error(cls, message: str) -> "ActionResult":
        """Failed result carrying the error message."""
        return cls(content=[TextItem(text=message)], is_error=True)

    @property
    def text_content(self) -> str:
        """All text items joined by newlines."""
        return "\n".join(item.text for item in self.content if isinstance(item, TextItem))


# Tool parameter models

class NavigateParams(BaseModel):
    """Parameters for playwright_navigate."""
    url: str = Field(description="URL to navigate to")


class ScreenshotParams(BaseModel):
    """Parameters for playwright_screenshot."""
    name: str = Field(description="Name for the screenshot")
    selector: Optional[str] = Field(default=None, description="CSS selector for element to screenshot")
    width: int = Field(default=800, description="Width in pixels (default: 800)")
    height: int = Field(default=600, description="Height in pixels (default: 600)")


class SelectorParams(BaseModel):
    """Parameters for tools acting on one element."""
    selector: str = Field(description="CSS selector for the element")


class ClickParams(SelectorParams):
    """Parameters for playwright_click."""


class HoverParams(SelectorParams):
    """Parameters for playwright_hover."""


class FillParams(BaseModel):
    """Parameters for playwright_fill."""
    selector: str = Field(description="CSS selector for input field")
    value: str = Field(description="Value to fill")


class SelectParams(BaseModel):
    """Parameters for playwright_select."""
    selector: str = Field(description="CSS selector for element to select")
    value: str = Field(description="Value to select")


class EvaluateParams(BaseModel):
    """Parameters for playwright_evaluate."""
    script: str = Field(description="JavaScript code to execute")


class ExtractDomParams(BaseModel):
    """Parameters for playwright_extract_dom."""
    format: Optional[Literal["json", "markup"]] = Field(
        default=None,
        description="Output format: json (default) or markup",
    )


@dataclass
class ActionDefinition:
    """Definition of a registered tool."""

    name: str
    description: str
    param_model: Type[BaseModel]
    handler: Callable

    def get_schema(self) -> Dict[str, Any]:
        """Get the tool listing entry (name, description, inputSchema)."""
        schema = self.param_model.model_json_schema()
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": schema,
        }
