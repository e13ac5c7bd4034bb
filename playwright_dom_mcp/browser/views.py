"""Data models for browser operations."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List


@dataclass
class EvaluationResult:
    """Outcome of running a script in the page."""
    result: Any = None
    logs: List[str] = field(default_factory=list)


@dataclass
class Screenshot:
    """A named screenshot kept for the resource surface."""
    name: str
    data: str  # base64 encoded PNG
    width: int
    height: int
    selector: str = ""
    taken_at: datetime = field(default_factory=datetime.now)

    mime_type: str = "image/png"
