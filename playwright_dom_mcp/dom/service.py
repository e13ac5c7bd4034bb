"""DOM extraction pipeline: capture, compress, serialize."""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from playwright_dom_mcp.core.config import DOMConfig
from playwright_dom_mcp.core.logging import log_dom_extraction
from playwright_dom_mcp.dom.extractor import DOMExtractor
from playwright_dom_mcp.dom.serializer import DOMSerializer
from playwright_dom_mcp.dom.snapshot import DOMSnapshot, capture_snapshot
from playwright_dom_mcp.dom.views import OutputFormat

logger = logging.getLogger(__name__)


class DOMService:
    """
    Produces the text payload for one DOM extraction request.

    Each call captures a fresh snapshot and builds a fresh tree; nothing is
    cached between calls.
    """

    def __init__(self, config: Optional[DOMConfig] = None):
        self.config = config or DOMConfig()
        self.extractor = DOMExtractor(strict_pruning=self.config.strict_pruning)
        self.serializer = DOMSerializer(
            indent=self.config.indent,
            id_attribute=self.config.id_attribute,
        )

    def compress(
        self,
        snapshot: DOMSnapshot,
        output_format: Union[OutputFormat, str, None] = None,
    ) -> str:
        """
        Turn a captured snapshot into a serialized payload.

        Args:
            snapshot: Captured document
            output_format: json or markup (defaults to the configured format)

        Returns:
            Serialized payload
        """
        output_format = OutputFormat(output_format or self.config.output_format)
        tree = self.extractor.extract(snapshot)
        payload = self.serializer.serialize(tree, output_format)

        log_dom_extraction(
            element_count=tree.count_elements() if tree else 0,
            payload_chars=len(payload),
            output_format=output_format.value,
            max_chars=self.config.max_output_chars,
        )

        if self.config.dump_path:
            self._dump(payload)

        return payload

    async def extract(
        self,
        page: Any,
        output_format: Union[OutputFormat, str, None] = None,
    ) -> str:
        """
        Capture the page's DOM and return the serialized payload.

        Args:
            page: Page to capture (anything with an async ``evaluate``)
            output_format: json or markup

        Raises:
            UnsupportedElementError: If the document contains an iframe
            SnapshotError: If the captured payload is malformed
        """
        snapshot = await capture_snapshot(page)
        return self.compress(snapshot, output_format)

    def _dump(self, payload: str) -> None:
        path = Path(self.config.dump_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
            logger.debug(f"DOM payload written to {path}")
        except OSError as e:
            logger.warning(f"Failed to write DOM payload to {path}: {e}")
