"""Resource surface: the console log and stored screenshots."""

import base64
from typing import List
from urllib.parse import quote, unquote

import mcp.types as types
from mcp.server.lowlevel.helper_types import ReadResourceContents

from playwright_dom_mcp.core.exceptions import ResourceNotFoundError

CONSOLE_URI = "console://logs"
SCREENSHOT_SCHEME = "screenshot://"


def screenshot_uri(name: str) -> str:
    """URI of a stored screenshot; the name is percent-encoded."""
    return SCREENSHOT_SCHEME + quote(name, safe="")


def list_resources(browser_session) -> List[types.Resource]:
    """The console log followed by every stored screenshot."""
    resources = [
        types.Resource(
            uri=CONSOLE_URI,
            name="Browser console logs",
            mimeType="text/plain",
        )
    ]
    for name, shot in browser_session.screenshots.items():
        resources.append(types.Resource(
            uri=screenshot_uri(name),
            name=f"Screenshot: {name}",
            mimeType=shot.mime_type,
        ))
    return resources


def read_resource(browser_session, uri: str) -> List[ReadResourceContents]:
    """
    Read one resource.

    Raises:
        ResourceNotFoundError: Unknown URI or screenshot name
    """
    if uri == CONSOLE_URI:
        return [ReadResourceContents(
            content="\n".join(browser_session.console_logs),
            mime_type="text/plain",
        )]

    if uri.startswith(SCREENSHOT_SCHEME):
        name = unquote(uri[len(SCREENSHOT_SCHEME):])
        shot = browser_session.get_screenshot(name)
        if shot is not None:
            return [ReadResourceContents(
                content=base64.b64decode(shot.data),
                mime_type=shot.mime_type,
            )]

    raise ResourceNotFoundError(uri)
