"""Custom exceptions for the browser DOM server."""

from typing import Optional


class BrowserAutomationError(Exception):
    """Base exception for all browser automation errors."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        recoverable: bool = True
    ):
        self.message = message
        self.details = details
        self.recoverable = recoverable
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class BrowserError(BrowserAutomationError):
    """Errors related to browser operations."""
    pass


class NavigationError(BrowserError):
    """Errors during page navigation."""
    pass


class ElementNotFoundError(BrowserError):
    """Element could not be found in the page."""

    def __init__(
        self,
        selector: str,
        message: Optional[str] = None,
        **kwargs
    ):
        self.selector = selector
        msg = message or f"Element not found: {selector}"
        super().__init__(msg, **kwargs)


class ActionError(BrowserAutomationError):
    """Errors related to tool execution."""

    def __init__(
        self,
        action_name: str,
        message: str,
        params: Optional[dict] = None,
        **kwargs
    ):
        self.action_name = action_name
        self.params = params
        super().__init__(f"Action '{action_name}' failed: {message}", **kwargs)


class ToolFailedError(BrowserAutomationError):
    """A tool ran and reported failure; the message is its output text."""

    def __init__(self, tool_name: str, message: str, **kwargs):
        self.tool_name = tool_name
        super().__init__(message, **kwargs)


class ActionNotFoundError(ActionError):
    """Requested tool is not registered."""

    def __init__(self, action_name: str, **kwargs):
        super().__init__(
            action_name,
            f"Action '{action_name}' not found in registry",
            recoverable=False,
            **kwargs
        )


class ActionValidationError(ActionError):
    """Tool arguments failed validation."""

    def __init__(
        self,
        action_name: str,
        validation_error: str,
        **kwargs
    ):
        self.validation_error = validation_error
        super().__init__(
            action_name,
            f"Invalid parameters: {validation_error}",
            **kwargs
        )


class DOMError(BrowserAutomationError):
    """Errors related to DOM extraction and serialization."""
    pass


class DOMExtractionError(DOMError):
    """Failed to extract the DOM tree."""
    pass


class UnsupportedElementError(DOMExtractionError):
    """The document contains an element the extractor cannot traverse."""

    def __init__(self, tag_name: str, **kwargs):
        self.tag_name = tag_name
        super().__init__(
            f"{tag_name} not supported",
            recoverable=False,
            **kwargs
        )


class SnapshotError(DOMExtractionError):
    """The captured DOM snapshot payload is malformed."""
    pass


class DOMSerializationError(DOMError):
    """Failed to serialize an extracted tree."""
    pass


class SessionError(BrowserAutomationError):
    """Errors related to session management."""
    pass


class SessionExpiredError(SessionError):
    """Browser session has expired or been closed."""

    def __init__(self, session_id: str, **kwargs):
        self.session_id = session_id
        super().__init__(
            f"Session '{session_id}' has expired or been closed",
            recoverable=False,
            **kwargs
        )


class ResourceNotFoundError(BrowserAutomationError):
    """A requested resource URI does not exist."""

    def __init__(self, uri: str, **kwargs):
        self.uri = uri
        super().__init__(f"Resource not found: {uri}", recoverable=False, **kwargs)
