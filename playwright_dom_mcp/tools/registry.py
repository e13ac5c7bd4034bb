"""Tool registry for managing browser tools."""

import asyncio
import inspect
import logging
from typing import Any, Callable, Dict, List, Optional, Type, Union
from pydantic import BaseModel, ValidationError

from playwright_dom_mcp.tools.views import ActionResult, ActionDefinition
from playwright_dom_mcp.core.exceptions import (
    ActionError,
    ActionNotFoundError,
    ActionValidationError,
)

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry for browser tools.

    Manages tool registration, argument validation, and execution.
    Produces the tool listing with JSON input schemas.
    """

    def __init__(self, exclude_actions: Optional[List[str]] = None):
        """
        Initialize the tool registry.

        Args:
            exclude_actions: List of tool names to exclude
        """
        self._actions: Dict[str, ActionDefinition] = {}
        self._exclude_actions = set(exclude_actions or [])

    def register(
        self,
        name: str,
        handler: Callable,
        param_model: Type[BaseModel],
        description: str = "",
    ) -> None:
        """
        Register a tool.

        Args:
            name: Tool name
            handler: Sync or async function to execute
            param_model: Pydantic model for parameters
            description: Human-readable description
        """
        if name in self._exclude_actions:
            logger.debug(f"Skipping excluded tool: {name}")
            return

        self._actions[name] = ActionDefinition(
            name=name,
            description=description or f"Execute {name}",
            param_model=param_model,
            handler=handler,
        )
        logger.debug(f"Registered tool: {name}")

    def action(
        self,
        name: str,
        param_model: Type[BaseModel],
        description: str = "",
    ):
        """
        Decorator for registering tools.

        Usage:
            @registry.action("playwright_navigate", NavigateParams, "Navigate to a URL")
            async def navigate(params: NavigateParams, browser_session: BrowserSession):
                ...
        """
        def decorator(func: Callable):
            self.register(
                name=name,
                handler=func,
                description=description,
                param_model=param_model,
            )
            return func
        return decorator

    def get_action(self, name: str) -> Optional[ActionDefinition]:
        """Get a tool definition by name."""
        return self._actions.get(name)

    def get_actions_schema(self) -> List[Dict[str, Any]]:
        """Get the listing entry of every tool, in registration order."""
        return [definition.get_schema() for definition in self._actions.values()]

    async def execute(
        self,
        action_name: str,
        params: Union[Dict[str, Any], BaseModel, None],
        browser_session: Optional[Any] = None,
        **context
    ) -> ActionResult:
        """
        Execute a tool.

        Args:
            action_name: Name of the tool to execute
            params: Tool arguments (dict or Pydantic model)
            browser_session: Browser session passed to the handler
            **context: Additional context to pass to handler

        Returns:
            ActionResult from the handler

        Raises:
            ActionNotFoundError: Unknown tool name
            ActionValidationError: Arguments do not match the parameter model
            ActionError: Handler raised
        """
        definition = self._actions.get(action_name)
        if not definition:
            raise ActionNotFoundError(action_name)

        if params is None:
            params = {}
        if isinstance(params, dict):
            try:
                params = definition.param_model(**params)
            except ValidationError as e:
                raise ActionValidationError(action_name, str(e))

        handler_kwargs = {}
        sig = inspect.signature(definition.handler)

        for param_name in sig.parameters:
            if param_name == "params":
                handler_kwargs["params"] = params
            elif param_name in ("browser", "browser_session", "session"):
                if browser_session is None:
                    raise ActionError(
                        action_name,
                        "Browser session required but not provided"
                    )
                handler_kwargs[param_name] = browser_session
            elif param_name in context:
                handler_kwargs[param_name] = context[param_name]
            elif hasattr(params, param_name):
                handler_kwargs[param_name] = getattr(params, param_name)

        try:
            logger.debug(f"Executing tool: {action_name}")

            result = definition.handler(**handler_kwargs)
            if asyncio.iscoroutine(result):
                result = await result

            if result is None:
                return ActionResult()
            elif isinstance(result, ActionResult):
                return result
            elif isinstance(result, str):
                return ActionResult.text(result)
            else:
                return ActionResult.text(str(result))

        except Exception as e:
            logger.error(f"Tool {action_name} failed: {e}")
            raise ActionError(action_name, str(e))

    def __len__(self) -> int:
        """Get number of registered tools."""
        return len(self._actions)

    def __contains__(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._actions
