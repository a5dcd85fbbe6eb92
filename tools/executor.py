import logging
from collections.abc import Callable, Coroutine
from typing import Any

from core.errors import UnknownToolError
from core.types import ToolCall, ToolResult

logger = logging.getLogger(__name__)

# Type alias for async handler functions
Handler = Callable[..., Coroutine[Any, Any, Any]]


class ToolExecutor:
    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    @property
    def names(self) -> list[str]:
        return list(self._handlers)

    def register(self, name: str, handler: Handler) -> None:
        self._handlers[name] = handler

    async def execute(self, tool_call: ToolCall) -> ToolResult:
        """Run the handler registered under ``tool_call.name``.

        Unknown names raise UnknownToolError. Handler errors propagate as-is.
        """
        handler = self._handlers.get(tool_call.name)
        if not handler:
            raise UnknownToolError(tool_call.name)

        logger.info("Calling %s(%s)", tool_call.name, tool_call.args)
        result = await handler(**tool_call.args)
        return ToolResult(tool_call_id=tool_call.id, content=str(result))
