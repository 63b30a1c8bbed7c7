"""Tool registry: pairs each MCP tool descriptor with the handler that runs it."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp.types import CallToolResult, TextContent, Tool
from pydantic import BaseModel

from mcp_server_harvest.errors import UnknownToolError, wrap_tool_error
from mcp_server_harvest.logging_config import get_logger
from mcp_server_harvest.resources import HarvestAPI
from mcp_server_harvest.resources.base import Operation, ResourceClient

Handler = Callable[[Dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ToolRegistration:
    tool: Tool
    handler: Handler


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def input_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """JSON schema advertised to MCP clients. Handlers validate again on call."""
    schema = model.model_json_schema()
    schema.pop("title", None)
    schema.setdefault("type", "object")
    schema.setdefault("properties", {})
    return schema


class ToolRegistry:
    """Registered tools in registration order, looked up by name."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._tools: Dict[str, ToolRegistration] = {}
        self.logger = get_logger(__name__, logger)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, tool: Tool, handler: Handler) -> ToolRegistration:
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        registration = ToolRegistration(tool, handler)
        self._tools[tool.name] = registration
        return registration

    def list_tools(self) -> List[Tool]:
        return [registration.tool for registration in self._tools.values()]

    async def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        """Run tool ``name``. Never raises: failures come back as ``isError`` results."""
        try:
            registration = self._tools.get(name)
            if registration is None:
                raise UnknownToolError(name)
            result = await registration.handler(arguments or {})
        except Exception as e:
            error = wrap_tool_error(e, name)
            self.logger.error("Tool %s failed: %s", name, error.message)
            return text_result(f"Error: {error.message}", is_error=True)

        return text_result(json.dumps(result, indent=2))


def operation_handler(client: ResourceClient, op: Operation) -> Handler:
    async def handler(arguments: Dict[str, Any]) -> Any:
        result = await client.invoke(op.key, arguments)
        if op.confirmation is not None:
            return {"message": op.confirmation.format(**arguments)}
        return result

    return handler


def build_registry(api: HarvestAPI, logger: Optional[logging.Logger] = None) -> ToolRegistry:
    """Register one tool per Harvest operation."""
    registry = ToolRegistry(logger=logger)
    for client, op in api.operations():
        tool = Tool(name=op.tool_name, description=op.description, inputSchema=input_schema(op.input_schema))
        registry.register(tool, operation_handler(client, op))
    return registry
