"""Error types and translation helpers for the Harvest MCP server."""

import json
from typing import Any, List, Optional

import httpx


class HarvestError(Exception):
    """Base class for every error surfaced by a tool call."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(HarvestError):
    """Raised at startup when the environment is incomplete or invalid."""


class InputValidationError(HarvestError):
    """Arguments did not satisfy a schema. Never triggers a network call."""

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class HarvestAPIError(HarvestError):
    """The request completed but Harvest answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.response = response


class InvalidResponseError(HarvestAPIError):
    """A successful response whose body did not match the expected shape."""

    def __init__(self, message: str, status: Optional[int] = None, response: Any = None) -> None:
        super().__init__(message, status=status, code="invalid_response", response=response)


class HarvestTransportError(HarvestError):
    """The request could not be completed (timeout, DNS, connection refused)."""


class UnknownToolError(HarvestError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolExecutionError(HarvestError):
    """Unexpected failure while running a tool, tagged with the tool name."""

    def __init__(self, message: str, tool_name: str, original: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.tool_name = tool_name
        self.original = original


def _response_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def error_from_response(response: httpx.Response) -> HarvestAPIError:
    """Translate a non-2xx Harvest response into a HarvestAPIError."""
    status = response.status_code
    status_text = response.reason_phrase
    data = _response_payload(response)

    if status == 401:
        return HarvestAPIError(
            "Authentication failed: Invalid access token or account ID", status, "auth_error", data
        )
    if status == 403:
        return HarvestAPIError("Access forbidden: Insufficient permissions", status, "permission_error", data)
    if status == 404:
        return HarvestAPIError("Resource not found", status, "not_found", data)
    if status == 429:
        retry_after = response.headers.get("retry-after") or "unknown"
        return HarvestAPIError(
            f"Rate limit exceeded. Retry after {retry_after} seconds", status, "rate_limit", data
        )
    if status == 422:
        return HarvestAPIError(
            "Validation failed: " + json.dumps(data, separators=(",", ":")),
            status,
            "validation_error",
            data,
        )
    if status in (500, 502, 503, 504):
        return HarvestAPIError(f"Server error ({status}): Please try again later", status, "server_error", data)
    return HarvestAPIError(f"HTTP {status}: {status_text}", status, "unknown_error", data)


def wrap_tool_error(error: BaseException, tool_name: str) -> HarvestError:
    """Pass validation and upstream errors through, wrap everything else with the tool name."""
    if isinstance(error, (InputValidationError, HarvestAPIError, UnknownToolError, ToolExecutionError)):
        return error

    detail = str(error) or type(error).__name__
    return ToolExecutionError(f"Failed to execute {tool_name}: {detail}", tool_name, error)
