"""Schema validation helpers.

Wraps pydantic validation so every failure surfaces as an
InputValidationError carrying ``path: message`` strings, e.g.
``external_reference.permalink: must be a valid URL``.
"""

from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from mcp_server_harvest.errors import InputValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_error(error: Dict[str, Any]) -> str:
    """Render one pydantic error entry as ``path: message``."""
    message = error["msg"]
    if error.get("type") == "value_error" and error.get("ctx", {}).get("error") is not None:
        # drop pydantic's "Value error, " prefix for messages raised by our validators
        message = str(error["ctx"]["error"])
    path = ".".join(str(part) for part in error.get("loc", ()))
    return f"{path}: {message}" if path else message


def format_errors(exc: ValidationError) -> List[str]:
    return [format_error(error) for error in exc.errors()]


def validate(schema: Type[ModelT], raw: Any, context: str) -> ModelT:
    """Validate ``raw`` against ``schema`` or raise InputValidationError.

    ``None`` is treated as an empty argument object so optional query
    schemas can be called without arguments.
    """
    try:
        return schema.model_validate({} if raw is None else raw)
    except ValidationError as e:
        errors = format_errors(e)
        raise InputValidationError(
            f"Invalid parameters for {context}: {', '.join(errors)}", errors
        ) from e
