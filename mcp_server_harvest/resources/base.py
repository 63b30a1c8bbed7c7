"""Validated REST operation pipeline shared by every resource family.

A resource family is a table of ``Operation`` rows. ``ResourceClient``
runs any row the same way: validate the arguments, build the request,
issue one HTTP call, optionally validate the response, return the body.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from mcp_server_harvest.config import HarvestConfig
from mcp_server_harvest.errors import InputValidationError, InvalidResponseError
from mcp_server_harvest.harvest_client import HarvestClient
from mcp_server_harvest.logging_config import get_logger
from mcp_server_harvest.pagination import (
    MAX_PER_PAGE,
    PaginatedResponse,
    build_paginated_response,
    build_pagination_params,
    get_all_pages,
)
from mcp_server_harvest.validation import format_errors, validate

Clock = Callable[[], datetime]
PrepareHook = Callable[["ResourceClient", "Operation", Dict[str, Any]], Dict[str, Any]]
PathResolver = Callable[[Dict[str, Any]], str]


@dataclass(frozen=True)
class Operation:
    """One REST endpoint exposed as one tool."""

    key: str
    tool_name: str
    description: str
    method: str
    path: str
    input_schema: Type[BaseModel]
    response_schema: Optional[Type[BaseModel]] = None
    path_params: Tuple[str, ...] = ()
    send_body: bool = False
    # runs on the dumped arguments before the request is built
    prepare: Optional[PrepareHook] = None
    # picks the path template from the arguments; overrides ``path``
    resolve_path: Optional[PathResolver] = None
    # list key in the response envelope, for logging and collect_all
    collection: Optional[str] = None
    # DELETE confirmation, formatted with the call arguments
    confirmation: Optional[str] = None


@dataclass(frozen=True)
class Resource:
    name: str
    noun: str
    operations: Tuple[Operation, ...] = field(default_factory=tuple)

    def operation(self, key: str) -> Operation:
        for op in self.operations:
            if op.key == key:
                return op
        raise KeyError(f"{self.name} has no operation {key!r}")


def explicit_nulls(model: BaseModel) -> Dict[str, Any]:
    """Fields the caller set to ``None`` on purpose, keyed by wire name.

    Harvest clears a field when it receives ``null`` for it.
    """
    fields = type(model).model_fields
    return {
        fields[name].alias or name: None
        for name in model.model_fields_set
        if name in fields and getattr(model, name) is None
    }


def query_params(values: Dict[str, Any]) -> Dict[str, Any]:
    """Render validated query values as URL params.

    ``None`` is dropped, booleans become ``true``/``false`` and
    ``page``/``per_page`` go through the pagination builder.
    """
    params: Dict[str, Any] = {}
    for key, value in values.items():
        if value is None or key in ("page", "per_page"):
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = value
    params.update(build_pagination_params(values.get("page"), values.get("per_page")))
    return params


class ResourceClient:
    """Runs the operations of one resource family against Harvest."""

    def __init__(
        self,
        resource: Resource,
        http: HarvestClient,
        config: HarvestConfig,
        *,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.resource = resource
        self.http = http
        self.config = config
        self.clock = clock or datetime.now
        self.logger = get_logger(__name__, logger)

    def now(self) -> datetime:
        return self.clock()

    def today(self) -> date:
        return self.clock().date()

    def _build_path(self, op: Operation, values: Dict[str, Any]) -> str:
        template = op.resolve_path(values) if op.resolve_path else op.path
        return template.format(**{name: values[name] for name in op.path_params})

    async def _send(self, op: Operation, path: str, payload: Dict[str, Any]) -> Any:
        if op.method == "GET":
            return await self.http.get(path, params=query_params(payload))
        if op.method == "DELETE":
            return await self.http.delete(path)
        body = payload if op.send_body else None
        if op.method == "POST":
            return await self.http.post(path, body)
        if op.method == "PATCH":
            return await self.http.patch(path, body)
        raise ValueError(f"Unsupported HTTP method: {op.method}")

    def _check_response(self, op: Operation, result: Any) -> None:
        if op.response_schema is None or not self.config.validate_responses or result is None:
            return
        try:
            op.response_schema.model_validate(result)
        except ValidationError as e:
            self.logger.error(
                "%s: response failed validation: %s", op.tool_name, "; ".join(format_errors(e)[:5])
            )
            raise InvalidResponseError(
                f"Invalid {self.resource.noun} data received from Harvest API", response=result
            ) from e

    def _summary(self, op: Operation, values: Dict[str, Any], result: Any) -> str:
        if op.collection and isinstance(result, dict):
            items = result.get(op.collection) or []
            return (
                f"count={len(items)} page={result.get('page')}"
                f" total_pages={result.get('total_pages')} total_entries={result.get('total_entries')}"
            )
        if isinstance(result, dict) and "id" in result:
            return f"id={result['id']}"
        ids = [f"{name}={values[name]}" for name in op.path_params]
        return " ".join(ids) or "ok"

    async def invoke(self, key: str, arguments: Optional[Dict[str, Any]] = None) -> Any:
        """Run operation ``key`` with the raw tool ``arguments``."""
        op = self.resource.operation(key)
        try:
            model = validate(op.input_schema, arguments, op.tool_name)
        except InputValidationError as e:
            self.logger.warning("%s: %s", op.tool_name, e)
            raise

        values = model.model_dump(by_alias=True, exclude_none=True)
        if op.send_body:
            values.update(explicit_nulls(model))
        path = self._build_path(op, values)
        if op.prepare is not None:
            values = op.prepare(self, op, values)
        payload = {k: v for k, v in values.items() if k not in op.path_params}

        self.logger.debug("%s: %s %s", op.tool_name, op.method, path)
        result = await self._send(op, path, payload)
        self._check_response(op, result)
        self.logger.info("%s: %s %s -> %s", op.tool_name, op.method, path, self._summary(op, values, result))
        return result

    async def collect_all(self, key: str, arguments: Optional[Dict[str, Any]] = None, per_page: int = MAX_PER_PAGE) -> List[Any]:
        """Fetch every page of list operation ``key`` and return all items in order."""
        op = self.resource.operation(key)
        if op.collection is None:
            raise ValueError(f"{op.tool_name} does not return a collection")
        base = dict(arguments or {})

        async def fetch_page(page: int, size: int) -> PaginatedResponse:
            result = await self.invoke(key, {**base, "page": page, "per_page": size})
            return build_paginated_response(result.get(op.collection) or [], result)

        return await get_all_pages(fetch_page, per_page)


def crud_operations(
    singular: str,
    plural: str,
    label: str,
    *,
    record: Type[BaseModel],
    envelope: Type[BaseModel],
    create: Type[BaseModel],
    update: Type[BaseModel],
    query: Type[BaseModel],
    identifier: Type[BaseModel],
    descriptions: Dict[str, str],
) -> Tuple[Operation, ...]:
    """Build the list/get/create/update/delete rows for ``/<plural>``.

    get and delete take ``<singular>_id``; update takes ``id``.
    """
    collection_path = f"/{plural}"
    id_param = f"{singular}_id"
    return (
        Operation(
            "list", f"list_{plural}", descriptions["list"], "GET", collection_path, query,
            response_schema=envelope, collection=plural,
        ),
        Operation(
            "get", f"get_{singular}", descriptions["get"], "GET", f"{collection_path}/{{{id_param}}}", identifier,
            response_schema=record, path_params=(id_param,),
        ),
        Operation(
            "create", f"create_{singular}", descriptions["create"], "POST", collection_path, create,
            response_schema=record, send_body=True,
        ),
        Operation(
            "update", f"update_{singular}", descriptions["update"], "PATCH", f"{collection_path}/{{id}}", update,
            response_schema=record, path_params=("id",), send_body=True,
        ),
        Operation(
            "delete", f"delete_{singular}", descriptions["delete"], "DELETE", f"{collection_path}/{{{id_param}}}",
            identifier, path_params=(id_param,), confirmation=f"{label} {{{id_param}}} deleted successfully",
        ),
    )
