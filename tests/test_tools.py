"""
Tests for the tool registry and the tool result envelope
"""

import json

import httpx
import pytest
from mcp.types import Tool

import samples
from mcp_server_harvest.harvest_client import HarvestClient
from mcp_server_harvest.resources import RESOURCES, HarvestAPI
from mcp_server_harvest.schemas.client import CreateClient
from mcp_server_harvest.tools import ToolRegistry, build_registry, input_schema, text_result


def payload(result):
    return json.loads(result.content[0].text)


class TestRegistry:
    """Tests for registration and listing."""

    def test_one_tool_per_operation(self, registry):
        assert len(registry) == sum(len(resource.operations) for resource in RESOURCES)

    def test_listing_order(self, registry):
        names = [tool.name for tool in registry.list_tools()]

        assert names[:6] == [
            "get_company",
            "list_clients",
            "get_client",
            "create_client",
            "update_client",
            "delete_client",
        ]
        assert names[-4:] == [
            "get_time_report",
            "get_expense_report",
            "get_project_budget_report",
            "get_uninvoiced_report",
        ]

    @pytest.mark.parametrize(
        "name",
        [
            "list_project_task_assignments",
            "delete_project_task_assignment",
            "get_current_user",
            "list_expense_categories",
            "start_timer",
            "stop_timer",
            "restart_timer",
            "create_estimate",
            "update_invoice",
        ],
    )
    def test_tool_is_registered(self, registry, name):
        assert name in registry

    def test_every_tool_has_a_description_and_object_schema(self, registry):
        for tool in registry.list_tools():
            assert tool.description
            assert tool.inputSchema["type"] == "object"
            assert "properties" in tool.inputSchema

    def test_duplicate_registration(self):
        registry = ToolRegistry()
        tool = Tool(name="ping", description="Ping", inputSchema={"type": "object", "properties": {}})

        async def handler(arguments):
            return {}

        registry.register(tool, handler)
        with pytest.raises(ValueError, match="Tool already registered: ping"):
            registry.register(tool, handler)


class TestInputSchema:
    """Tests for input_schema()."""

    def test_properties_and_required(self):
        schema = input_schema(CreateClient)

        assert "title" not in schema
        assert schema["required"] == ["name"]
        assert schema["properties"]["currency"]["default"] == "USD"

    def test_query_schema_uses_wire_names(self, registry):
        tool = next(tool for tool in registry.list_tools() if tool.name == "list_time_entries")

        assert "from" in tool.inputSchema["properties"]
        assert "from_" not in tool.inputSchema["properties"]

    def test_argument_free_tool(self, registry):
        tool = next(tool for tool in registry.list_tools() if tool.name == "get_current_user")

        assert tool.inputSchema["properties"] == {}


class TestCall:
    """Tests for ToolRegistry.call()."""

    @pytest.mark.asyncio
    async def test_success_is_pretty_json(self, registry, fake_harvest):
        fake_harvest.add("GET", "/clients/5735776", samples.client())

        result = await registry.call("get_client", {"client_id": 5735776})

        assert result.isError is False
        assert result.content[0].text == json.dumps(samples.client(), indent=2)

    @pytest.mark.asyncio
    async def test_delete_returns_confirmation(self, registry, fake_harvest):
        fake_harvest.add("DELETE", "/clients/5")

        result = await registry.call("delete_client", {"client_id": 5})

        assert payload(result) == {"message": "Client 5 deleted successfully"}

    @pytest.mark.asyncio
    async def test_delete_task_assignment_names_project(self, registry, fake_harvest):
        fake_harvest.add("DELETE", "/projects/9/task_assignments/3")

        result = await registry.call("delete_project_task_assignment", {"project_id": 9, "task_assignment_id": 3})

        assert payload(result) == {"message": "Project task assignment 3 deleted successfully from project 9"}

    @pytest.mark.asyncio
    async def test_delete_time_entry(self, registry, fake_harvest):
        fake_harvest.add("DELETE", "/time_entries/77")

        result = await registry.call("delete_time_entry", {"time_entry_id": 77})

        assert payload(result) == {"message": "Time entry 77 deleted successfully"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry, fake_harvest):
        result = await registry.call("x", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Unknown tool: x"
        assert fake_harvest.requests == []

    @pytest.mark.asyncio
    async def test_upstream_error(self, registry, fake_harvest):
        result = await registry.call("get_invoice", {"invoice_id": 404})

        assert result.isError is True
        assert result.content[0].text == "Error: Resource not found"

    @pytest.mark.asyncio
    async def test_rate_limit_error(self, registry, fake_harvest):
        fake_harvest.add("GET", "/projects", {"message": "slow down"}, status=429, headers={"Retry-After": "15"})

        result = await registry.call("list_projects", {})

        assert result.content[0].text == "Error: Rate limit exceeded. Retry after 15 seconds"

    @pytest.mark.asyncio
    async def test_validation_error(self, registry, fake_harvest):
        result = await registry.call("create_time_entry", {"project_id": 1, "task_id": 2, "spent_date": "2024-03-01"})

        assert result.isError is True
        assert result.content[0].text == (
            "Error: Invalid parameters for create_time_entry: "
            "Must provide either 'hours' or both 'started_time' and 'ended_time'"
        )
        assert fake_harvest.requests == []

    @pytest.mark.asyncio
    async def test_invalid_response(self, registry, fake_harvest):
        fake_harvest.add("GET", "/estimates/1", {"id": 1, "state": "lost"})

        result = await registry.call("get_estimate", {"estimate_id": 1})

        assert result.content[0].text == "Error: Invalid estimate data received from Harvest API"

    @pytest.mark.asyncio
    async def test_documented_invoice_shape(self, registry, fake_harvest):
        fake_harvest.add("GET", "/invoices/13150378", samples.invoice(client={"id": 5735776, "name": "123 Industries"}))

        result = await registry.call("get_invoice", {"invoice_id": 13150378})

        assert result.isError is False
        assert payload(result)["client"] == {"id": 5735776, "name": "123 Industries"}

    @pytest.mark.asyncio
    async def test_created_entry_on_twelve_hour_clock(self, registry, fake_harvest):
        fake_harvest.add("POST", "/time_entries", samples.time_entry(started_time="8:00am", ended_time="9:30am"), status=201)

        result = await registry.call(
            "create_time_entry",
            {"project_id": 14307913, "task_id": 8083365, "spent_date": "2024-03-01", "started_time": "8:00", "ended_time": "9:30"},
        )

        assert result.isError is False
        assert payload(result)["started_time"] == "8:00am"

    @pytest.mark.asyncio
    async def test_update_can_clear_fields(self, registry, fake_harvest):
        fake_harvest.add("PATCH", "/projects/14308069", samples.project(code=None, ends_on=None))

        result = await registry.call("update_project", {"id": 14308069, "code": None, "ends_on": None})

        assert result.isError is False
        assert fake_harvest.last_json() == {"code": None, "ends_on": None}

    @pytest.mark.asyncio
    async def test_transport_error(self, config):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        registry = build_registry(HarvestAPI(config, HarvestClient(config, transport=httpx.MockTransport(refuse))))

        result = await registry.call("get_company", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Failed to execute get_company: Network error: connection refused"

    @pytest.mark.asyncio
    async def test_unexpected_error_names_the_tool(self):
        registry = ToolRegistry()

        async def broken(arguments):
            raise KeyError("boom")

        registry.register(Tool(name="broken", description="Broken", inputSchema={"type": "object"}), broken)

        result = await registry.call("broken", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Failed to execute broken: 'boom'"

    @pytest.mark.asyncio
    async def test_missing_arguments_are_empty(self, registry, fake_harvest):
        fake_harvest.add("GET", "/users/me", samples.user())

        result = await registry.call("get_current_user", None)

        assert payload(result)["id"] == 1782959


class TestTextResult:
    def test_text_result(self):
        result = text_result("hi", is_error=True)

        assert result.isError is True
        assert result.content[0].type == "text"
        assert result.content[0].text == "hi"
