"""
Tests for the MCP server wiring
"""

from importlib.metadata import version

import pytest
from mcp import types
from mcp.server import Server
from starlette.applications import Starlette

import samples
from mcp_server_harvest import server as server_module
from mcp_server_harvest.server import MCP_PATH, MCPEndpoint, create_http_app, create_server, main


def call_request(name, arguments):
    return types.CallToolRequest(
        method="tools/call", params=types.CallToolRequestParams(name=name, arguments=arguments)
    )


@pytest.fixture
def mcp_server(registry):
    return create_server(registry)


class TestCreateServer:
    """Tests for the list/call handlers of the MCP server."""

    def test_supported_mcp_release(self):
        """The low-level list_tools/call_tool API and isError results are the 1.x line."""
        assert int(version("mcp").split(".")[0]) == 1
        assert "isError" in types.CallToolResult.model_fields
        assert hasattr(Server, "list_tools")

    def test_server_name(self, mcp_server):
        assert mcp_server.name == "harvest-mcp-server"

    @pytest.mark.asyncio
    async def test_list_tools(self, mcp_server, registry):
        result = await mcp_server.request_handlers[types.ListToolsRequest](types.ListToolsRequest(method="tools/list"))

        assert [tool.name for tool in result.root.tools] == [tool.name for tool in registry.list_tools()]

    @pytest.mark.asyncio
    async def test_call_tool_success(self, mcp_server, fake_harvest):
        fake_harvest.add("GET", "/company", samples.company())

        result = await mcp_server.request_handlers[types.CallToolRequest](call_request("get_company", {}))

        assert not result.root.isError
        assert '"name": "Example Company"' in result.root.content[0].text

    @pytest.mark.asyncio
    async def test_call_tool_error(self, mcp_server, fake_harvest):
        result = await mcp_server.request_handlers[types.CallToolRequest](call_request("get_task", {"task_id": 0}))

        assert result.root.isError is True
        assert result.root.content[0].text.startswith("Error: Invalid parameters for get_task: task_id: ")
        assert fake_harvest.requests == []

    @pytest.mark.asyncio
    async def test_unknown_tool(self, mcp_server):
        result = await mcp_server.request_handlers[types.CallToolRequest](call_request("nope", {}))

        assert result.root.isError is True
        assert result.root.content[0].text == "Error: Unknown tool: nope"


class TestHttpApp:
    """Tests for the streamable HTTP app."""

    def test_route(self, mcp_server):
        app = create_http_app(mcp_server)

        assert isinstance(app, Starlette)
        assert [route.path for route in app.routes] == [MCP_PATH]
        assert isinstance(app.routes[0].endpoint, MCPEndpoint)


class TestMain:
    """Tests for main()."""

    @pytest.fixture(autouse=True)
    def quiet_logging(self, monkeypatch):
        monkeypatch.setattr(server_module, "setup_logging", lambda *args, **kwargs: None)

    @pytest.mark.asyncio
    async def test_missing_configuration_exits_with_error(self, caplog):
        assert await main({}) == 1
        assert "HARVEST_ACCESS_TOKEN: Field required" in caplog.text

    @pytest.mark.asyncio
    async def test_stdio_is_the_default_transport(self, monkeypatch):
        served = []

        async def fake_stdio(server):
            served.append(server)

        async def fake_http(server, config):
            raise AssertionError("http transport selected")

        monkeypatch.setattr(server_module, "run_stdio", fake_stdio)
        monkeypatch.setattr(server_module, "run_http", fake_http)

        status = await main({"HARVEST_ACCESS_TOKEN": "token", "HARVEST_ACCOUNT_ID": "1"})

        assert status == 0
        assert served[0].name == "harvest-mcp-server"

    @pytest.mark.asyncio
    async def test_http_transport(self, monkeypatch):
        seen = []

        async def fake_http(server, config):
            seen.append((config.host, config.port))

        monkeypatch.setattr(server_module, "run_http", fake_http)

        status = await main(
            {"HARVEST_ACCESS_TOKEN": "token", "HARVEST_ACCOUNT_ID": "1", "MCP_TRANSPORT": "HTTP", "MCP_PORT": "9000"}
        )

        assert status == 0
        assert seen == [("127.0.0.1", 9000)]
