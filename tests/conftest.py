"""
Pytest Configuration and Fixtures

Shared fixtures: a test configuration, a fake Harvest API served through
httpx.MockTransport, and a fixed clock.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from mcp_server_harvest.config import HarvestConfig
from mcp_server_harvest.harvest_client import HarvestClient
from mcp_server_harvest.resources import HarvestAPI
from mcp_server_harvest.tools import build_registry

from samples import API_URL, FIXED_NOW


class FakeHarvest:
    """Canned responses keyed by (method, path); records every request it receives."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], List[httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
    ) -> None:
        """Queue a response. Several responses for one route are served in order."""
        if text is not None:
            response = httpx.Response(status, text=text, headers=headers)
        elif json_body is None:
            response = httpx.Response(status, headers=headers)
        else:
            response = httpx.Response(status, json=json_body, headers=headers)
        self.routes.setdefault((method, path), []).append(response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.replace("/v2", "", 1)
        queued = self.routes.get((request.method, path))
        if not queued:
            return httpx.Response(404, json={"error": "not_found"})
        return queued.pop(0) if len(queued) > 1 else queued[0]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def last_params(self) -> Dict[str, str]:
        return dict(self.last.url.params)


@pytest.fixture
def config() -> HarvestConfig:
    """Provide a configuration pointing at the fake API."""
    return HarvestConfig(access_token="test-token", account_id="123456", api_url=API_URL)


@pytest.fixture
def fake_harvest() -> FakeHarvest:
    return FakeHarvest()


@pytest.fixture
def http_client(config, fake_harvest) -> HarvestClient:
    return HarvestClient(config, transport=fake_harvest.transport)


@pytest.fixture
def api(config, http_client) -> HarvestAPI:
    """HarvestAPI wired to the fake transport, with the clock fixed at FIXED_NOW."""
    return HarvestAPI(config, http_client, clock=lambda: FIXED_NOW)


@pytest.fixture
def registry(api):
    return build_registry(api)
