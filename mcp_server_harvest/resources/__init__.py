"""Harvest resource families and the facade that binds them to one HTTP client."""

import logging
from typing import Iterator, Optional, Tuple

from mcp_server_harvest.config import HarvestConfig
from mcp_server_harvest.harvest_client import HarvestClient
from mcp_server_harvest.resources import (
    clients,
    company,
    estimates,
    expenses,
    invoices,
    projects,
    reports,
    tasks,
    time_entries,
    users,
)
from mcp_server_harvest.resources.base import Clock, Operation, Resource, ResourceClient

# registration order of the tools
RESOURCES: Tuple[Resource, ...] = (
    company.RESOURCE,
    clients.RESOURCE,
    projects.RESOURCE,
    tasks.RESOURCE,
    users.RESOURCE,
    invoices.RESOURCE,
    expenses.RESOURCE,
    estimates.RESOURCE,
    time_entries.RESOURCE,
    reports.RESOURCE,
)


class HarvestAPI:
    """All resource clients, sharing one HarvestClient and one configuration."""

    def __init__(
        self,
        config: HarvestConfig,
        http: Optional[HarvestClient] = None,
        *,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.http = http or HarvestClient(config, logger=logger)
        self.resources = {
            resource.name: ResourceClient(resource, self.http, config, clock=clock, logger=logger)
            for resource in RESOURCES
        }

    def __getattr__(self, name: str) -> ResourceClient:
        resources = self.__dict__.get("resources", {})
        if name in resources:
            return resources[name]
        raise AttributeError(name)

    def operations(self) -> Iterator[Tuple[ResourceClient, Operation]]:
        for client in self.resources.values():
            for op in client.resource.operations:
                yield client, op

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


__all__ = ["HarvestAPI", "Operation", "RESOURCES", "Resource", "ResourceClient"]
