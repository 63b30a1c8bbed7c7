"""Client endpoints."""

from mcp_server_harvest.resources.base import Resource, crud_operations
from mcp_server_harvest.schemas.client import (
    Client,
    ClientId,
    ClientQuery,
    ClientsList,
    CreateClient,
    UpdateClient,
)

RESOURCE = Resource(
    "clients",
    "client",
    crud_operations(
        "client",
        "clients",
        "Client",
        record=Client,
        envelope=ClientsList,
        create=CreateClient,
        update=UpdateClient,
        query=ClientQuery,
        identifier=ClientId,
        descriptions={
            "list": "List clients, optionally filtered by active status or last update. Results are paginated.",
            "get": "Get a single client by ID, including address and currency.",
            "create": "Create a client. Requires a name; address and currency are optional.",
            "update": "Update a client by ID. Only the fields provided are changed.",
            "delete": "Delete a client by ID. Harvest refuses if the client still has projects or invoices.",
        },
    ),
)
