"""Estimate endpoints."""

from mcp_server_harvest.resources.base import Resource, crud_operations
from mcp_server_harvest.schemas.estimate import (
    CreateEstimate,
    Estimate,
    EstimateId,
    EstimateQuery,
    EstimatesList,
    UpdateEstimate,
)

RESOURCE = Resource(
    "estimates",
    "estimate",
    crud_operations(
        "estimate",
        "estimates",
        "Estimate",
        record=Estimate,
        envelope=EstimatesList,
        create=CreateEstimate,
        update=UpdateEstimate,
        query=EstimateQuery,
        identifier=EstimateId,
        descriptions={
            "list": "List estimates, filtered by client, state or issue date range. Results are paginated.",
            "get": "Get a single estimate by ID, including line items.",
            "create": "Create an estimate for a client with optional taxes and discount.",
            "update": "Update an estimate by ID. Only the fields provided are changed.",
            "delete": "Delete an estimate by ID. This cannot be undone.",
        },
    ),
)
