"""Company endpoint."""

from mcp_server_harvest.resources.base import Operation, Resource
from mcp_server_harvest.schemas.company import Company, CompanyQuery

RESOURCE = Resource(
    "company",
    "company",
    (
        Operation(
            "get",
            "get_company",
            "Get the company settings of the authenticated account: time format, week start, enabled features.",
            "GET",
            "/company",
            CompanyQuery,
            response_schema=Company,
        ),
    ),
)
