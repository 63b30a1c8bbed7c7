"""Invoice endpoints."""

from mcp_server_harvest.resources.base import Resource, crud_operations
from mcp_server_harvest.schemas.invoice import (
    CreateInvoice,
    Invoice,
    InvoiceId,
    InvoiceQuery,
    InvoicesList,
    UpdateInvoice,
)

RESOURCE = Resource(
    "invoices",
    "invoice",
    crud_operations(
        "invoice",
        "invoices",
        "Invoice",
        record=Invoice,
        envelope=InvoicesList,
        create=CreateInvoice,
        update=UpdateInvoice,
        query=InvoiceQuery,
        identifier=InvoiceId,
        descriptions={
            "list": "List invoices, filtered by client, project, state or issue date range. Results are paginated.",
            "get": "Get a single invoice by ID, including line items and payment status.",
            "create": "Create an invoice for a client, optionally with line items, taxes and a discount.",
            "update": "Update an invoice by ID. Only the fields provided are changed.",
            "delete": "Delete an invoice by ID. This cannot be undone.",
        },
    ),
)
