"""Invoice schemas."""

from typing import List, Literal, Optional

from pydantic import Field

from mcp_server_harvest.schemas.common import (
    Amount,
    CurrencyCode,
    DateStr,
    DateTimeStr,
    Flag,
    HarvestRecord,
    InputModel,
    ListEnvelope,
    NonEmptyText,
    Percentage,
    PositiveInt,
    Reference,
    Text,
    TimestampedRecord,
    UpdatedSinceQuery,
    id_model,
    partial_model,
)

InvoiceState = Literal["draft", "open", "paid", "closed"]
LineItemKind = Literal["Service", "Product"]


class InvoiceClient(Reference):
    currency: Optional[CurrencyCode] = None


class LineItemProject(Reference):
    code: Optional[Text]


class InvoiceLineItem(HarvestRecord):
    kind: LineItemKind
    description: Optional[Text]
    quantity: Amount
    unit_price: Amount
    amount: Amount
    taxed: Flag
    taxed2: Flag
    project: Optional[LineItemProject]


class Invoice(TimestampedRecord):
    client_key: Text
    number: NonEmptyText
    purchase_order: Optional[Text]
    amount: Amount
    due_amount: Amount
    tax: Optional[Amount]
    tax_amount: Optional[Amount]
    tax2: Optional[Amount]
    tax2_amount: Optional[Amount]
    discount: Optional[Amount]
    discount_amount: Optional[Amount]
    subject: Optional[Text]
    notes: Optional[Text]
    currency: CurrencyCode
    state: InvoiceState
    issue_date: DateStr
    due_date: DateStr
    payment_term: Optional[Text]
    payment_options: List[Text]
    sent_at: Optional[DateTimeStr]
    paid_at: Optional[DateTimeStr]
    paid_date: Optional[DateStr]
    closed_at: Optional[DateTimeStr]
    recurring_invoice_id: Optional[PositiveInt]
    client: InvoiceClient
    line_items: List[InvoiceLineItem]


class InvoicesList(ListEnvelope):
    invoices: List[Invoice]


class CreateInvoiceLineItem(InputModel):
    kind: Optional[LineItemKind] = "Service"
    description: Text
    quantity: Optional[Amount] = 1
    unit_price: Amount
    taxed: Optional[Flag] = False
    taxed2: Optional[Flag] = False
    project_id: Optional[PositiveInt] = None


class CreateInvoice(InputModel):
    client_id: PositiveInt = Field(..., description="ID of the client to invoice")
    subject: Optional[Text] = None
    notes: Optional[Text] = None
    currency: Optional[CurrencyCode] = Field("USD", description="3-letter ISO currency code")
    issue_date: Optional[DateStr] = Field(None, description="Issue date (YYYY-MM-DD)")
    due_date: Optional[DateStr] = Field(None, description="Due date (YYYY-MM-DD)")
    payment_term: Optional[Text] = None
    tax: Optional[Percentage] = Field(None, description="Tax percentage (0-100)")
    tax2: Optional[Percentage] = Field(None, description="Second tax percentage (0-100)")
    discount: Optional[Percentage] = Field(None, description="Discount percentage (0-100)")
    purchase_order: Optional[Text] = None
    line_items: Optional[List[CreateInvoiceLineItem]] = Field(None, description="Line items to add")


UpdateInvoice = partial_model(CreateInvoice, "UpdateInvoice", required={"id": PositiveInt})


class InvoiceQuery(UpdatedSinceQuery):
    client_id: Optional[PositiveInt] = None
    project_id: Optional[PositiveInt] = None
    state: Optional[InvoiceState] = None
    from_: Optional[DateStr] = Field(None, alias="from", description="Only invoices issued on or after this date")
    to: Optional[DateStr] = Field(None, description="Only invoices issued on or before this date")


InvoiceId = id_model("InvoiceId", "invoice_id")
