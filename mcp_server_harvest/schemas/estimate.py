"""Estimate schemas."""

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

EstimateState = Literal["draft", "sent", "accepted", "declined"]


class EstimateClient(Reference):
    currency: Optional[CurrencyCode] = None


class EstimateLineItem(HarvestRecord):
    kind: Literal["Service", "Product"]
    description: Optional[Text]
    quantity: Amount
    unit_price: Amount
    amount: Amount
    taxed: Flag
    taxed2: Flag


class Estimate(TimestampedRecord):
    client_key: Text
    number: NonEmptyText
    purchase_order: Optional[Text]
    amount: Amount
    tax: Optional[Amount]
    tax_amount: Optional[Amount]
    tax2: Optional[Amount]
    tax2_amount: Optional[Amount]
    discount: Optional[Amount]
    discount_amount: Optional[Amount]
    subject: Optional[Text]
    notes: Optional[Text]
    currency: CurrencyCode
    state: EstimateState
    issue_date: DateStr
    sent_at: Optional[DateTimeStr]
    accepted_at: Optional[DateTimeStr]
    declined_at: Optional[DateTimeStr]
    client: EstimateClient
    creator: Reference
    line_items: List[EstimateLineItem]


class EstimatesList(ListEnvelope):
    estimates: List[Estimate]


class CreateEstimate(InputModel):
    client_id: PositiveInt = Field(..., description="ID of the client the estimate is for")
    subject: Optional[Text] = None
    notes: Optional[Text] = None
    currency: Optional[CurrencyCode] = Field("USD", description="3-letter ISO currency code")
    issue_date: Optional[DateStr] = Field(None, description="Issue date (YYYY-MM-DD)")
    tax: Optional[Percentage] = None
    tax2: Optional[Percentage] = None
    discount: Optional[Percentage] = None
    purchase_order: Optional[Text] = None


UpdateEstimate = partial_model(CreateEstimate, "UpdateEstimate", required={"id": PositiveInt})


class EstimateQuery(UpdatedSinceQuery):
    client_id: Optional[PositiveInt] = None
    state: Optional[EstimateState] = None
    from_: Optional[DateStr] = Field(None, alias="from", description="Only estimates issued on or after this date")
    to: Optional[DateStr] = Field(None, description="Only estimates issued on or before this date")


EstimateId = id_model("EstimateId", "estimate_id")
