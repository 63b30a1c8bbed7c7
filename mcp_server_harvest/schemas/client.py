"""Client schemas."""

from typing import List, Optional

from pydantic import Field

from mcp_server_harvest.schemas.common import (
    CurrencyCode,
    Flag,
    InputModel,
    ListEnvelope,
    NonEmptyText,
    PositiveInt,
    Text,
    TimestampedRecord,
    UpdatedSinceQuery,
    id_model,
    partial_model,
)


class Client(TimestampedRecord):
    name: NonEmptyText
    is_active: Flag
    address: Optional[Text]
    statement_key: Optional[Text]
    currency: Optional[CurrencyCode] = None


class ClientsList(ListEnvelope):
    clients: List[Client]


class CreateClient(InputModel):
    name: NonEmptyText = Field(..., description="Client name")
    is_active: Optional[Flag] = Field(True, description="Whether the client is active")
    address: Optional[Text] = Field(None, description="Client address")
    currency: Optional[CurrencyCode] = Field("USD", description="3-letter ISO currency code")


UpdateClient = partial_model(CreateClient, "UpdateClient", required={"id": PositiveInt})


class ClientQuery(UpdatedSinceQuery):
    is_active: Optional[Flag] = Field(None, description="Filter by active status")


ClientId = id_model("ClientId", "client_id")
