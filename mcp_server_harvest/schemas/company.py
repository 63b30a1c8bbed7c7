"""Company schema.

Harvest's ``/company`` payload carries no id or timestamps and reports
``weekly_capacity`` in seconds, so this record does not extend
TimestampedRecord.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from mcp_server_harvest.schemas.common import (
    DateTimeStr,
    Flag,
    InputModel,
    NonEmptyText,
    NonNegativeInt,
    PositiveInt,
    Text,
)


class Company(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[PositiveInt] = None
    name: NonEmptyText
    is_active: Flag
    base_uri: Optional[Text] = None
    full_domain: Optional[Text] = None
    week_start_day: Text
    wants_timestamp_timers: Flag
    time_format: Literal["decimal", "hours_minutes"]
    plan_type: Text
    clock: Literal["12h", "24h"]
    decimal_symbol: Text
    thousands_separator: Text
    color_scheme: Text
    weekly_capacity: NonNegativeInt
    expense_feature: Flag
    invoice_feature: Flag
    estimate_feature: Flag
    approval_feature: Flag
    created_at: Optional[DateTimeStr] = None
    updated_at: Optional[DateTimeStr] = None


class CompanyQuery(InputModel):
    """``get_company`` takes no arguments."""
