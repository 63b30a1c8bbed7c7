"""Time entry and timer schemas."""

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mcp_server_harvest.schemas.common import (
    Amount,
    CurrencyCode,
    DateStr,
    DateTimeStr,
    EmailStr,
    ExternalReference,
    Flag,
    Hours,
    InputModel,
    ListEnvelope,
    NonEmptyText,
    PositiveInt,
    RecordTimeStr,
    Reference,
    Text,
    TimeStr,
    TimestampedRecord,
    UpdatedSinceQuery,
    UrlStr,
    id_model,
    partial_model,
)

Notes = Annotated[Text, Field(max_length=2000)]


class TimeEntryUser(Reference):
    email: Optional[EmailStr] = None


class TimeEntryProject(Reference):
    code: Optional[Text] = None


class TimeEntryClient(Reference):
    currency: Optional[CurrencyCode] = None


class TimeEntryInvoice(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: PositiveInt
    number: NonEmptyText


class TimeEntryExternalReference(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Text] = None
    group_id: Optional[Text] = None
    account_id: Optional[Text] = None
    permalink: Optional[UrlStr] = None


class TimeEntry(TimestampedRecord):
    spent_date: DateStr
    hours: Hours
    hours_without_timer: Optional[Hours] = None
    rounded_hours: Optional[Hours] = None
    notes: Optional[Text]
    is_locked: Optional[Flag] = None
    locked_reason: Optional[Text]
    is_closed: Optional[Flag] = None
    is_billed: Optional[Flag] = None
    timer_started_at: Optional[DateTimeStr]
    started_time: Optional[RecordTimeStr]
    ended_time: Optional[RecordTimeStr]
    is_running: Optional[Flag] = None
    billable: Optional[Flag] = None
    budgeted: Optional[Flag] = None
    billable_rate: Optional[Amount]
    cost_rate: Optional[Amount]
    user: TimeEntryUser
    project: TimeEntryProject
    task: Reference
    client: TimeEntryClient
    invoice: Optional[TimeEntryInvoice]
    external_reference: Optional[TimeEntryExternalReference]


class TimeEntriesList(ListEnvelope):
    time_entries: List[TimeEntry]


class CreateTimeEntry(InputModel):
    """Either ``hours`` or a ``started_time``/``ended_time`` pair is required."""

    project_id: PositiveInt = Field(..., description="Project to log time against")
    task_id: PositiveInt = Field(..., description="Task to log time against")
    spent_date: DateStr = Field(..., description="Date the time was spent (YYYY-MM-DD)")
    started_time: Optional[TimeStr] = Field(None, description="Start time (HH:MM, 24-hour)")
    ended_time: Optional[TimeStr] = Field(None, description="End time (HH:MM, 24-hour)")
    hours: Optional[Hours] = Field(None, description="Duration in decimal hours (0.5 = 30 minutes)")
    notes: Optional[Notes] = Field(None, description="Notes for the entry (max 2000 characters)")
    external_reference: Optional[ExternalReference] = None

    @model_validator(mode="after")
    def _hours_or_times(self):
        has_hours = self.hours is not None and self.hours > 0
        has_times = bool(self.started_time) and bool(self.ended_time)
        if not (has_hours or has_times):
            raise ValueError("Must provide either 'hours' or both 'started_time' and 'ended_time'")
        return self


UpdateTimeEntry = partial_model(CreateTimeEntry, "UpdateTimeEntry", required={"id": PositiveInt})


class TimeEntryQuery(UpdatedSinceQuery):
    user_id: Optional[PositiveInt] = None
    client_id: Optional[PositiveInt] = None
    project_id: Optional[PositiveInt] = None
    task_id: Optional[PositiveInt] = None
    is_billed: Optional[Flag] = None
    is_running: Optional[Flag] = None
    from_: Optional[DateStr] = Field(None, alias="from", description="Only entries spent on or after this date")
    to: Optional[DateStr] = Field(None, description="Only entries spent on or before this date")


class StartTimer(InputModel):
    project_id: PositiveInt = Field(..., description="Project to track time against")
    task_id: PositiveInt = Field(..., description="Task to track time against")
    spent_date: Optional[DateStr] = Field(None, description="Date of the entry (YYYY-MM-DD), defaults to today")
    notes: Optional[Notes] = None
    external_reference: Optional[ExternalReference] = None


TimerId = id_model("TimerId", "id")
TimeEntryId = id_model("TimeEntryId", "time_entry_id")
