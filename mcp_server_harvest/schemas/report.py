"""Report schemas.

Report rows differ by grouping (a project row has no user, a team row has
no client), so result models only pin the fields every row shares.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from mcp_server_harvest.schemas.common import (
    Amount,
    CurrencyCode,
    DateStr,
    DateTimeStr,
    Flag,
    InputModel,
    NonNegativeInt,
    Number,
    PageLinks,
    PositiveInt,
    Text,
)
from mcp_server_harvest.schemas.project import BudgetBy

TimeReportGroup = Literal["user", "client", "project", "task", "date"]
ExpenseReportGroup = Literal["user", "client", "project", "expense_category", "date"]


class ReportRow(BaseModel):
    model_config = ConfigDict(extra="allow")

    currency: Optional[CurrencyCode] = None


class TimeReportResult(ReportRow):
    client_id: Optional[PositiveInt] = None
    client_name: Optional[Text] = None
    project_id: Optional[PositiveInt] = None
    project_name: Optional[Text] = None
    task_id: Optional[PositiveInt] = None
    task_name: Optional[Text] = None
    user_id: Optional[PositiveInt] = None
    user_name: Optional[Text] = None
    total_hours: Amount
    billable_hours: Amount
    billable_amount: Amount


class ExpenseReportResult(ReportRow):
    client_id: Optional[PositiveInt] = None
    client_name: Optional[Text] = None
    project_id: Optional[PositiveInt] = None
    project_name: Optional[Text] = None
    expense_category_id: Optional[PositiveInt] = None
    expense_category_name: Optional[Text] = None
    user_id: Optional[PositiveInt] = None
    user_name: Optional[Text] = None
    total_amount: Amount
    billable_amount: Amount


class ProjectBudgetResult(ReportRow):
    client_id: PositiveInt
    client_name: Text
    project_id: PositiveInt
    project_name: Text
    budget_is_monthly: Optional[Flag] = None
    budget_by: BudgetBy
    is_active: Flag
    budget: Optional[Amount] = None
    budget_spent: Optional[Amount] = None
    budget_remaining: Optional[Number] = None


class UninvoicedResult(ReportRow):
    client_id: PositiveInt
    client_name: Text
    project_id: PositiveInt
    project_name: Text
    total_hours: Amount
    uninvoiced_hours: Amount
    uninvoiced_expenses: Amount
    uninvoiced_amount: Amount


class ReportEnvelope(BaseModel):
    """Report pages carry the usual pagination fields, all optional here."""

    model_config = ConfigDict(extra="allow")

    per_page: Optional[PositiveInt] = None
    total_pages: Optional[NonNegativeInt] = None
    total_entries: Optional[NonNegativeInt] = None
    next_page: Optional[PositiveInt] = None
    previous_page: Optional[PositiveInt] = None
    page: Optional[PositiveInt] = None
    links: Optional[PageLinks] = None


class TimeReport(ReportEnvelope):
    results: List[TimeReportResult]


class ExpenseReport(ReportEnvelope):
    results: List[ExpenseReportResult]


class ProjectBudgetReport(ReportEnvelope):
    results: List[ProjectBudgetResult]


class UninvoicedReport(ReportEnvelope):
    results: List[UninvoicedResult]


class ReportQuery(InputModel):
    page: Optional[PositiveInt] = Field(None, description="Page number for pagination")
    per_page: Optional[int] = Field(None, ge=1, le=2000, strict=True, description="Number of rows per page (max 2000)")


class DateRangeQuery(ReportQuery):
    from_: Optional[DateStr] = Field(None, alias="from", description="Start of the range (YYYY-MM-DD), defaults to 30 days ago")
    to: Optional[DateStr] = Field(None, description="End of the range (YYYY-MM-DD), defaults to today")


class TimeReportQuery(DateRangeQuery):
    user_id: Optional[PositiveInt] = None
    client_id: Optional[PositiveInt] = None
    project_id: Optional[PositiveInt] = None
    task_id: Optional[PositiveInt] = None
    billable: Optional[Flag] = None
    is_billed: Optional[Flag] = None
    is_running: Optional[Flag] = None
    updated_since: Optional[DateTimeStr] = None
    group_by: Optional[TimeReportGroup] = Field(None, description="Group results by user, client, project, task or date")


class ExpenseReportQuery(DateRangeQuery):
    user_id: Optional[PositiveInt] = None
    client_id: Optional[PositiveInt] = None
    project_id: Optional[PositiveInt] = None
    expense_category_id: Optional[PositiveInt] = None
    billable: Optional[Flag] = None
    is_billed: Optional[Flag] = None
    updated_since: Optional[DateTimeStr] = None
    group_by: Optional[ExpenseReportGroup] = Field(
        None, description="Group results by user, client, project, expense_category or date"
    )


class ProjectBudgetReportQuery(ReportQuery):
    is_active: Optional[Flag] = None
    client_id: Optional[PositiveInt] = None
    over_budget: Optional[Flag] = None


class UninvoicedReportQuery(DateRangeQuery):
    client_id: Optional[PositiveInt] = None
    project_id: Optional[PositiveInt] = None
