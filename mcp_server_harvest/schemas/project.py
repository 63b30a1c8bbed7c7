"""Project schemas."""

from typing import List, Literal, Optional

from pydantic import Field

from mcp_server_harvest.schemas.common import (
    Amount,
    CurrencyCode,
    DateStr,
    Flag,
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

BillBy = Literal["Project", "Tasks", "People", "none"]
BudgetBy = Literal["project", "project_cost", "task", "task_fees", "person", "none"]


class ProjectClient(Reference):
    currency: Optional[CurrencyCode] = None


class Project(TimestampedRecord):
    name: NonEmptyText
    code: Optional[Text]
    is_active: Flag
    is_billable: Flag
    is_fixed_fee: Flag
    bill_by: BillBy
    hourly_rate: Optional[Amount]
    budget: Optional[Amount]
    budget_by: Optional[BudgetBy]
    budget_is_monthly: Optional[Flag] = None
    notify_when_over_budget: Optional[Flag] = None
    over_budget_notification_percentage: Optional[Percentage]
    over_budget_notification_date: Optional[DateStr] = None
    show_budget_to_all: Optional[Flag] = None
    cost_budget: Optional[Amount]
    cost_budget_include_expenses: Optional[Flag] = None
    fee: Optional[Amount]
    notes: Optional[Text]
    starts_on: Optional[DateStr]
    ends_on: Optional[DateStr]
    client: ProjectClient


class ProjectsList(ListEnvelope):
    projects: List[Project]


class CreateProject(InputModel):
    name: NonEmptyText = Field(..., description="Project name")
    client_id: PositiveInt = Field(..., description="ID of the client this project belongs to")
    code: Optional[Text] = Field(None, description="Project code")
    is_active: Optional[Flag] = True
    is_billable: Optional[Flag] = True
    is_fixed_fee: Optional[Flag] = False
    bill_by: Optional[BillBy] = Field("none", description="How the project is invoiced")
    hourly_rate: Optional[Amount] = None
    budget: Optional[Amount] = None
    budget_by: Optional[BudgetBy] = None
    budget_is_monthly: Optional[Flag] = False
    notify_when_over_budget: Optional[Flag] = False
    over_budget_notification_percentage: Optional[Percentage] = None
    show_budget_to_all: Optional[Flag] = False
    cost_budget: Optional[Amount] = None
    cost_budget_include_expenses: Optional[Flag] = False
    fee: Optional[Amount] = None
    notes: Optional[Text] = None
    starts_on: Optional[DateStr] = Field(None, description="Start date (YYYY-MM-DD)")
    ends_on: Optional[DateStr] = Field(None, description="End date (YYYY-MM-DD)")


UpdateProject = partial_model(CreateProject, "UpdateProject", required={"id": PositiveInt})


class ProjectQuery(UpdatedSinceQuery):
    is_active: Optional[Flag] = None
    client_id: Optional[PositiveInt] = None


ProjectId = id_model("ProjectId", "project_id")
