"""Expense and expense category schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

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
    PositiveInt,
    Reference,
    Text,
    TimestampedRecord,
    UpdatedSinceQuery,
    UrlStr,
    id_model,
    partial_model,
)


class ExpenseCategory(HarvestRecord):
    name: NonEmptyText
    unit_name: Optional[Text]
    unit_price: Optional[Amount]
    is_active: Flag


class ExpenseCategoriesList(ListEnvelope):
    expense_categories: List[ExpenseCategory]


class ExpenseClient(Reference):
    currency: Optional[CurrencyCode] = None


class ExpenseProject(Reference):
    code: Optional[Text]


class ExpenseUserAssignment(HarvestRecord):
    is_project_manager: Flag
    is_active: Flag
    budget: Optional[Amount]
    hourly_rate: Optional[Amount]
    created_at: DateTimeStr
    updated_at: DateTimeStr


class InvoiceReference(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: PositiveInt
    number: NonEmptyText


class Receipt(BaseModel):
    model_config = ConfigDict(extra="allow")

    url: UrlStr
    file_name: NonEmptyText
    file_size: PositiveInt
    content_type: NonEmptyText


class Expense(TimestampedRecord):
    spent_date: DateStr
    notes: Optional[Text]
    total_cost: Amount
    units: Optional[Amount]
    is_closed: Flag
    is_locked: Flag
    is_billed: Flag
    locked_reason: Optional[Text]
    billable: Flag
    user: Reference
    user_assignment: ExpenseUserAssignment
    expense_category: ExpenseCategory
    client: ExpenseClient
    project: ExpenseProject
    invoice: Optional[InvoiceReference]
    receipt: Optional[Receipt]


class ExpensesList(ListEnvelope):
    expenses: List[Expense]


class CreateExpense(InputModel):
    user_id: Optional[PositiveInt] = Field(None, description="User the expense belongs to (defaults to the current user)")
    project_id: PositiveInt = Field(..., description="Project the expense is charged to")
    expense_category_id: PositiveInt = Field(..., description="Expense category")
    spent_date: DateStr = Field(..., description="Date of the expense (YYYY-MM-DD)")
    notes: Optional[Text] = None
    total_cost: Amount = Field(..., description="Total amount of the expense")
    units: Optional[Amount] = Field(None, description="Quantity of units, for unit-based categories")
    billable: Optional[Flag] = True


UpdateExpense = partial_model(CreateExpense, "UpdateExpense", required={"id": PositiveInt})


class ExpenseQuery(UpdatedSinceQuery):
    user_id: Optional[PositiveInt] = None
    client_id: Optional[PositiveInt] = None
    project_id: Optional[PositiveInt] = None
    is_billed: Optional[Flag] = None
    is_closed: Optional[Flag] = None
    from_: Optional[DateStr] = Field(None, alias="from", description="Only expenses spent on or after this date")
    to: Optional[DateStr] = Field(None, description="Only expenses spent on or before this date")


class ExpenseCategoryQuery(UpdatedSinceQuery):
    is_active: Optional[Flag] = None


ExpenseId = id_model("ExpenseId", "expense_id")
