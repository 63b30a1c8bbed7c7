"""Expense and expense category endpoints."""

from mcp_server_harvest.resources.base import Operation, Resource, crud_operations
from mcp_server_harvest.schemas.expense import (
    CreateExpense,
    Expense,
    ExpenseCategoriesList,
    ExpenseCategoryQuery,
    ExpenseId,
    ExpenseQuery,
    ExpensesList,
    UpdateExpense,
)

RESOURCE = Resource(
    "expenses",
    "expense",
    crud_operations(
        "expense",
        "expenses",
        "Expense",
        record=Expense,
        envelope=ExpensesList,
        create=CreateExpense,
        update=UpdateExpense,
        query=ExpenseQuery,
        identifier=ExpenseId,
        descriptions={
            "list": "List expenses, filtered by user, client, project, billing state or date range. Results are paginated.",
            "get": "Get a single expense by ID, including category, receipt and invoice.",
            "create": "Record an expense against a project and expense category.",
            "update": "Update an expense by ID. Only the fields provided are changed.",
            "delete": "Delete an expense by ID. This cannot be undone.",
        },
    )
    + (
        Operation(
            "list_categories",
            "list_expense_categories",
            "List the expense categories available for new expenses.",
            "GET",
            "/expense_categories",
            ExpenseCategoryQuery,
            response_schema=ExpenseCategoriesList,
            collection="expense_categories",
        ),
    ),
)
