"""Report endpoints.

Time and expense reports are served from one endpoint per grouping, so
``group_by`` picks the path instead of being sent as a parameter. Reports
called without ``from``/``to`` cover the trailing ``report_default_days``.
"""

from datetime import timedelta
from typing import Any, Dict

from mcp_server_harvest.errors import InputValidationError
from mcp_server_harvest.resources.base import Operation, Resource, ResourceClient
from mcp_server_harvest.schemas.report import (
    ExpenseReport,
    ExpenseReportQuery,
    ProjectBudgetReport,
    ProjectBudgetReportQuery,
    TimeReport,
    TimeReportQuery,
    UninvoicedReport,
    UninvoicedReportQuery,
)

TIME_REPORT_PATHS = {
    "project": "/reports/time/projects",
    "client": "/reports/time/clients",
    "task": "/reports/time/tasks",
    "user": "/reports/time/team",
}
TIME_REPORT_PATH = "/reports/time"

EXPENSE_REPORT_PATHS = {
    "project": "/reports/expenses/projects",
    "client": "/reports/expenses/clients",
    "expense_category": "/reports/expenses/categories",
    "user": "/reports/expenses/team",
}
EXPENSE_REPORT_PATH = "/reports/expenses"


def time_report_path(values: Dict[str, Any]) -> str:
    return TIME_REPORT_PATHS.get(values.get("group_by"), TIME_REPORT_PATH)


def expense_report_path(values: Dict[str, Any]) -> str:
    return EXPENSE_REPORT_PATHS.get(values.get("group_by"), EXPENSE_REPORT_PATH)


def with_date_range(client: ResourceClient, op: Operation, values: Dict[str, Any]) -> Dict[str, Any]:
    """Fill a missing ``from``/``to`` with the trailing default window and drop ``group_by``."""
    params = {k: v for k, v in values.items() if k != "group_by"}
    days = client.config.report_default_days
    if days == 0:
        missing = [f"{name}: Field required" for name in ("from", "to") if name not in params]
        if missing:
            raise InputValidationError(
                f"Invalid parameters for {op.tool_name}: {', '.join(missing)}", missing
            )
        return params

    today = client.today()
    params.setdefault("from", (today - timedelta(days=days)).isoformat())
    params.setdefault("to", today.isoformat())
    return params


RESOURCE = Resource(
    "reports",
    "report",
    (
        Operation(
            "time",
            "get_time_report",
            "Time report for a date range, grouped by project, client, task or user (team). "
            "Defaults to the last 30 days when from/to are omitted.",
            "GET",
            TIME_REPORT_PATH,
            TimeReportQuery,
            response_schema=TimeReport,
            prepare=with_date_range,
            resolve_path=time_report_path,
            collection="results",
        ),
        Operation(
            "expenses",
            "get_expense_report",
            "Expense report for a date range, grouped by project, client, expense_category or user (team). "
            "Defaults to the last 30 days when from/to are omitted.",
            "GET",
            EXPENSE_REPORT_PATH,
            ExpenseReportQuery,
            response_schema=ExpenseReport,
            prepare=with_date_range,
            resolve_path=expense_report_path,
            collection="results",
        ),
        Operation(
            "project_budget",
            "get_project_budget_report",
            "Budget report per project: budget, amount spent and amount remaining.",
            "GET",
            "/reports/project_budget",
            ProjectBudgetReportQuery,
            response_schema=ProjectBudgetReport,
            collection="results",
        ),
        Operation(
            "uninvoiced",
            "get_uninvoiced_report",
            "Uninvoiced time and expenses per project for a date range. "
            "Defaults to the last 30 days when from/to are omitted.",
            "GET",
            "/reports/uninvoiced",
            UninvoicedReportQuery,
            response_schema=UninvoicedReport,
            prepare=with_date_range,
            collection="results",
        ),
    ),
)
