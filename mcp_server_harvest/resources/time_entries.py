"""Time entry and timer endpoints."""

from typing import Any, Dict

from mcp_server_harvest.resources.base import Operation, Resource, ResourceClient, crud_operations
from mcp_server_harvest.schemas.time_entry import (
    CreateTimeEntry,
    StartTimer,
    TimeEntriesList,
    TimeEntry,
    TimeEntryId,
    TimeEntryQuery,
    TimerId,
    UpdateTimeEntry,
)


def start_timer_body(client: ResourceClient, op: Operation, values: Dict[str, Any]) -> Dict[str, Any]:
    """A running entry is one with ``started_time`` set and no ``ended_time``."""
    body = dict(values)
    if body.get("spent_date") is None:
        body["spent_date"] = client.today().isoformat()
    body["started_time"] = client.now().strftime("%H:%M")
    return body


RESOURCE = Resource(
    "time_entries",
    "time entry",
    crud_operations(
        "time_entry",
        "time_entries",
        "Time entry",
        record=TimeEntry,
        envelope=TimeEntriesList,
        create=CreateTimeEntry,
        update=UpdateTimeEntry,
        query=TimeEntryQuery,
        identifier=TimeEntryId,
        descriptions={
            "list": "List time entries, filtered by user, client, project, task, billing state, running state "
            "or date range. Results are paginated.",
            "get": "Get a single time entry by ID.",
            "create": "Log time for a project task on a date. Provide either hours or both started_time and ended_time.",
            "update": "Update a time entry by ID. Only the fields provided are changed.",
            "delete": "Delete a time entry by ID. This cannot be undone.",
        },
    )
    + (
        Operation(
            "start_timer",
            "start_timer",
            "Start a timer: creates a running time entry for a project task, starting now. "
            "spent_date defaults to today.",
            "POST",
            "/time_entries",
            StartTimer,
            response_schema=TimeEntry,
            send_body=True,
            prepare=start_timer_body,
        ),
        Operation(
            "stop_timer",
            "stop_timer",
            "Stop the running timer of a time entry and record its hours.",
            "PATCH",
            "/time_entries/{id}/stop",
            TimerId,
            response_schema=TimeEntry,
            path_params=("id",),
        ),
        Operation(
            "restart_timer",
            "restart_timer",
            "Restart the timer of a stopped time entry.",
            "PATCH",
            "/time_entries/{id}/restart",
            TimerId,
            response_schema=TimeEntry,
            path_params=("id",),
        ),
    ),
)
