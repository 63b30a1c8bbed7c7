"""Task endpoints."""

from mcp_server_harvest.resources.base import Resource, crud_operations
from mcp_server_harvest.schemas.task import CreateTask, Task, TaskId, TaskQuery, TasksList, UpdateTask

RESOURCE = Resource(
    "tasks",
    "task",
    crud_operations(
        "task",
        "tasks",
        "Task",
        record=Task,
        envelope=TasksList,
        create=CreateTask,
        update=UpdateTask,
        query=TaskQuery,
        identifier=TaskId,
        descriptions={
            "list": "List tasks, optionally filtered by active status or last update. Results are paginated.",
            "get": "Get a single task by ID, including its default billing settings.",
            "create": "Create a task that can then be assigned to projects.",
            "update": "Update a task by ID. Only the fields provided are changed.",
            "delete": "Delete a task by ID. Tasks with tracked time cannot be deleted, only archived.",
        },
    ),
)
