"""Project and project task assignment endpoints."""

from mcp_server_harvest.resources.base import Operation, Resource, crud_operations
from mcp_server_harvest.schemas.project import (
    CreateProject,
    Project,
    ProjectId,
    ProjectQuery,
    ProjectsList,
    UpdateProject,
)
from mcp_server_harvest.schemas.task import (
    CreateProjectTaskAssignment,
    ProjectTaskAssignment,
    ProjectTaskAssignmentQuery,
    ProjectTaskAssignmentsList,
    TaskAssignmentId,
    UpdateProjectTaskAssignment,
)

TASK_ASSIGNMENTS_PATH = "/projects/{project_id}/task_assignments"

TASK_ASSIGNMENT_OPERATIONS = (
    Operation(
        "list_task_assignments",
        "list_project_task_assignments",
        "List the tasks assigned to a project, with their project-specific rates and budgets.",
        "GET",
        TASK_ASSIGNMENTS_PATH,
        ProjectTaskAssignmentQuery,
        response_schema=ProjectTaskAssignmentsList,
        path_params=("project_id",),
        collection="task_assignments",
    ),
    Operation(
        "create_task_assignment",
        "create_project_task_assignment",
        "Assign a task to a project so time can be tracked against it.",
        "POST",
        TASK_ASSIGNMENTS_PATH,
        CreateProjectTaskAssignment,
        response_schema=ProjectTaskAssignment,
        path_params=("project_id",),
        send_body=True,
    ),
    Operation(
        "update_task_assignment",
        "update_project_task_assignment",
        "Update a project task assignment (rate, budget, billable, active). Only the fields provided are changed.",
        "PATCH",
        TASK_ASSIGNMENTS_PATH + "/{id}",
        UpdateProjectTaskAssignment,
        response_schema=ProjectTaskAssignment,
        path_params=("project_id", "id"),
        send_body=True,
    ),
    Operation(
        "delete_task_assignment",
        "delete_project_task_assignment",
        "Remove a task from a project.",
        "DELETE",
        TASK_ASSIGNMENTS_PATH + "/{task_assignment_id}",
        TaskAssignmentId,
        path_params=("project_id", "task_assignment_id"),
        confirmation="Project task assignment {task_assignment_id} deleted successfully from project {project_id}",
    ),
)

RESOURCE = Resource(
    "projects",
    "project",
    crud_operations(
        "project",
        "projects",
        "Project",
        record=Project,
        envelope=ProjectsList,
        create=CreateProject,
        update=UpdateProject,
        query=ProjectQuery,
        identifier=ProjectId,
        descriptions={
            "list": "List projects, optionally filtered by client, active status or last update. Results are paginated.",
            "get": "Get a single project by ID, including client, budget and billing settings.",
            "create": "Create a project for a client. Requires a name and client_id.",
            "update": "Update a project by ID. Only the fields provided are changed.",
            "delete": "Delete a project by ID together with its time entries and expenses.",
        },
    )
    + TASK_ASSIGNMENT_OPERATIONS,
)
