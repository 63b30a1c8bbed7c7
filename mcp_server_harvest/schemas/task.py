"""Task and project task assignment schemas."""

from typing import List, Optional

from pydantic import Field

from mcp_server_harvest.schemas.common import (
    Amount,
    Flag,
    InputModel,
    ListEnvelope,
    NonEmptyText,
    PositiveInt,
    Reference,
    TimestampedRecord,
    UpdatedSinceQuery,
    id_model,
    partial_model,
)


class Task(TimestampedRecord):
    name: NonEmptyText
    billable_by_default: Flag
    default_hourly_rate: Optional[Amount]
    is_default: Flag
    is_active: Flag


class TasksList(ListEnvelope):
    tasks: List[Task]


class CreateTask(InputModel):
    name: NonEmptyText = Field(..., description="Task name")
    billable_by_default: Optional[Flag] = True
    default_hourly_rate: Optional[Amount] = None
    is_default: Optional[Flag] = False
    is_active: Optional[Flag] = True


UpdateTask = partial_model(CreateTask, "UpdateTask", required={"id": PositiveInt})


class TaskQuery(UpdatedSinceQuery):
    is_active: Optional[Flag] = None


TaskId = id_model("TaskId", "task_id")


class ProjectTaskAssignment(TimestampedRecord):
    billable: Flag
    is_active: Flag
    hourly_rate: Optional[Amount]
    budget: Optional[Amount]
    task: Reference


class ProjectTaskAssignmentsList(ListEnvelope):
    task_assignments: List[ProjectTaskAssignment]


class CreateProjectTaskAssignment(InputModel):
    project_id: PositiveInt = Field(..., description="Project to assign the task to")
    task_id: PositiveInt = Field(..., description="Task to assign")
    is_active: Optional[Flag] = True
    billable: Optional[Flag] = True
    hourly_rate: Optional[Amount] = None
    budget: Optional[Amount] = None


UpdateProjectTaskAssignment = partial_model(
    CreateProjectTaskAssignment,
    "UpdateProjectTaskAssignment",
    required={"project_id": PositiveInt, "id": PositiveInt},
)


class ProjectTaskAssignmentQuery(UpdatedSinceQuery):
    project_id: PositiveInt = Field(..., description="Project whose task assignments to list")
    is_active: Optional[Flag] = None


TaskAssignmentId = id_model("TaskAssignmentId", "project_id", "task_assignment_id")
