"""User endpoints."""

from mcp_server_harvest.resources.base import Operation, Resource, crud_operations
from mcp_server_harvest.schemas.common import InputModel
from mcp_server_harvest.schemas.user import CreateUser, UpdateUser, User, UserId, UserQuery, UsersList


class CurrentUserQuery(InputModel):
    """``get_current_user`` takes no arguments."""


RESOURCE = Resource(
    "users",
    "user",
    crud_operations(
        "user",
        "users",
        "User",
        record=User,
        envelope=UsersList,
        create=CreateUser,
        update=UpdateUser,
        query=UserQuery,
        identifier=UserId,
        descriptions={
            "list": "List users, optionally filtered by active status or last update. Results are paginated.",
            "get": "Get a single user by ID, including roles and rates.",
            "create": "Create a user. Requires first name, last name and email.",
            "update": "Update a user by ID. Only the fields provided are changed.",
            "delete": "Delete a user by ID. Users with tracked time cannot be deleted, only archived.",
        },
    )
    + (
        Operation(
            "me",
            "get_current_user",
            "Get the user the access token belongs to.",
            "GET",
            "/users/me",
            CurrentUserQuery,
            response_schema=User,
        ),
    ),
)
