"""User schemas."""

from typing import List, Optional

from pydantic import Field

from mcp_server_harvest.schemas.common import (
    Amount,
    EmailStr,
    Flag,
    InputModel,
    ListEnvelope,
    NonEmptyText,
    NonNegativeInt,
    PositiveInt,
    Text,
    TimestampedRecord,
    UpdatedSinceQuery,
    UrlStr,
    id_model,
    partial_model,
)

# 40 hours, in seconds
DEFAULT_WEEKLY_CAPACITY = 144000


class User(TimestampedRecord):
    first_name: NonEmptyText
    last_name: NonEmptyText
    email: EmailStr
    telephone: Text
    timezone: Text
    has_access_to_all_future_projects: Flag
    is_contractor: Flag
    is_active: Flag
    weekly_capacity: NonNegativeInt
    default_hourly_rate: Optional[Amount] = None
    cost_rate: Optional[Amount] = None
    roles: List[Text]
    access_roles: List[Text]
    avatar_url: Optional[UrlStr]


class UsersList(ListEnvelope):
    users: List[User]


class CreateUser(InputModel):
    first_name: NonEmptyText = Field(..., description="First name")
    last_name: NonEmptyText = Field(..., description="Last name")
    email: EmailStr = Field(..., description="Email address")
    telephone: Optional[Text] = None
    timezone: Optional[Text] = "UTC"
    has_access_to_all_future_projects: Optional[Flag] = False
    is_contractor: Optional[Flag] = False
    is_active: Optional[Flag] = True
    weekly_capacity: Optional[NonNegativeInt] = Field(
        DEFAULT_WEEKLY_CAPACITY, description="Weekly capacity in seconds"
    )
    default_hourly_rate: Optional[Amount] = None
    cost_rate: Optional[Amount] = None


UpdateUser = partial_model(CreateUser, "UpdateUser", required={"id": PositiveInt})


class UserQuery(UpdatedSinceQuery):
    is_active: Optional[Flag] = None


UserId = id_model("UserId", "user_id")
