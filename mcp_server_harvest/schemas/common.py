"""Shared field types and base models for the Harvest schemas.

Scalars are strict: ``"5"`` is not an integer and ``1`` is not a boolean.
Ints are still accepted where a float is expected.
"""

import re
from datetime import date
from typing import Annotated, Any, Dict, Optional, Type
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, Strict, WithJsonSchema, create_model

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"
# accounts on the 12h clock get times back as "8:00am"
CLOCK_12H_PATTERN = r"^(1[0-2]|0?[1-9]):[0-5][0-9]\s?[ap]m$"
DATETIME_PATTERN = r"^(\d{4}-\d{2}-\d{2})T([01]\d|2[0-3]):[0-5]\d:[0-5]\d(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

_date_re = re.compile(DATE_PATTERN)
_time_re = re.compile(TIME_PATTERN)
_clock_12h_re = re.compile(CLOCK_12H_PATTERN, re.IGNORECASE)
_datetime_re = re.compile(DATETIME_PATTERN)
_email_re = re.compile(EMAIL_PATTERN)


def _check_date(value: str) -> str:
    if not _date_re.match(value):
        raise ValueError("Date must be in YYYY-MM-DD format")
    return value


def _check_time(value: str) -> str:
    if not _time_re.match(value):
        raise ValueError("Time must be in HH:MM format (24-hour)")
    return value


def _check_record_time(value: str) -> str:
    if not (_time_re.match(value) or _clock_12h_re.match(value)):
        raise ValueError("Time must be HH:MM (24-hour) or h:mmam/pm")
    return value


def _check_datetime(value: str) -> str:
    match = _datetime_re.match(value)
    if not match:
        raise ValueError("Must be an ISO 8601 datetime with offset (e.g. 2024-01-31T09:00:00Z)")
    try:
        date.fromisoformat(match.group(1))
    except ValueError:
        raise ValueError(f"Invalid calendar date in datetime: {value}") from None
    return value


def _check_email(value: str) -> str:
    if not _email_re.match(value):
        raise ValueError("Must be a valid email address")
    return value


def _check_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Must be a valid URL")
    return value


PositiveInt = Annotated[int, Strict(), Field(gt=0)]
NonNegativeInt = Annotated[int, Strict(), Field(ge=0)]
Number = Annotated[float, Strict()]
Amount = Annotated[float, Strict(), Field(ge=0)]
Hours = Annotated[float, Strict(), Field(ge=0, le=24)]
Percentage = Annotated[float, Strict(), Field(ge=0, le=100)]
Text = Annotated[str, Strict()]
NonEmptyText = Annotated[str, Strict(), Field(min_length=1)]
Flag = Annotated[bool, Strict()]
CurrencyCode = Annotated[
    str,
    Strict(),
    Field(min_length=3, max_length=3),
    WithJsonSchema({"type": "string", "minLength": 3, "maxLength": 3, "description": "ISO 4217 currency code"}),
]
DateStr = Annotated[
    str,
    Strict(),
    AfterValidator(_check_date),
    WithJsonSchema({"type": "string", "format": "date", "pattern": DATE_PATTERN}),
]
TimeStr = Annotated[
    str,
    Strict(),
    AfterValidator(_check_time),
    WithJsonSchema({"type": "string", "pattern": TIME_PATTERN}),
]
# response-side time: either clock format Harvest renders
RecordTimeStr = Annotated[str, Strict(), AfterValidator(_check_record_time)]
DateTimeStr = Annotated[
    str,
    Strict(),
    AfterValidator(_check_datetime),
    WithJsonSchema({"type": "string", "format": "date-time"}),
]
EmailStr = Annotated[
    str,
    Strict(),
    AfterValidator(_check_email),
    WithJsonSchema({"type": "string", "format": "email"}),
]
UrlStr = Annotated[
    str,
    Strict(),
    AfterValidator(_check_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]


class HarvestRecord(BaseModel):
    """Snapshot of one upstream object. Unknown upstream fields are kept."""

    model_config = ConfigDict(extra="allow")

    id: PositiveInt


class TimestampedRecord(HarvestRecord):
    created_at: DateTimeStr
    updated_at: DateTimeStr


class Reference(BaseModel):
    """Compact ``{id, name}`` reference embedded in other records."""

    model_config = ConfigDict(extra="allow")

    id: PositiveInt
    name: NonEmptyText


class PageLinks(BaseModel):
    model_config = ConfigDict(extra="allow")

    first: UrlStr
    next: Optional[UrlStr]
    previous: Optional[UrlStr]
    last: UrlStr


class ListEnvelope(BaseModel):
    """Paginated collection; subclasses add the collection field."""

    model_config = ConfigDict(extra="allow")

    per_page: PositiveInt
    total_pages: NonNegativeInt
    total_entries: NonNegativeInt
    next_page: Optional[PositiveInt]
    previous_page: Optional[PositiveInt]
    page: PositiveInt
    links: PageLinks


class InputModel(BaseModel):
    """Base for create/update/query inputs. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")


class PaginatedQuery(InputModel):
    page: Optional[PositiveInt] = Field(None, description="Page number for pagination")
    per_page: Optional[Annotated[int, Strict(), Field(ge=1, le=2000)]] = Field(
        2000, description="Number of records per page (max 2000)"
    )


class UpdatedSinceQuery(PaginatedQuery):
    updated_since: Optional[DateTimeStr] = Field(None, description="Only return records updated since this timestamp")


class ExternalReference(InputModel):
    id: Optional[Text] = None
    group_id: Optional[Text] = None
    account_id: Optional[Text] = None
    permalink: Optional[UrlStr] = None


def _with_metadata(annotation: Any, metadata: list) -> Any:
    if not metadata:
        return annotation
    return Annotated[(annotation, *metadata)]


def partial_model(
    model: Type[BaseModel],
    name: str,
    required: Optional[Dict[str, Any]] = None,
    doc: Optional[str] = None,
) -> Type[BaseModel]:
    """Derive an update schema: ``required`` fields first, then every field of
    ``model`` made optional with no default.

    Field constraints are preserved; model-level validators are not.
    """
    fields: Dict[str, Any] = {}
    for field_name, annotation in (required or {}).items():
        fields[field_name] = (annotation, Field(...))
    for field_name, info in model.model_fields.items():
        if field_name in fields:
            continue
        annotation = _with_metadata(info.annotation, info.metadata)
        fields[field_name] = (Optional[annotation], Field(None, description=info.description))
    return create_model(name, __config__=model.model_config, __doc__=doc, **fields)


def id_model(name: str, *id_fields: str) -> Type[BaseModel]:
    """Build an input schema holding only positive-integer identifiers."""
    fields = {field_name: (PositiveInt, Field(..., description=f"The {field_name.replace('_', ' ')}")) for field_name in id_fields}
    return create_model(name, __config__=InputModel.model_config, **fields)
