import re
from datetime import datetime
from typing import Annotated, Literal

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AnyUrl, BaseModel, Field, StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class CamelModel(BaseModel):
    """Base for records exchanged with Google APIs and the backend (camelCase on the wire)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


# Enumerations
AssignmentState = Literal["PUBLISHED", "DRAFT", "DELETED"]
WorkType = Literal["ASSIGNMENT", "SHORT_ANSWER_QUESTION", "MULTIPLE_CHOICE_QUESTION"]
SubmissionModificationMode = Literal["MODIFIABLE_UNTIL_TURNED_IN", "MODIFIABLE", "NOT_MODIFIABLE"]
AssigneeMode = Literal["ALL_STUDENTS", "INDIVIDUAL_STUDENTS"]
CourseState = Literal["ACTIVE", "ARCHIVED", "PROVISIONED", "DECLINED", "SUSPENDED"]
SubmissionState = Literal["NEW", "CREATED", "TURNED_IN", "RETURNED", "RECLAIMED_BY_STUDENT"]
QuestionType = Literal[
    "MULTIPLE_CHOICE",
    "CHECKBOX",
    "SHORT_ANSWER",
    "PARAGRAPH",
    "SCALE",
    "GRID",
    "DATE",
    "TIME",
    "FILE_UPLOAD",
]
AnswerRuleType = Literal["contains", "starts_with", "ends_with", "regex", "numeric_range"]
AIProvider = Literal["gemini", "claude", "openai"]
SyncOperation = Literal["classroom_sync", "assignment_sync", "submission_sync", "form_sync"]
GradingMethod = Literal["auto", "manual", "ai", "hybrid"]
UserRole = Literal["teacher", "student", "admin"]


_ISO_DATETIME = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)


def parse_iso_datetime(value: str) -> datetime:
    """Parse an RFC 3339 timestamp as returned by Google APIs into an aware datetime."""
    match = _ISO_DATETIME.match(value)
    if not match:
        raise ValueError(f"not an ISO 8601 timestamp: {value!r}")
    base, fraction, offset = match.groups()
    # Google sends up to nanosecond precision; datetime keeps microseconds
    fraction = (fraction or "")[:7]
    if offset == "Z":
        offset = "+00:00"
    return datetime.fromisoformat(f"{base}{fraction}{offset}")


def _check_datetime(value: str) -> str:
    try:
        parse_iso_datetime(value)
    except ValueError:
        raise PydanticCustomError(
            "datetime_format",
            "Invalid datetime, expected ISO 8601 with a timezone designator",
        )
    return value


_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise PydanticCustomError("url", "Invalid URL")
    return value


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise PydanticCustomError("email", "Invalid email address: {reason}", {"reason": str(e)})
    return value


DateTimeStr = Annotated[StrictStr, AfterValidator(_check_datetime)]
UrlStr = Annotated[StrictStr, AfterValidator(_check_url)]
EmailAddress = Annotated[StrictStr, AfterValidator(_check_email)]
NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
EpochMillis = Annotated[StrictInt, Field(gt=0)]
