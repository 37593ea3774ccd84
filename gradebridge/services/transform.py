"""
Transformations from Google API records to the internal record shapes.

Inputs are expected to have passed their own schema already. Their fields
are copied through as they are; only the ids supplied by the caller are
checked.
"""

import logging
import time
from datetime import datetime, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from gradebridge.core.config import settings
from gradebridge.core.exceptions import ValidationError, Violation
from gradebridge.schemas.assignment import DueDate, DueTime, GoogleAssignment, SyncedAssignment
from gradebridge.schemas.classroom import GoogleClassroom, SyncedClassroom
from gradebridge.schemas.google_api import GoogleApiError
from gradebridge.schemas.types import CamelModel, EmailAddress, NonEmptyStr, parse_iso_datetime
from gradebridge.services.validation import parse, safe_parse

logger = logging.getLogger(__name__)


class _ClassroomOwner(CamelModel):
    user_id: EmailAddress


class _AssignmentOwner(_ClassroomOwner):
    form_id: NonEmptyStr


def _check_ids(schema: str, owner: type[CamelModel], data: dict) -> None:
    try:
        parse(owner, data)
    except ValidationError as e:
        raise ValidationError(schema, e.violations) from e


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def get_local_timezone() -> tzinfo | None:
    """Zone used for Classroom due dates; None means the host's local time."""
    if settings.local_timezone:
        return ZoneInfo(settings.local_timezone)
    return None


def normalize_google_datetime(value: str) -> datetime:
    """Parse a Google API timestamp into an aware datetime."""
    return parse_iso_datetime(value)


def format_date_for_google(value: datetime) -> str:
    """Format as ISO 8601 in UTC with millisecond precision, e.g. 2024-12-01T23:59:00.000Z.

    Naive datetimes are taken as local time.
    """
    if value.tzinfo is None:
        value = value.astimezone()
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compose_due_date(
    due_date: DueDate | None,
    due_time: DueTime | None = None,
    tz: tzinfo | None = None,
) -> str | None:
    """Combine Classroom's separate due date and time into one timestamp.

    Without a time the due instant is midnight of the date. Without a date
    there is no due instant, even if a time is present.
    """
    if due_date is None:
        return None

    hours, minutes = (due_time.hours, due_time.minutes) if due_time else (0, 0)
    if tz is None:
        tz = get_local_timezone()

    try:
        due = datetime(due_date.year, due_date.month, due_date.day, hours, minutes, tzinfo=tz)
    except ValueError as e:
        logger.warning(f"Due date {due_date.year}-{due_date.month}-{due_date.day} is not a calendar date: {e}")
        raise ValidationError(
            "GoogleAssignment",
            [Violation("dueDate", "date_out_of_range", due_date.model_dump(), str(e))],
        ) from e

    return format_date_for_google(due)


def transform_google_assignment_to_internal(
    google_assignment: GoogleAssignment,
    user_id: str,
    form_id: str,
) -> SyncedAssignment:
    """Build the internal assignment record for a Classroom courseWork item.

    The record has no ``id`` yet; storage assigns one. A malformed
    ``user_id`` or ``form_id`` raises ``ValidationError``; the courseWork
    fields are not checked again.
    """
    _check_ids("SyncedAssignment", _AssignmentOwner, {"userId": user_id, "formId": form_id})
    assignment = SyncedAssignment.model_construct(
        user_id=user_id,
        course_id=google_assignment.course_id,
        course_work_id=google_assignment.id,
        form_id=form_id,
        title=google_assignment.title,
        description=google_assignment.description,
        subject=None,
        state=google_assignment.state,
        alternate_link=google_assignment.alternate_link,
        creation_time=google_assignment.creation_time,
        update_time=google_assignment.update_time,
        due_date=compose_due_date(google_assignment.due_date, google_assignment.due_time),
        max_points=google_assignment.max_points,
        work_type=google_assignment.work_type,
        submission_modification_mode=google_assignment.submission_modification_mode,
        assignee_mode=google_assignment.assignee_mode,
        creator_user_id=google_assignment.creator_user_id,
        last_sync_time=now_ms(),
    )
    logger.debug(
        f"Transformed courseWork {google_assignment.id} in course {google_assignment.course_id} "
        f"(due={assignment.due_date})"
    )
    return assignment


def transform_google_classroom_to_internal(
    google_classroom: GoogleClassroom,
    user_id: str,
) -> SyncedClassroom:
    """Build the internal classroom record for a Classroom course."""
    _check_ids("SyncedClassroom", _ClassroomOwner, {"userId": user_id})
    return SyncedClassroom.model_construct(
        user_id=user_id,
        course_id=google_classroom.id,
        course_name=google_classroom.name,
        owner_id=google_classroom.owner_id,
        enrollment_code=google_classroom.enrollment_code,
        room=google_classroom.room,
        section=google_classroom.section,
        description_heading=google_classroom.description_heading,
        description=google_classroom.description,
        alternate_link=google_classroom.alternate_link,
        teacher_group_email=google_classroom.teacher_group_email,
        course_state=google_classroom.course_state,
        guardian_invitations_enabled=bool(google_classroom.guardian_invitations_enabled),
        creation_time=google_classroom.creation_time,
        update_time=google_classroom.update_time,
        last_sync_time=now_ms(),
    )


def extract_google_api_error(data: Any) -> GoogleApiError | None:
    """Return the error body if ``data`` is a Google API error response."""
    return safe_parse(GoogleApiError, data).data


def is_valid_google_api_response(data: Any) -> bool:
    """True unless ``data`` is a Google API error response."""
    return extract_google_api_error(data) is None
