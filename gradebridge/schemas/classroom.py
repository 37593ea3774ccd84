"""
Classroom data schemas.

Used across the Google Classroom API, Apps Script and backend boundaries.
"""

from typing import Literal
from uuid import UUID

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from gradebridge.schemas.types import (
    CamelModel,
    CourseState,
    DateTimeStr,
    EmailAddress,
    EpochMillis,
    NonEmptyStr,
    UrlStr,
)


class GoogleClassroom(CamelModel):
    id: NonEmptyStr
    name: NonEmptyStr
    owner_id: NonEmptyStr
    course_state: CourseState
    enrollment_code: StrictStr | None = None
    section: StrictStr | None = None
    description: StrictStr | None = None
    room: StrictStr | None = None
    description_heading: StrictStr | None = None
    alternate_link: UrlStr | None = None
    teacher_group_email: EmailAddress | None = None
    guardian_invitations_enabled: StrictBool | None = None
    creation_time: DateTimeStr | None = None
    update_time: DateTimeStr | None = None


class ClassroomBase(CamelModel):
    user_id: EmailAddress
    course_id: NonEmptyStr
    owner_id: NonEmptyStr
    enrollment_code: StrictStr | None = None
    alternate_link: UrlStr | None = None
    teacher_group_email: EmailAddress | None = None
    course_state: CourseState
    creation_time: DateTimeStr | None = None
    update_time: DateTimeStr | None = None


class ClassroomCreate(ClassroomBase):
    course_name: StrictStr = Field(min_length=1, max_length=200)
    room: StrictStr | None = Field(default=None, max_length=100)
    section: StrictStr | None = Field(default=None, max_length=100)
    description_heading: StrictStr | None = Field(default=None, max_length=500)
    description: StrictStr | None = Field(default=None, max_length=2000)
    guardian_invitations_enabled: StrictBool | None = None


class SyncedClassroom(ClassroomBase):
    course_name: NonEmptyStr
    room: StrictStr | None = None
    section: StrictStr | None = None
    description_heading: StrictStr | None = None
    description: StrictStr | None = None
    guardian_invitations_enabled: StrictBool = False
    last_sync_time: EpochMillis


class Classroom(SyncedClassroom):
    id: UUID


class ClassroomSync(CamelModel):
    user_id: EmailAddress
    classrooms: list[GoogleClassroom]
    sync_timestamp: EpochMillis
    sync_source: Literal["google_classroom"]


class ClassroomQuery(CamelModel):
    user_id: EmailAddress
    course_id: StrictStr | None = None
    course_state: CourseState | None = None
    limit: StrictInt = Field(default=50, gt=0, le=100)
    offset: StrictInt = Field(default=0, ge=0)


class ClassroomStats(CamelModel):
    classroom_id: UUID
    total_assignments: StrictInt = Field(ge=0)
    total_submissions: StrictInt = Field(ge=0)
    average_score: StrictFloat | None = Field(default=None, ge=0, le=100)
    last_activity: EpochMillis | None = None
    student_count: StrictInt = Field(ge=0)
