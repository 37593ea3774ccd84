"""
Assignment data schemas.

Covers Google Classroom assignments, the questions of their linked Google
Forms, and the internal assignment record kept by the grading backend.
"""

from typing import Literal
from uuid import UUID

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from gradebridge.schemas.types import (
    AnswerRuleType,
    AssigneeMode,
    AssignmentState,
    CamelModel,
    DateTimeStr,
    EmailAddress,
    EpochMillis,
    NonEmptyStr,
    QuestionType,
    SubmissionModificationMode,
    UrlStr,
    WorkType,
)


class AnswerRule(CamelModel):
    type: AnswerRuleType
    value: StrictStr
    points: StrictFloat


class Question(CamelModel):
    question_id: NonEmptyStr
    title: NonEmptyStr
    description: StrictStr | None = None
    required: StrictBool = False
    question_type: QuestionType
    choices: list[StrictStr] | None = None
    correct_answer: StrictStr | None = None
    correct_answers: list[StrictStr] | None = None
    points: StrictInt = Field(default=0, ge=0)
    partial_credit: StrictBool = False
    case_sensitive: StrictBool = False
    exact_match: StrictBool = False
    grading_rules: list[AnswerRule] | None = None


class DueDate(CamelModel):
    year: StrictInt = Field(ge=1, le=9999)
    month: StrictInt = Field(ge=1, le=12)
    day: StrictInt = Field(ge=1, le=31)


class DueTime(CamelModel):
    hours: StrictInt = Field(ge=0, le=23)
    minutes: StrictInt = Field(ge=0, le=59)


class GoogleAssignment(CamelModel):
    """A Classroom courseWork item as handed over for import."""

    id: NonEmptyStr
    course_id: NonEmptyStr
    title: NonEmptyStr
    description: StrictStr | None = None
    state: AssignmentState
    alternate_link: UrlStr | None = None
    creation_time: DateTimeStr | None = None
    update_time: DateTimeStr | None = None
    due_date: DueDate | None = None
    due_time: DueTime | None = None
    max_points: StrictFloat | None = Field(default=None, gt=0)
    work_type: WorkType
    submission_modification_mode: SubmissionModificationMode | None = None
    assignee_mode: AssigneeMode | None = None
    creator_user_id: StrictStr | None = None


class ClassroomSyncConfig(CamelModel):
    sync_grades: StrictBool = True
    notify_students: StrictBool = False
    include_comments: StrictBool = True


class PublicationConfig(CamelModel):
    auto_publish: StrictBool = False
    publish_delay: StrictInt = Field(default=0, ge=0)


class PublicationStatus(CamelModel):
    published: StrictBool = False
    published_at: EpochMillis | None = None
    published_by: StrictStr | None = None


class AssignmentBase(CamelModel):
    user_id: EmailAddress
    course_id: NonEmptyStr
    course_work_id: NonEmptyStr
    form_id: NonEmptyStr
    title: StrictStr = Field(min_length=1, max_length=500)
    description: StrictStr | None = Field(default=None, max_length=2000)
    subject: StrictStr | None = Field(default=None, max_length=100)
    state: AssignmentState
    alternate_link: UrlStr | None = None
    creation_time: DateTimeStr | None = None
    update_time: DateTimeStr | None = None
    due_date: DateTimeStr | None = None
    max_points: StrictFloat | None = Field(default=None, gt=0)
    work_type: WorkType
    submission_modification_mode: SubmissionModificationMode | None = None
    assignee_mode: AssigneeMode | None = None
    creator_user_id: StrictStr | None = None
    questions: list[Question] | None = None
    classroom_sync_config: ClassroomSyncConfig | None = None


class AssignmentCreate(AssignmentBase):
    """Payload for creating or updating an assignment."""


class SyncedAssignment(AssignmentBase):
    """An assignment imported from Classroom, before storage assigns its id."""

    last_sync_time: EpochMillis


class Assignment(SyncedAssignment):
    id: UUID
    publication_config: PublicationConfig | None = None
    publication_status: PublicationStatus | None = None


class AssignmentQuery(CamelModel):
    user_id: EmailAddress
    course_id: StrictStr | None = None
    assignment_id: UUID | None = None
    state: AssignmentState | None = None
    work_type: WorkType | None = None
    limit: StrictInt = Field(default=50, gt=0, le=100)
    offset: StrictInt = Field(default=0, ge=0)
    sort_by: Literal["creationTime", "updateTime", "dueDate", "title"] = "updateTime"
    sort_order: Literal["asc", "desc"] = "desc"


class AssignmentStats(CamelModel):
    """Aggregate over an assignment's submissions; recomputed, never edited."""

    assignment_id: UUID
    total_submissions: StrictInt = Field(ge=0)
    graded_submissions: StrictInt = Field(ge=0)
    average_score: StrictFloat | None = Field(default=None, ge=0, le=100)
    highest_score: StrictFloat | None = Field(default=None, ge=0, le=100)
    lowest_score: StrictFloat | None = Field(default=None, ge=0, le=100)
    submission_rate: StrictFloat = Field(ge=0, le=1)
    on_time_submissions: StrictInt = Field(ge=0)
    late_submissions: StrictInt = Field(ge=0)
    last_submission_time: EpochMillis | None = None
