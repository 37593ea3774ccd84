"""
Google API schema definitions.

Validates records returned by the Google Classroom and Google Forms APIs, and
the batches an Apps Script automation pushes to the backend.
"""

from typing import Any, Literal

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from gradebridge.schemas.types import (
    AssigneeMode,
    AssignmentState,
    CamelModel,
    CourseState,
    DateTimeStr,
    EmailAddress,
    EpochMillis,
    SubmissionState,
    SyncOperation,
    UrlStr,
    WorkType,
)


class GoogleApiErrorBody(CamelModel):
    code: StrictInt
    message: StrictStr
    status: StrictStr
    details: list[Any] | None = None


class GoogleApiError(CamelModel):
    error: GoogleApiErrorBody


# Classroom

class DriveFolder(CamelModel):
    id: StrictStr
    title: StrictStr
    alternate_link: UrlStr


class GoogleCourse(CamelModel):
    id: StrictStr
    name: StrictStr
    section: StrictStr | None = None
    description_heading: StrictStr | None = None
    description: StrictStr | None = None
    room: StrictStr | None = None
    owner_id: StrictStr
    creation_time: DateTimeStr
    update_time: DateTimeStr
    enrollment_code: StrictStr | None = None
    course_state: CourseState
    alternate_link: UrlStr
    teacher_group_email: EmailAddress | None = None
    course_group_email: EmailAddress | None = None
    teacher_folder: DriveFolder | None = None
    guardians_enabled: StrictBool | None = None
    calendar_id: StrictStr | None = None


class CalendarDate(CamelModel):
    year: StrictInt
    month: StrictInt
    day: StrictInt


class TimeOfDay(CamelModel):
    # The API omits zero-valued fields, so midnight arrives as {}
    hours: StrictInt = 0
    minutes: StrictInt = 0
    seconds: StrictInt | None = None
    nanos: StrictInt | None = None


class IndividualStudentsOptions(CamelModel):
    student_ids: list[StrictStr]


class GoogleCourseWork(CamelModel):
    course_id: StrictStr
    id: StrictStr
    title: StrictStr
    description: StrictStr | None = None
    materials: list[Any] | None = None
    state: AssignmentState
    alternate_link: UrlStr
    creation_time: DateTimeStr
    update_time: DateTimeStr
    due_date: CalendarDate | None = None
    due_time: TimeOfDay | None = None
    max_points: StrictFloat | None = None
    work_type: WorkType
    associated_with_developer: StrictBool | None = None
    assignee_mode: AssigneeMode | None = None
    individual_students_options: IndividualStudentsOptions | None = None
    submission_modification_mode: Literal["MODIFIABLE_UNTIL_TURNED_IN", "MODIFIABLE"] | None = None
    creator_user_id: StrictStr
    topic_id: StrictStr | None = None


class TextAnswerSubmission(CamelModel):
    answer: StrictStr


class AssignmentSubmission(CamelModel):
    attachments: list[Any] | None = None


class StateHistory(CamelModel):
    state: SubmissionState
    state_timestamp: DateTimeStr
    actor_user_id: StrictStr | None = None


class SubmissionHistoryEntry(CamelModel):
    state_history: StateHistory


class GoogleStudentSubmission(CamelModel):
    course_id: StrictStr
    course_work_id: StrictStr
    id: StrictStr
    user_id: StrictStr
    creation_time: DateTimeStr
    update_time: DateTimeStr
    state: SubmissionState
    late: StrictBool | None = None
    draft_grade: StrictFloat | None = None
    assigned_grade: StrictFloat | None = None
    alternate_link: UrlStr
    course_work_type: WorkType | None = None
    associated_with_developer: StrictBool | None = None
    assignment_submission: AssignmentSubmission | None = None
    short_answer_submission: TextAnswerSubmission | None = None
    multiple_choice_submission: TextAnswerSubmission | None = None
    submission_history: list[SubmissionHistoryEntry] | None = None


# Forms

class FormInfo(CamelModel):
    title: StrictStr
    description: StrictStr | None = None
    document_title: StrictStr | None = None


class QuizSettings(CamelModel):
    is_quiz: StrictBool | None = None


class FormSettings(CamelModel):
    quiz_settings: QuizSettings | None = None


class AnswerValue(CamelModel):
    value: StrictStr


class CorrectAnswers(CamelModel):
    answers: list[AnswerValue]


class FeedbackText(CamelModel):
    text: StrictStr


class Feedback(CamelModel):
    feedback: FeedbackText


class Grading(CamelModel):
    point_value: StrictFloat
    correct_answers: CorrectAnswers | None = None
    when_right: Feedback | None = None
    when_wrong: Feedback | None = None


class OptionImage(CamelModel):
    content_uri: UrlStr
    alt_text: StrictStr | None = None


class ChoiceOption(CamelModel):
    value: StrictStr
    image: OptionImage | None = None
    is_other: StrictBool | None = None


class ChoiceQuestion(CamelModel):
    type: Literal["RADIO", "CHECKBOX"]
    options: list[ChoiceOption]
    shuffle: StrictBool | None = None


class TextQuestion(CamelModel):
    paragraph: StrictBool | None = None


class ScaleQuestion(CamelModel):
    low: StrictInt
    high: StrictInt
    low_label: StrictStr | None = None
    high_label: StrictStr | None = None


class DateQuestion(CamelModel):
    include_time: StrictBool | None = None
    include_year: StrictBool | None = None


class TimeQuestion(CamelModel):
    duration: StrictBool | None = None


class FileUploadQuestion(CamelModel):
    folder_id: StrictStr
    types: list[Literal["PDF", "IMAGE", "VIDEO", "AUDIO", "DOCUMENT", "PRESENTATION", "SPREADSHEET"]]
    max_files: StrictInt | None = None
    max_file_size: StrictInt | None = None


class FormQuestion(CamelModel):
    question_id: StrictStr
    required: StrictBool | None = None
    grading: Grading | None = None
    choice_question: ChoiceQuestion | None = None
    text_question: TextQuestion | None = None
    scale_question: ScaleQuestion | None = None
    date_question: DateQuestion | None = None
    time_question: TimeQuestion | None = None
    file_upload_question: FileUploadQuestion | None = None


class QuestionItem(CamelModel):
    question: FormQuestion


class FormItem(CamelModel):
    item_id: StrictStr
    title: StrictStr | None = None
    description: StrictStr | None = None
    question_item: QuestionItem | None = None


class GoogleForm(CamelModel):
    form_id: StrictStr
    info: FormInfo
    settings: FormSettings | None = None
    items: list[FormItem]
    linked_sheet_id: StrictStr | None = None
    revision_id: StrictStr


class TextAnswers(CamelModel):
    answers: list[AnswerValue]


class FileUploadAnswer(CamelModel):
    file_id: StrictStr
    file_name: StrictStr
    mime_type: StrictStr


class FileUploadAnswers(CamelModel):
    answers: list[FileUploadAnswer]


class FormAnswer(CamelModel):
    question_id: StrictStr
    text_answers: TextAnswers | None = None
    file_upload_answers: FileUploadAnswers | None = None


class GoogleFormResponse(CamelModel):
    form_id: StrictStr
    response_id: StrictStr
    create_time: DateTimeStr
    last_submitted_time: DateTimeStr
    respondent_email: EmailAddress | None = None
    answers: dict[str, FormAnswer]


# Apps Script sync payload

class SyncData(CamelModel):
    courses: list[GoogleCourse] | None = None
    course_work: list[GoogleCourseWork] | None = None
    submissions: list[GoogleStudentSubmission] | None = None
    forms: list[GoogleForm] | None = None
    responses: list[GoogleFormResponse] | None = None


class SyncMetadata(CamelModel):
    sync_source: Literal["google_apps_script"]
    version: StrictStr
    total_records: StrictInt = Field(ge=0)
    sync_duration: StrictFloat | None = Field(default=None, gt=0)


class AppsScriptSyncPayload(CamelModel):
    operation: SyncOperation
    timestamp: EpochMillis
    user_id: EmailAddress
    data: SyncData
    metadata: SyncMetadata


# Generic API envelopes

class GoogleListResponse(CamelModel):
    items: list[Any] | None = None
    next_page_token: StrictStr | None = None


class BatchRequestEntry(CamelModel):
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
    url: UrlStr
    headers: dict[str, StrictStr] | None = None
    body: Any = None


class GoogleBatchRequest(CamelModel):
    requests: list[BatchRequestEntry]


class GoogleApiRetryConfig(CamelModel):
    """Exponential backoff parameters for a Google API client.

    Pure data: nothing in this package retries. Delays are in milliseconds.
    """

    max_retries: StrictInt = Field(default=3, gt=0, le=5)
    backoff_multiplier: StrictFloat = Field(default=2, gt=0)
    initial_delay: StrictFloat = Field(default=1000, gt=0)
    max_delay: StrictFloat = Field(default=30000, gt=0)
    retryable_errors: list[StrictInt] = Field(default_factory=lambda: [429, 500, 502, 503, 504])

    def delay_for_attempt(self, attempt: int) -> float:
        """Backoff before retry number ``attempt`` (0-based), capped at ``max_delay``."""
        return min(self.initial_delay * self.backoff_multiplier ** attempt, self.max_delay)

    def should_retry(self, status_code: int, attempt: int) -> bool:
        return status_code in self.retryable_errors and attempt < self.max_retries
