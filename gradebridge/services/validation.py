"""
Validation entry points.

Each record kind has a strict form (``validate_*``) that returns the typed
record or raises ``ValidationError`` with every violation found, and a
predicate form (``is_valid_*``) that never raises.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from gradebridge.core.exceptions import ValidationError, Violation, format_violations
from gradebridge.schemas.api import ApiErrorResponse, ApiSuccessResponse, PaginationRequest
from gradebridge.schemas.assignment import (
    Assignment,
    AssignmentCreate,
    AssignmentQuery,
    AssignmentStats,
    GoogleAssignment,
    Question,
)
from gradebridge.schemas.classroom import Classroom, ClassroomCreate, ClassroomSync, GoogleClassroom
from gradebridge.schemas.google_api import (
    AppsScriptSyncPayload,
    GoogleApiRetryConfig,
    GoogleCourse,
    GoogleCourseWork,
    GoogleForm,
    GoogleFormResponse,
)
from gradebridge.schemas.grading import (
    AIGradingRequest,
    AIGradingResponse,
    AIGradingSettings,
    BatchGradingJob,
    FeedbackTemplate,
    GradingConfig,
    GradingResult,
    Rubric,
)
from gradebridge.schemas.user import CreateUser, User, UserConfig, UserQuery

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ParseResult(Generic[ModelT]):
    ok: bool
    data: ModelT | None = None
    error: str | None = None
    violations: list[Violation] = field(default_factory=list)


def violations_from(exc: PydanticValidationError) -> list[Violation]:
    """Flatten pydantic's error list into (path, kind, value, message) tuples."""
    violations = []
    for err in exc.errors():
        kind = err["type"]
        violations.append(
            Violation(
                path=".".join(str(part) for part in err["loc"]),
                kind=kind,
                value=None if kind == "missing" else err.get("input"),
                message=err["msg"],
            )
        )
    return violations


def parse(model: type[ModelT], data: Any) -> ModelT:
    """Validate ``data`` against ``model`` or raise ``ValidationError``."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        violations = violations_from(e)
        logger.debug(f"{model.__name__} rejected: {format_violations(violations)}")
        raise ValidationError(model.__name__, violations) from e


def safe_parse(model: type[ModelT], data: Any) -> ParseResult[ModelT]:
    """Like ``parse`` but reports failure in the result instead of raising."""
    try:
        return ParseResult(ok=True, data=parse(model, data))
    except ValidationError as e:
        return ParseResult(ok=False, error=format_violations(e.violations), violations=e.violations)


def is_valid(model: type[BaseModel], data: Any) -> bool:
    return safe_parse(model, data).ok


def apply_defaults(model: type[BaseModel], data: dict) -> dict:
    """Return a copy of ``data`` with the model's declared defaults filled in.

    Only top-level fields are filled and nothing is validated; keys use the
    wire (camelCase) names.
    """
    filled = dict(data)
    for name, info in model.model_fields.items():
        key = info.alias or name
        if key in filled or name in filled or info.is_required():
            continue
        default = info.get_default(call_default_factory=True)
        if default is not None:
            filled[key] = default
    return filled


# Assignments

def validate_question(data: Any) -> Question:
    return parse(Question, data)


def is_valid_question(data: Any) -> bool:
    return is_valid(Question, data)


def validate_google_assignment(data: Any) -> GoogleAssignment:
    return parse(GoogleAssignment, data)


def is_valid_google_assignment(data: Any) -> bool:
    return is_valid(GoogleAssignment, data)


def validate_assignment(data: Any) -> Assignment:
    return parse(Assignment, data)


def is_valid_assignment(data: Any) -> bool:
    return is_valid(Assignment, data)


def validate_assignment_mutation(data: Any) -> AssignmentCreate:
    return parse(AssignmentCreate, data)


def is_valid_assignment_mutation(data: Any) -> bool:
    return is_valid(AssignmentCreate, data)


def validate_assignment_query(data: Any) -> AssignmentQuery:
    return parse(AssignmentQuery, data)


def is_valid_assignment_query(data: Any) -> bool:
    return is_valid(AssignmentQuery, data)


def validate_assignment_stats(data: Any) -> AssignmentStats:
    return parse(AssignmentStats, data)


def is_valid_assignment_stats(data: Any) -> bool:
    return is_valid(AssignmentStats, data)


# Grading

def validate_grading_config(data: Any) -> GradingConfig:
    return parse(GradingConfig, data)


def is_valid_grading_config(data: Any) -> bool:
    return is_valid(GradingConfig, data)


def validate_grading_result(data: Any) -> GradingResult:
    return parse(GradingResult, data)


def is_valid_grading_result(data: Any) -> bool:
    return is_valid(GradingResult, data)


def validate_ai_grading_settings(data: Any) -> AIGradingSettings:
    return parse(AIGradingSettings, data)


def is_valid_ai_grading_settings(data: Any) -> bool:
    return is_valid(AIGradingSettings, data)


def validate_ai_grading_request(data: Any) -> AIGradingRequest:
    return parse(AIGradingRequest, data)


def is_valid_ai_grading_request(data: Any) -> bool:
    return is_valid(AIGradingRequest, data)


def validate_ai_grading_response(data: Any) -> AIGradingResponse:
    return parse(AIGradingResponse, data)


def is_valid_ai_grading_response(data: Any) -> bool:
    return is_valid(AIGradingResponse, data)


def validate_batch_grading_job(data: Any) -> BatchGradingJob:
    return parse(BatchGradingJob, data)


def is_valid_batch_grading_job(data: Any) -> bool:
    return is_valid(BatchGradingJob, data)


def validate_rubric(data: Any) -> Rubric:
    return parse(Rubric, data)


def is_valid_rubric(data: Any) -> bool:
    return is_valid(Rubric, data)


def validate_feedback_template(data: Any) -> FeedbackTemplate:
    return parse(FeedbackTemplate, data)


def is_valid_feedback_template(data: Any) -> bool:
    return is_valid(FeedbackTemplate, data)


# Google APIs

def validate_google_course(data: Any) -> GoogleCourse:
    return parse(GoogleCourse, data)


def is_valid_google_course(data: Any) -> bool:
    return is_valid(GoogleCourse, data)


def validate_google_course_work(data: Any) -> GoogleCourseWork:
    return parse(GoogleCourseWork, data)


def is_valid_google_course_work(data: Any) -> bool:
    return is_valid(GoogleCourseWork, data)


def validate_google_form(data: Any) -> GoogleForm:
    return parse(GoogleForm, data)


def is_valid_google_form(data: Any) -> bool:
    return is_valid(GoogleForm, data)


def validate_google_form_response(data: Any) -> GoogleFormResponse:
    return parse(GoogleFormResponse, data)


def is_valid_google_form_response(data: Any) -> bool:
    return is_valid(GoogleFormResponse, data)


def validate_apps_script_payload(data: Any) -> AppsScriptSyncPayload:
    return parse(AppsScriptSyncPayload, data)


def is_valid_apps_script_payload(data: Any) -> bool:
    return is_valid(AppsScriptSyncPayload, data)


def validate_retry_config(data: Any) -> GoogleApiRetryConfig:
    return parse(GoogleApiRetryConfig, data)


def is_valid_retry_config(data: Any) -> bool:
    return is_valid(GoogleApiRetryConfig, data)


# Classrooms

def validate_google_classroom(data: Any) -> GoogleClassroom:
    return parse(GoogleClassroom, data)


def is_valid_google_classroom(data: Any) -> bool:
    return is_valid(GoogleClassroom, data)


def validate_classroom(data: Any) -> Classroom:
    return parse(Classroom, data)


def is_valid_classroom(data: Any) -> bool:
    return is_valid(Classroom, data)


def validate_classroom_sync(data: Any) -> ClassroomSync:
    return parse(ClassroomSync, data)


def is_valid_classroom_sync(data: Any) -> bool:
    return is_valid(ClassroomSync, data)


def validate_classroom_mutation(data: Any) -> ClassroomCreate:
    return parse(ClassroomCreate, data)


def is_valid_classroom_mutation(data: Any) -> bool:
    return is_valid(ClassroomCreate, data)


# Users

def validate_user(data: Any) -> User:
    return parse(User, data)


def is_valid_user(data: Any) -> bool:
    return is_valid(User, data)


def validate_create_user(data: Any) -> CreateUser:
    return parse(CreateUser, data)


def is_valid_create_user(data: Any) -> bool:
    return is_valid(CreateUser, data)


def validate_user_config(data: Any) -> UserConfig:
    return parse(UserConfig, data)


def is_valid_user_config(data: Any) -> bool:
    return is_valid(UserConfig, data)


def validate_user_query(data: Any) -> UserQuery:
    return parse(UserQuery, data)


def is_valid_user_query(data: Any) -> bool:
    return is_valid(UserQuery, data)


# API envelopes

def validate_api_response(data: Any) -> ApiSuccessResponse | ApiErrorResponse:
    """Validate a success or error envelope, chosen by its ``success`` flag."""
    if isinstance(data, dict) and data.get("success") is False:
        return parse(ApiErrorResponse, data)
    return parse(ApiSuccessResponse, data)


def is_valid_api_response(data: Any) -> bool:
    return safe_parse(ApiErrorResponse, data).ok or safe_parse(ApiSuccessResponse, data).ok


def validate_pagination_request(data: Any) -> PaginationRequest:
    return parse(PaginationRequest, data)


def is_valid_pagination_request(data: Any) -> bool:
    return is_valid(PaginationRequest, data)
