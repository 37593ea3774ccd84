from gradebridge.schemas.assignment import (
    Question, GoogleAssignment, Assignment, AssignmentCreate, SyncedAssignment,
    AssignmentQuery, AssignmentStats,
)
from gradebridge.schemas.grading import (
    GradingConfig, AIGradingConfig, GradingResult, AIGradingSettings, AIGradingRequest,
    AIGradingResponse, BatchGradingJob, FeedbackTemplate, Rubric,
)
from gradebridge.schemas.google_api import (
    GoogleCourse, GoogleCourseWork, GoogleStudentSubmission, GoogleForm,
    GoogleFormResponse, AppsScriptSyncPayload, GoogleApiError, GoogleApiRetryConfig,
)
from gradebridge.schemas.classroom import (
    GoogleClassroom, Classroom, ClassroomCreate, SyncedClassroom, ClassroomSync,
    ClassroomQuery, ClassroomStats,
)
from gradebridge.schemas.user import User, CreateUser, UserPreferences, IntegrationSettings, UserConfig, UserQuery
from gradebridge.schemas.api import ApiSuccessResponse, ApiErrorResponse, PaginationRequest, PaginationResponse

__all__ = [
    "Question", "GoogleAssignment", "Assignment", "AssignmentCreate", "SyncedAssignment",
    "AssignmentQuery", "AssignmentStats",
    "GradingConfig", "AIGradingConfig", "GradingResult", "AIGradingSettings", "AIGradingRequest",
    "AIGradingResponse", "BatchGradingJob", "FeedbackTemplate", "Rubric",
    "GoogleCourse", "GoogleCourseWork", "GoogleStudentSubmission", "GoogleForm",
    "GoogleFormResponse", "AppsScriptSyncPayload", "GoogleApiError", "GoogleApiRetryConfig",
    "GoogleClassroom", "Classroom", "ClassroomCreate", "SyncedClassroom", "ClassroomSync",
    "ClassroomQuery", "ClassroomStats",
    "User", "CreateUser", "UserPreferences", "IntegrationSettings", "UserConfig", "UserQuery",
    "ApiSuccessResponse", "ApiErrorResponse", "PaginationRequest", "PaginationResponse",
]
