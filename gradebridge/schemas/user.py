"""
User schemas: the teacher or student account, and its stored preferences
and integration settings.
"""

from typing import Literal
from uuid import UUID

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from gradebridge.schemas.types import (
    AIProvider,
    CamelModel,
    EmailAddress,
    EpochMillis,
    GradingMethod,
    UrlStr,
    UserRole,
)


class CreateUser(CamelModel):
    email: EmailAddress
    name: StrictStr = Field(min_length=1, max_length=100)
    role: UserRole
    avatar: UrlStr | None = None
    google_id: StrictStr | None = None
    domain: StrictStr | None = None
    school_id: StrictStr | None = None
    department: StrictStr | None = None


class User(CreateUser):
    id: UUID
    created_at: EpochMillis
    updated_at: EpochMillis
    last_active_at: EpochMillis | None = None
    is_active: StrictBool = True


class UserPreferences(CamelModel):
    auto_grade_on_submission: StrictBool = True
    send_grades_to_classroom: StrictBool = True
    notify_on_new_submissions: StrictBool = True
    default_partial_credit: StrictBool = False
    default_case_sensitive: StrictBool = False
    default_exact_match: StrictBool = False

    theme: Literal["light", "dark", "system"] = "system"
    language: StrictStr = "en"
    timezone: StrictStr = "UTC"

    email_notifications: StrictBool = True
    push_notifications: StrictBool = False
    weekly_digest: StrictBool = True

    default_grading_method: GradingMethod = "auto"
    ai_provider: AIProvider = "gemini"
    show_confidence_scores: StrictBool = True
    require_review_threshold: StrictFloat = Field(default=0.7, ge=0, le=1)


class IntegrationSettings(CamelModel):
    google_classroom_enabled: StrictBool = True
    google_forms_enabled: StrictBool = True
    last_classroom_sync: EpochMillis | None = None
    last_forms_sync: EpochMillis | None = None
    # stored encrypted by the backend
    google_access_token: StrictStr | None = None
    google_refresh_token: StrictStr | None = None
    token_expires_at: EpochMillis | None = None
    webhook_url: UrlStr | None = None
    webhook_secret: StrictStr | None = None
    webhook_enabled: StrictBool = False


class NewUserConfig(CamelModel):
    """A user's configuration before storage assigns its id."""

    user_id: UUID
    preferences: UserPreferences
    integration_settings: IntegrationSettings
    last_active_time: EpochMillis
    created_time: EpochMillis
    updated_time: EpochMillis


class UserConfig(NewUserConfig):
    id: UUID


class UserQuery(CamelModel):
    role: UserRole | None = None
    domain: StrictStr | None = None
    school_id: StrictStr | None = None
    is_active: StrictBool | None = None
    # matched against name or email
    search: StrictStr | None = None
    limit: StrictInt = Field(default=50, gt=0, le=100)
    offset: StrictInt = Field(default=0, ge=0)
    sort_by: Literal["name", "email", "createdAt", "lastActiveAt"] = "name"
    sort_order: Literal["asc", "desc"] = "asc"
