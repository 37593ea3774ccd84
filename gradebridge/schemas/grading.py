"""
Grading schemas.

``GradingConfig`` is the grading policy attached to an assignment's form. The
remaining records describe grading outcomes: per-answer results, AI grading
requests and responses, batch jobs, rubrics and feedback templates.
"""

from typing import Any, Literal
from uuid import UUID

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from gradebridge.schemas.assignment import Question
from gradebridge.schemas.types import AIProvider, CamelModel, EpochMillis, GradingMethod, NonEmptyStr

GradableQuestionType = Literal["SHORT_ANSWER", "PARAGRAPH", "MULTIPLE_CHOICE", "CHECKBOX"]
BatchJobStatus = Literal["pending", "running", "completed", "failed", "cancelled"]


class QuestionGradingRule(CamelModel):
    question_id: StrictStr
    type: Literal["exact_match", "partial_match", "ai_grading", "manual_only"]
    config: dict[str, Any]


class AIGradingConfig(CamelModel):
    enabled: StrictBool = False
    provider: AIProvider | None = None
    model: StrictStr | None = None
    rubric: StrictStr | None = None
    max_tokens: StrictInt | None = Field(default=None, gt=0)


class GradingConfig(CamelModel):
    """Grading policy for one assignment's linked form."""

    id: UUID
    assignment_id: UUID
    form_id: NonEmptyStr
    form_title: NonEmptyStr
    form_description: StrictStr | None = None
    total_points: StrictInt = Field(ge=0)
    questions: list[Question]
    auto_grading_enabled: StrictBool = True
    last_updated: EpochMillis
    grading_rules: list[QuestionGradingRule] | None = None
    ai_grading_config: AIGradingConfig | None = None


class GradingResult(CamelModel):
    """The grade given to one answer of one submission."""

    id: UUID
    submission_id: UUID
    question_id: StrictStr
    method: GradingMethod
    points_earned: StrictFloat = Field(ge=0)
    points_possible: StrictFloat = Field(ge=0)
    percentage: StrictFloat = Field(ge=0, le=100)
    is_correct: StrictBool
    confidence: StrictFloat | None = Field(default=None, ge=0, le=1)
    feedback: StrictStr | None = None
    reasoning: StrictStr | None = None
    suggestions: list[StrictStr] | None = None
    graded_at: EpochMillis
    # user id, or "system" for automatic grading
    graded_by: StrictStr | None = None
    reviewed_by: StrictStr | None = None
    reviewed_at: EpochMillis | None = None
    needs_review: StrictBool = False


class RateLimit(CamelModel):
    requests_per_minute: StrictInt = Field(default=60, gt=0)
    requests_per_hour: StrictInt = Field(default=1000, gt=0)


class AIGradingSettings(CamelModel):
    """Account-wide AI grading settings, including spend limits."""

    enabled: StrictBool = False
    provider: AIProvider = "gemini"
    model: StrictStr = "gemini-pro"
    max_tokens: StrictInt = Field(default=1000, gt=0)
    temperature: StrictFloat = Field(default=0.1, ge=0, le=2)
    rubric: StrictStr | None = None
    custom_prompt: StrictStr | None = None
    confidence_threshold: StrictFloat = Field(default=0.7, ge=0, le=1)
    fallback_to_auto: StrictBool = True
    max_cost_per_submission: StrictFloat = Field(default=0.10, gt=0)
    daily_budget: StrictFloat = Field(default=50.0, gt=0)
    rate_limit: RateLimit


class AIGradingOverrides(CamelModel):
    """Per-request subset of ``AIGradingSettings``; every field is optional."""

    enabled: StrictBool | None = None
    provider: AIProvider | None = None
    model: StrictStr | None = None
    max_tokens: StrictInt | None = Field(default=None, gt=0)
    temperature: StrictFloat | None = Field(default=None, ge=0, le=2)
    rubric: StrictStr | None = None
    custom_prompt: StrictStr | None = None
    confidence_threshold: StrictFloat | None = Field(default=None, ge=0, le=1)
    fallback_to_auto: StrictBool | None = None
    max_cost_per_submission: StrictFloat | None = Field(default=None, gt=0)
    daily_budget: StrictFloat | None = Field(default=None, gt=0)
    rate_limit: RateLimit | None = None


class GradingContext(CamelModel):
    subject: StrictStr | None = None
    grade_level: StrictStr | None = None
    assignment_title: StrictStr | None = None
    additional_instructions: StrictStr | None = None


class AIGradingRequest(CamelModel):
    submission_id: UUID
    question_id: StrictStr
    question_text: NonEmptyStr
    question_type: GradableQuestionType
    student_response: StrictStr
    correct_answer: StrictStr | None = None
    rubric: StrictStr | None = None
    points_possible: StrictFloat = Field(ge=0)
    context: GradingContext | None = None
    config: AIGradingOverrides


class AIGradingResponse(CamelModel):
    question_id: StrictStr
    points_earned: StrictFloat = Field(ge=0)
    points_possible: StrictFloat = Field(ge=0)
    percentage: StrictFloat = Field(ge=0, le=100)
    is_correct: StrictBool
    confidence: StrictFloat = Field(ge=0, le=1)
    feedback: StrictStr
    reasoning: StrictStr
    suggestions: list[StrictStr]
    processing_time: StrictFloat = Field(gt=0)
    tokens_used: StrictInt = Field(ge=0)
    cost: StrictFloat = Field(ge=0)
    model: StrictStr
    provider: AIProvider


class BatchJobSettings(CamelModel):
    batch_size: StrictInt = Field(default=10, gt=0, le=50)
    max_concurrency: StrictInt = Field(default=3, gt=0, le=10)
    skip_already_graded: StrictBool = True
    retry_failed_submissions: StrictBool = True
    notify_on_completion: StrictBool = True
    publish_to_classroom: StrictBool = False
    ai_config: AIGradingOverrides | None = None


class BatchJobProgress(CamelModel):
    total_submissions: StrictInt = Field(ge=0)
    processed_count: StrictInt = Field(ge=0)
    success_count: StrictInt = Field(ge=0)
    failed_count: StrictInt = Field(ge=0)
    current_batch: StrictInt = Field(ge=0)
    total_batches: StrictInt = Field(ge=0)
    percentage: StrictFloat = Field(ge=0, le=100)


class BatchJobTiming(CamelModel):
    start_time: EpochMillis | None = None
    end_time: EpochMillis | None = None
    estimated_completion: EpochMillis | None = None
    average_time_per_submission: StrictFloat | None = Field(default=None, gt=0)


class BatchJobCosts(CamelModel):
    total_cost: StrictFloat = Field(default=0, ge=0)
    average_cost_per_submission: StrictFloat = Field(default=0, ge=0)
    tokens_used: StrictInt = Field(default=0, ge=0)


class BatchJobError(CamelModel):
    submission_id: UUID
    error: StrictStr
    timestamp: EpochMillis
    retry_count: StrictInt = Field(default=0, ge=0)


class BatchGradingJob(CamelModel):
    """Progress record of grading every submission of one assignment."""

    id: UUID
    assignment_id: UUID
    user_id: UUID
    status: BatchJobStatus
    method: GradingMethod
    settings: BatchJobSettings
    progress: BatchJobProgress
    timing: BatchJobTiming
    costs: BatchJobCosts
    errors: list[BatchJobError]
    results: list[GradingResult] | None = None
    created_at: EpochMillis
    updated_at: EpochMillis


class TemplateVariable(CamelModel):
    name: StrictStr
    description: StrictStr
    type: Literal["string", "number", "boolean"]
    required: StrictBool = False
    default_value: StrictStr | StrictFloat | StrictBool | None = None


class FeedbackTemplate(CamelModel):
    id: UUID
    user_id: UUID
    name: StrictStr = Field(min_length=1, max_length=100)
    description: StrictStr | None = None
    question_type: GradableQuestionType | Literal["ANY"]
    template: NonEmptyStr
    variables: list[TemplateVariable]
    is_public: StrictBool = False
    tags: list[StrictStr]
    usage_count: StrictInt = Field(default=0, ge=0)
    created_at: EpochMillis
    updated_at: EpochMillis


class RubricLevel(CamelModel):
    id: UUID
    name: NonEmptyStr
    description: StrictStr
    points: StrictFloat = Field(ge=0)


class RubricCriterion(CamelModel):
    id: UUID
    name: NonEmptyStr
    description: StrictStr
    weight: StrictFloat = Field(default=1, ge=0, le=1)
    levels: list[RubricLevel]


class Rubric(CamelModel):
    id: UUID
    user_id: UUID
    assignment_id: UUID | None = None
    name: StrictStr = Field(min_length=1, max_length=100)
    description: StrictStr | None = None
    criteria: list[RubricCriterion]
    total_points: StrictFloat = Field(ge=0)
    is_public: StrictBool = False
    tags: list[StrictStr]
    created_at: EpochMillis
    updated_at: EpochMillis
