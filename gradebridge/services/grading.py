"""
Scoring, review, time and cost helpers over grading results.
"""

import logging
from typing import Any, NamedTuple, Sequence, get_args

from gradebridge.schemas.grading import GradingResult
from gradebridge.schemas.types import AIProvider, GradingMethod

logger = logging.getLogger(__name__)

DEFAULT_REVIEW_THRESHOLD = 0.7
DEFAULT_TIME_PER_SUBMISSION_MS = 5000

# Relative effort of each grading method, auto grading = 1
METHOD_TIME_MULTIPLIERS: dict[str, int] = {
    "auto": 1,
    "manual": 10,
    "ai": 3,
    "hybrid": 5,
}

# Approximate USD per 1,000 tokens
COST_PER_1K_TOKENS: dict[str, dict[str, float]] = {
    "gemini": {"gemini-pro": 0.0005},
    "claude": {"claude-3-sonnet": 0.003},
    "openai": {"gpt-4": 0.03, "gpt-3.5-turbo": 0.002},
}
DEFAULT_COST_PER_1K_TOKENS = 0.001


class GradeSummary(NamedTuple):
    total_points: float
    max_points: float
    percentage: float


def is_valid_grading_method(method: Any) -> bool:
    return method in get_args(GradingMethod)


def calculate_grade_from_results(results: Sequence[GradingResult]) -> GradeSummary:
    """Sum earned and possible points; the percentage is 0 when nothing was possible."""
    total = sum(result.points_earned for result in results)
    possible = sum(result.points_possible for result in results)
    percentage = total / possible * 100 if possible > 0 else 0
    return GradeSummary(total_points=total, max_points=possible, percentage=percentage)


def needs_human_review(result: GradingResult, threshold: float = DEFAULT_REVIEW_THRESHOLD) -> bool:
    """True when the grader reported a confidence below ``threshold``.

    Results without a confidence (manual or rule-based grading) never need review.
    """
    return result.confidence is not None and result.confidence < threshold


def estimate_batch_grading_time(
    submission_count: int,
    method: GradingMethod,
    average_time_per_submission: float = DEFAULT_TIME_PER_SUBMISSION_MS,
) -> float:
    """Estimated milliseconds to grade ``submission_count`` submissions with ``method``."""
    if method not in METHOD_TIME_MULTIPLIERS:
        raise ValueError(f"Unknown grading method: {method!r}")
    return submission_count * average_time_per_submission * METHOD_TIME_MULTIPLIERS[method]


def calculate_grading_cost(tokens_used: int, provider: AIProvider, model: str) -> float:
    """Approximate cost in USD of ``tokens_used`` tokens on ``provider``/``model``."""
    rate = COST_PER_1K_TOKENS.get(provider, {}).get(model)
    if rate is None:
        logger.debug(f"No token rate for {provider}/{model}, using {DEFAULT_COST_PER_1K_TOKENS} per 1K")
        rate = DEFAULT_COST_PER_1K_TOKENS
    return tokens_used / 1000 * rate
