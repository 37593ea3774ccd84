"""
Builders for the backend's API response envelopes.

Every backend function answers with either a success envelope carrying its
result or an error envelope carrying a machine-readable code; both are
stamped with the current time in epoch milliseconds.
"""

import base64
import json
import logging
from functools import wraps
from typing import Any, Callable
from uuid import UUID

from pydantic import BaseModel

from gradebridge.core.exceptions import ValidationError
from gradebridge.schemas.api import (
    ApiErrorBody,
    ApiErrorResponse,
    ApiSuccessResponse,
    PaginationRequest,
    PaginationResponse,
)
from gradebridge.services import transform
from gradebridge.services.validation import parse

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


def create_success_response(data: Any, request_id: UUID | None = None) -> ApiSuccessResponse:
    return ApiSuccessResponse(success=True, data=data, timestamp=transform.now_ms(), request_id=request_id)


def create_error_response(
    code: str,
    message: str,
    details: Any = None,
    request_id: UUID | None = None,
) -> ApiErrorResponse:
    return ApiErrorResponse(
        success=False,
        error=ApiErrorBody(code=code, message=message, details=details),
        timestamp=transform.now_ms(),
        request_id=request_id,
    )


def is_api_error(response: ApiSuccessResponse | ApiErrorResponse) -> bool:
    return not response.success


def encode_cursor(offset: int) -> str:
    return base64.b64encode(json.dumps({"offset": offset}).encode()).decode()


def decode_cursor(cursor: str) -> int:
    """Offset stored in a cursor made by ``encode_cursor``."""
    try:
        return json.loads(base64.b64decode(cursor, validate=True))["offset"]
    except (ValueError, TypeError, KeyError) as e:
        raise ValueError(f"Malformed pagination cursor: {cursor!r}") from e


def create_paginated_response(items: list, total: int, request: PaginationRequest) -> PaginationResponse:
    """Wrap one page of ``items``; the cursor points at the next page if there is one."""
    has_more = request.offset + request.limit < total
    return PaginationResponse(
        items=items,
        total=total,
        has_more=has_more,
        next_cursor=encode_cursor(request.offset + request.limit) if has_more else None,
        limit=request.limit,
        offset=request.offset,
    )


def with_validation(model: type[BaseModel]) -> Callable:
    """Decorate a handler so it takes raw input and answers with an envelope.

    The input is validated against ``model`` first; a rejection becomes a
    ``VALIDATION_ERROR`` envelope listing the violations, and any exception
    from the handler becomes an ``INTERNAL_ERROR`` envelope.
    """

    def decorator(handler: Callable[[Any], Any]) -> Callable[[Any], ApiSuccessResponse | ApiErrorResponse]:
        @wraps(handler)
        def wrapper(data: Any) -> ApiSuccessResponse | ApiErrorResponse:
            try:
                validated = parse(model, data)
            except ValidationError as e:
                return create_error_response(
                    VALIDATION_ERROR,
                    "Invalid input parameters",
                    [violation._asdict() for violation in e.violations],
                )
            try:
                return create_success_response(handler(validated))
            except Exception as e:
                logger.error(f"{handler.__name__} failed: {e}", exc_info=True)
                return create_error_response(INTERNAL_ERROR, str(e) or "Unknown error occurred")

        return wrapper

    return decorator
