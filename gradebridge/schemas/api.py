"""Response envelopes and pagination shapes of the grading backend's API."""

from typing import Any, Literal
from uuid import UUID

from pydantic import Field, StrictBool, StrictInt, StrictStr

from gradebridge.schemas.types import CamelModel, EpochMillis


class ApiSuccessResponse(CamelModel):
    success: Literal[True]
    data: Any = None
    timestamp: EpochMillis
    request_id: UUID | None = None


class ApiErrorBody(CamelModel):
    code: StrictStr
    message: StrictStr
    details: Any = None


class ApiErrorResponse(CamelModel):
    success: Literal[False]
    error: ApiErrorBody
    timestamp: EpochMillis
    request_id: UUID | None = None


class PaginationRequest(CamelModel):
    limit: StrictInt = Field(default=50, gt=0, le=100)
    offset: StrictInt = Field(default=0, ge=0)
    cursor: StrictStr | None = None


class PaginationResponse(CamelModel):
    items: list[Any]
    total: StrictInt = Field(ge=0)
    has_more: StrictBool
    next_cursor: StrictStr | None = None
    limit: StrictInt = Field(gt=0)
    offset: StrictInt = Field(ge=0)
