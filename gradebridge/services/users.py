"""User record helpers."""

from typing import Any, get_args
from uuid import UUID

from gradebridge.schemas.types import UserRole
from gradebridge.schemas.user import IntegrationSettings, NewUserConfig, User, UserPreferences
from gradebridge.services import transform


def is_valid_user_role(role: Any) -> bool:
    return role in get_args(UserRole)


def sanitize_user_for_client(user: User) -> dict:
    """Wire form of ``user`` without its Google account id."""
    return user.model_dump(mode="json", by_alias=True, exclude={"google_id"})


def create_default_user_config(user_id: UUID) -> NewUserConfig:
    now = transform.now_ms()
    return NewUserConfig(
        user_id=user_id,
        preferences=UserPreferences(),
        integration_settings=IntegrationSettings(),
        last_active_time=now,
        created_time=now,
        updated_time=now,
    )
