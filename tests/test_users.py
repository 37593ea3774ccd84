import uuid

import pytest

from gradebridge.core.exceptions import ValidationError
from gradebridge.services.users import create_default_user_config, is_valid_user_role, sanitize_user_for_client
from gradebridge.services.validation import (
    is_valid_create_user,
    is_valid_user_query,
    validate_user,
    validate_user_config,
    validate_user_query,
)


@pytest.fixture()
def user_data():
    return {
        "id": str(uuid.uuid4()),
        "email": "Ms.Lee@School.EDU",
        "name": "Ms. Lee",
        "role": "teacher",
        "googleId": "1029384756",
        "createdAt": 1705305600000,
        "updatedAt": 1705305600000,
    }


class TestUserSchema:
    def test_valid(self, user_data):
        user = validate_user(user_data)
        assert user.is_active is True
        assert user.email == "Ms.Lee@School.EDU"

    @pytest.mark.parametrize("field,value", [
        ("email", "lee"),
        ("name", ""),
        ("role", "parent"),
        ("avatar", "not-a-url"),
    ])
    def test_rejections(self, user_data, field, value):
        user_data[field] = value
        with pytest.raises(ValidationError) as exc:
            validate_user(user_data)
        assert exc.value.paths() == [field]

    def test_create_needs_no_id(self, user_data):
        del user_data["id"], user_data["createdAt"], user_data["updatedAt"]
        assert is_valid_create_user(user_data)
        assert not is_valid_create_user({**user_data, "name": "n" * 101})

    def test_roles(self):
        assert is_valid_user_role("admin")
        assert not is_valid_user_role("parent")

    def test_sanitized_for_client(self, user_data):
        wire = sanitize_user_for_client(validate_user(user_data))
        assert "googleId" not in wire
        assert wire["email"] == "Ms.Lee@School.EDU"
        assert wire["isActive"] is True


class TestUserConfig:
    def test_default_config(self, frozen_clock):
        user_id = uuid.uuid4()
        config = create_default_user_config(user_id)
        assert config.user_id == user_id
        assert config.preferences.theme == "system"
        assert config.preferences.default_grading_method == "auto"
        assert config.preferences.require_review_threshold == 0.7
        assert config.integration_settings.google_classroom_enabled is True
        assert config.integration_settings.webhook_enabled is False
        assert config.created_time == config.updated_time == config.last_active_time == frozen_clock

    def test_stored_config_revalidates(self, frozen_clock):
        record = create_default_user_config(uuid.uuid4()).model_dump(mode="json", by_alias=True, exclude_none=True)
        record["id"] = str(uuid.uuid4())
        assert validate_user_config(record).preferences.language == "en"

    def test_preference_bounds(self, frozen_clock):
        record = create_default_user_config(uuid.uuid4()).model_dump(mode="json", by_alias=True, exclude_none=True)
        record["id"] = str(uuid.uuid4())
        record["preferences"]["requireReviewThreshold"] = 1.5
        record["integrationSettings"]["webhookUrl"] = "nowhere"
        with pytest.raises(ValidationError) as exc:
            validate_user_config(record)
        assert sorted(exc.value.paths()) == [
            "integrationSettings.webhookUrl",
            "preferences.requireReviewThreshold",
        ]


class TestUserQuery:
    def test_defaults(self):
        query = validate_user_query({})
        assert (query.limit, query.offset, query.sort_by, query.sort_order) == (50, 0, "name", "asc")

    def test_sort_field(self):
        assert not is_valid_user_query({"sortBy": "role"})
