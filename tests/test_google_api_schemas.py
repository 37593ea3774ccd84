import pytest

from gradebridge.core.exceptions import ValidationError
from gradebridge.schemas.google_api import GoogleApiRetryConfig, GoogleBatchRequest, GoogleListResponse
from gradebridge.services.validation import (
    is_valid_apps_script_payload,
    is_valid_google_course_work,
    parse,
    validate_apps_script_payload,
    validate_google_course,
    validate_google_course_work,
    validate_google_form,
    validate_google_form_response,
    validate_retry_config,
)

COURSE = {
    "id": "course_123",
    "name": "Biology",
    "ownerId": "teacher_123",
    "creationTime": "2024-01-15T08:00:00.000Z",
    "updateTime": "2024-01-16T10:30:00.000Z",
    "courseState": "ACTIVE",
    "alternateLink": "https://classroom.google.com/c/course_123",
    "teacherFolder": {
        "id": "folder_1",
        "title": "Biology Teachers",
        "alternateLink": "https://drive.google.com/drive/folders/folder_1",
    },
}

COURSE_WORK = {
    "courseId": "course_123",
    "id": "cw_1",
    "title": "Cell Structure Quiz",
    "state": "PUBLISHED",
    "alternateLink": "https://classroom.google.com/c/course_123/a/cw_1",
    "creationTime": "2024-02-01T12:00:00.000Z",
    "updateTime": "2024-02-01T12:00:00.000Z",
    "dueDate": {"year": 2024, "month": 2, "day": 9},
    "dueTime": {"hours": 4, "minutes": 59, "seconds": 0},
    "maxPoints": 20,
    "workType": "ASSIGNMENT",
    "creatorUserId": "teacher_123",
}

SUBMISSION = {
    "courseId": "course_123",
    "courseWorkId": "cw_1",
    "id": "sub_1",
    "userId": "student_1",
    "creationTime": "2024-02-02T12:00:00.000Z",
    "updateTime": "2024-02-03T12:00:00.000Z",
    "state": "TURNED_IN",
    "late": False,
    "alternateLink": "https://classroom.google.com/c/course_123/a/cw_1/submissions/sub_1",
    "submissionHistory": [
        {"stateHistory": {"state": "TURNED_IN", "stateTimestamp": "2024-02-03T12:00:00.000Z"}},
    ],
}

FORM = {
    "formId": "form_1",
    "revisionId": "00000042",
    "info": {"title": "Cell Structure Quiz"},
    "settings": {"quizSettings": {"isQuiz": True}},
    "items": [
        {
            "itemId": "item_1",
            "title": "Which organelle produces ATP?",
            "questionItem": {
                "question": {
                    "questionId": "q_1",
                    "required": True,
                    "grading": {
                        "pointValue": 2,
                        "correctAnswers": {"answers": [{"value": "Mitochondria"}]},
                    },
                    "choiceQuestion": {
                        "type": "RADIO",
                        "options": [{"value": "Mitochondria"}, {"value": "Ribosome"}],
                    },
                }
            },
        },
        {"itemId": "item_2", "title": "Section break"},
    ],
}

FORM_RESPONSE = {
    "formId": "form_1",
    "responseId": "resp_1",
    "createTime": "2024-02-05T09:00:00.000Z",
    "lastSubmittedTime": "2024-02-05T09:10:00.000Z",
    "respondentEmail": "student@school.edu",
    "answers": {
        "q_1": {"questionId": "q_1", "textAnswers": {"answers": [{"value": "Mitochondria"}]}},
    },
}


def _payload(**overrides):
    payload = {
        "operation": "assignment_sync",
        "timestamp": 1707123456789,
        "userId": "t@school.edu",
        "data": {"courses": [COURSE], "courseWork": [COURSE_WORK]},
        "metadata": {"syncSource": "google_apps_script", "version": "1.2.0", "totalRecords": 2},
    }
    payload.update(overrides)
    return payload


class TestClassroomApiRecords:
    def test_course(self):
        course = validate_google_course(COURSE)
        assert course.teacher_folder.title == "Biology Teachers"

    def test_course_requires_owner_and_timestamps(self):
        bad = {k: v for k, v in COURSE.items() if k not in ("ownerId", "creationTime")}
        with pytest.raises(ValidationError) as exc:
            validate_google_course(bad)
        assert sorted(exc.value.paths()) == ["creationTime", "ownerId"]

    def test_course_work_with_seconds(self):
        work = validate_google_course_work(COURSE_WORK)
        assert work.due_time.seconds == 0
        assert work.max_points == 20

    def test_course_work_midnight_time_omits_fields(self):
        work = validate_google_course_work({**COURSE_WORK, "dueTime": {}})
        assert (work.due_time.hours, work.due_time.minutes) == (0, 0)

    def test_course_work_not_modifiable_is_not_an_api_value(self):
        assert not is_valid_google_course_work({**COURSE_WORK, "submissionModificationMode": "NOT_MODIFIABLE"})

    def test_submission(self):
        from gradebridge.schemas.google_api import GoogleStudentSubmission

        submission = parse(GoogleStudentSubmission, SUBMISSION)
        assert submission.submission_history[0].state_history.state == "TURNED_IN"

        with pytest.raises(ValidationError):
            parse(GoogleStudentSubmission, {**SUBMISSION, "state": "GRADED"})


class TestFormsApiRecords:
    def test_form(self):
        form = validate_google_form(FORM)
        question = form.items[0].question_item.question
        assert question.grading.correct_answers.answers[0].value == "Mitochondria"
        assert question.choice_question.type == "RADIO"
        assert form.items[1].question_item is None

    def test_form_bad_choice_type(self):
        bad = {**FORM, "items": [{
            "itemId": "item_1",
            "questionItem": {"question": {"questionId": "q", "choiceQuestion": {"type": "DROPDOWN", "options": []}}},
        }]}
        with pytest.raises(ValidationError) as exc:
            validate_google_form(bad)
        assert exc.value.paths() == ["items.0.questionItem.question.choiceQuestion.type"]

    def test_form_response(self):
        response = validate_google_form_response(FORM_RESPONSE)
        assert response.answers["q_1"].text_answers.answers[0].value == "Mitochondria"

    def test_form_response_bad_email(self):
        with pytest.raises(ValidationError) as exc:
            validate_google_form_response({**FORM_RESPONSE, "respondentEmail": "nobody"})
        assert exc.value.paths() == ["respondentEmail"]


class TestAppsScriptSyncPayload:
    def test_valid(self):
        payload = validate_apps_script_payload(_payload())
        assert payload.operation == "assignment_sync"
        assert payload.data.course_work[0].id == "cw_1"
        assert payload.data.submissions is None
        assert payload.metadata.total_records == 2

    def test_full_data(self):
        data = {
            "courses": [COURSE],
            "courseWork": [COURSE_WORK],
            "submissions": [SUBMISSION],
            "forms": [FORM],
            "responses": [FORM_RESPONSE],
        }
        assert is_valid_apps_script_payload(_payload(data=data))

    @pytest.mark.parametrize("overrides,path", [
        ({"operation": "grade_sync"}, "operation"),
        ({"timestamp": 0}, "timestamp"),
        ({"userId": "teacher"}, "userId"),
    ])
    def test_rejections(self, overrides, path):
        with pytest.raises(ValidationError) as exc:
            validate_apps_script_payload(_payload(**overrides))
        assert exc.value.paths() == [path]

    def test_metadata_constraints(self):
        metadata = {"syncSource": "manual", "version": "1", "totalRecords": -1, "syncDuration": 0}
        with pytest.raises(ValidationError) as exc:
            validate_apps_script_payload(_payload(metadata=metadata))
        assert sorted(exc.value.paths()) == [
            "metadata.syncDuration", "metadata.syncSource", "metadata.totalRecords",
        ]

    def test_nested_record_violation(self):
        data = {"courseWork": [{**COURSE_WORK, "workType": "ESSAY"}]}
        with pytest.raises(ValidationError) as exc:
            validate_apps_script_payload(_payload(data=data))
        assert exc.value.paths() == ["data.courseWork.0.workType"]


class TestEnvelopes:
    def test_list_response(self):
        page = parse(GoogleListResponse, {"items": [{"id": "1"}], "nextPageToken": "abc"})
        assert page.next_page_token == "abc"

    def test_batch_request(self):
        batch = parse(GoogleBatchRequest, {"requests": [
            {"method": "GET", "url": "https://classroom.googleapis.com/v1/courses"},
        ]})
        assert batch.requests[0].method == "GET"
        with pytest.raises(ValidationError):
            parse(GoogleBatchRequest, {"requests": [{"method": "HEAD", "url": "https://x.test"}]})


class TestRetryConfig:
    def test_defaults(self):
        config = validate_retry_config({})
        assert config.max_retries == 3
        assert config.backoff_multiplier == 2
        assert config.initial_delay == 1000
        assert config.max_delay == 30000
        assert config.retryable_errors == [429, 500, 502, 503, 504]

    @pytest.mark.parametrize("max_retries", [0, 6])
    def test_max_retries_bounds(self, max_retries):
        with pytest.raises(ValidationError):
            validate_retry_config({"maxRetries": max_retries})

    def test_delay_grows_until_capped(self):
        config = GoogleApiRetryConfig()
        assert [config.delay_for_attempt(n) for n in range(7)] == [
            1000, 2000, 4000, 8000, 16000, 30000, 30000,
        ]

    def test_should_retry(self):
        config = validate_retry_config({"maxRetries": 2, "retryableErrors": [503]})
        assert config.should_retry(503, 0)
        assert config.should_retry(503, 1)
        assert not config.should_retry(503, 2)
        assert not config.should_retry(404, 0)
