import pytest

FROZEN_NOW_MS = 1_733_097_600_000


@pytest.fixture()
def frozen_clock(monkeypatch):
    import gradebridge.services.transform as transform

    monkeypatch.setattr(transform, "now_ms", lambda: FROZEN_NOW_MS)
    return FROZEN_NOW_MS


@pytest.fixture()
def question_data():
    return {
        "questionId": "q1",
        "title": "What is 2 + 2?",
        "questionType": "SHORT_ANSWER",
        "correctAnswer": "4",
        "points": 5,
    }


@pytest.fixture()
def google_assignment_data():
    return {
        "id": "cw1",
        "courseId": "c1",
        "title": "Quiz 1",
        "description": "Chapter 3 review",
        "state": "PUBLISHED",
        "alternateLink": "https://classroom.google.com/c/c1/a/cw1/details",
        "creationTime": "2024-11-20T15:00:00.000Z",
        "updateTime": "2024-11-21T09:30:00.000Z",
        "maxPoints": 100,
        "workType": "ASSIGNMENT",
        "submissionModificationMode": "MODIFIABLE_UNTIL_TURNED_IN",
        "assigneeMode": "ALL_STUDENTS",
        "creatorUserId": "teacher_123",
    }


@pytest.fixture()
def assignment_data(question_data):
    return {
        "id": "5f0c6f0e-8d3b-4a5e-9a52-3c1f2b7d9e10",
        "userId": "t@school.edu",
        "courseId": "c1",
        "courseWorkId": "cw1",
        "formId": "f1",
        "title": "Quiz 1",
        "state": "PUBLISHED",
        "dueDate": "2024-12-01T23:59:00.000Z",
        "maxPoints": 100,
        "workType": "ASSIGNMENT",
        "lastSyncTime": FROZEN_NOW_MS,
        "questions": [question_data],
    }


@pytest.fixture()
def grading_config_data(question_data):
    return {
        "id": "0b7e3c52-4a7e-4f8e-9d1c-6a2b5e8f1c34",
        "assignmentId": "5f0c6f0e-8d3b-4a5e-9a52-3c1f2b7d9e10",
        "formId": "f1",
        "formTitle": "Quiz 1 Form",
        "totalPoints": 5,
        "questions": [question_data],
        "lastUpdated": FROZEN_NOW_MS,
    }


@pytest.fixture()
def google_classroom_data():
    return {
        "id": "course_123",
        "name": "AP Computer Science",
        "ownerId": "teacher_123",
        "courseState": "ACTIVE",
        "enrollmentCode": "ABC123",
        "section": "Period 1",
        "room": "Room 101",
        "alternateLink": "https://classroom.google.com/c/course_123",
        "teacherGroupEmail": "apcs-teachers@school.edu",
        "creationTime": "2024-01-15T08:00:00.000Z",
        "updateTime": "2024-01-16T10:30:00.000Z",
    }
