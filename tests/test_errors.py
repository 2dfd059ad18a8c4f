"""Tests for the error taxonomy."""

from pathlib import Path

import pytest

from lesson_planner.errors import (
    AgentInvocationFailed,
    ConfigError,
    DocumentNotFound,
    GitPushFailed,
    InvalidLesson,
    LessonNotFound,
    LessonPlannerError,
)


def test_all_errors_share_base():
    for error in (
        DocumentNotFound(Path("docs/x.md")),
        LessonNotFound("x", Path("lessons/x.md")),
        InvalidLesson("bad"),
        AgentInvocationFailed(1),
        GitPushFailed(1),
        ConfigError("bad config"),
    ):
        assert isinstance(error, LessonPlannerError)


def test_messages():
    assert str(DocumentNotFound("docs/a.md")) == "Document not found: docs/a.md"
    assert str(LessonNotFound("a", "lessons/a.md")) == "Lesson not found: lessons/a.md"
    assert str(InvalidLesson("oops")) == "Invalid lesson format: oops"


@pytest.mark.parametrize(
    "status,expected",
    [(1, 1), (2, 2), (255, 255), (-9, 1), (0, 1), (256, 1)],
)
def test_process_failure_exit_codes(status, expected):
    assert AgentInvocationFailed(status).exit_code == expected
    assert GitPushFailed(status).exit_code == expected


def test_non_process_errors_exit_one():
    assert InvalidLesson("x").exit_code == 1
    assert ConfigError("x").exit_code == 1
