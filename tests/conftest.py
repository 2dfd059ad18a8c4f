"""Shared fixtures for lesson-planner tests."""

import logging

import pytest

from lesson_planner.loader import REQUIRED_SECTIONS

TEMPLATE = """# Lesson generation

Work in {{target_repo}} on branch {{branch_name}}.

## Lesson
{{lesson_content}}

## Voice
{{voice_and_tone}}

## Structure
{{repository_structure}}
"""


def _make_lesson(sections=REQUIRED_SECTIONS) -> str:
    return "\n\n".join(f"{section}\n\nDetails for {section[2:]}." for section in sections)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Create a lesson-planner workspace and chdir into it."""
    root = tmp_path / "planner"
    (root / "lessons").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "templates").mkdir()

    (root / "lessons" / "caching.md").write_text(_make_lesson())
    (root / "docs" / "voice-and-tone.md").write_text("Be friendly.\n")
    (root / "docs" / "repository-structure.md").write_text("src/ and tests/\n")
    (root / "templates" / "lesson-generation-prompt.md").write_text(TEMPLATE)

    monkeypatch.chdir(root)
    return root


@pytest.fixture
def make_lesson():
    """Factory for lesson text containing the given section headers."""
    return _make_lesson


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches to the package logger between tests."""
    yield
    logger = logging.getLogger("lesson_planner")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
