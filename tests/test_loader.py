"""Tests for lesson and document loading."""

import pytest

from lesson_planner.errors import DocumentNotFound, InvalidLesson, LessonNotFound
from lesson_planner.loader import (
    REQUIRED_SECTIONS,
    load_doc,
    load_lesson,
    missing_sections,
)


def test_load_lesson_returns_content_unchanged(workspace):
    content = load_lesson("caching")
    assert content == (workspace / "lessons" / "caching.md").read_text()


def test_load_lesson_section_order_does_not_matter(workspace, make_lesson):
    content = "preamble\n" + make_lesson(tuple(reversed(REQUIRED_SECTIONS)))
    (workspace / "lessons" / "reversed.md").write_text(content)

    assert load_lesson("reversed") == content


@pytest.mark.parametrize("section", REQUIRED_SECTIONS)
def test_load_lesson_missing_section(workspace, make_lesson, section):
    sections = [s for s in REQUIRED_SECTIONS if s != section]
    (workspace / "lessons" / "partial.md").write_text(make_lesson(sections))

    with pytest.raises(InvalidLesson) as exc_info:
        load_lesson("partial")

    assert exc_info.value.section == section
    assert f"Missing required section: {section}" in str(exc_info.value)


def test_load_lesson_sections_are_case_sensitive(workspace, make_lesson):
    content = make_lesson().replace("# Commits", "# commits")
    (workspace / "lessons" / "lowercase.md").write_text(content)

    with pytest.raises(InvalidLesson, match="# Commits"):
        load_lesson("lowercase")


def test_load_lesson_not_found(workspace):
    with pytest.raises(LessonNotFound) as exc_info:
        load_lesson("nope")

    assert exc_info.value.name == "nope"
    assert "lessons/nope.md" in str(exc_info.value)


def test_load_lesson_not_utf8(workspace):
    (workspace / "lessons" / "binary.md").write_bytes(b"\xff\xfe\x00# Metadata")

    with pytest.raises(InvalidLesson, match="Could not read lesson file"):
        load_lesson("binary")


def test_load_lesson_custom_dir(tmp_path, make_lesson):
    (tmp_path / "elsewhere.md").write_text(make_lesson())
    assert "# Metadata" in load_lesson("elsewhere", lessons_dir=tmp_path)


def test_missing_sections(make_lesson):
    assert missing_sections(make_lesson()) == []
    assert missing_sections("# Metadata\n# Validation") == [
        "# Inspiration",
        "# Initial State",
        "# Optimizations",
        "# Commits",
        "# Lesson Structure",
    ]


def test_load_doc(workspace):
    assert load_doc("voice-and-tone") == "Be friendly.\n"


def test_load_doc_missing(workspace):
    with pytest.raises(DocumentNotFound) as exc_info:
        load_doc("missing")

    assert str(exc_info.value) == "Document not found: docs/missing.md"


def test_load_doc_not_utf8(workspace):
    (workspace / "docs" / "bad.md").write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(DocumentNotFound):
        load_doc("bad")
