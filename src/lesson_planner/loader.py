"""Loading of lesson specifications and supporting documentation."""

from pathlib import Path

from lesson_planner.errors import DocumentNotFound, InvalidLesson, LessonNotFound

REQUIRED_SECTIONS = (
    "# Metadata",
    "# Inspiration",
    "# Initial State",
    "# Optimizations",
    "# Commits",
    "# Validation",
    "# Lesson Structure",
)


def missing_sections(content: str) -> list[str]:
    """Return required section headers not present in the lesson content."""
    return [section for section in REQUIRED_SECTIONS if section not in content]


def load_lesson(name: str, lessons_dir: Path = Path("lessons")) -> str:
    """Load a lesson specification by name.

    Args:
        name: Lesson name, without the ``.md`` extension
        lessons_dir: Directory holding lesson files

    Returns:
        The lesson text, unmodified

    Raises:
        LessonNotFound: If ``<lessons_dir>/<name>.md`` does not exist
        InvalidLesson: If the file is not valid UTF-8 or a section is missing
    """
    lesson_path = Path(lessons_dir) / f"{name}.md"

    if not lesson_path.is_file():
        raise LessonNotFound(name, lesson_path)

    try:
        content = lesson_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidLesson("Could not read lesson file") from e

    missing = missing_sections(content)
    if missing:
        raise InvalidLesson(
            f"Missing required section: {missing[0]}", section=missing[0]
        )

    return content


def load_doc(name: str, docs_dir: Path = Path("docs")) -> str:
    """Read ``<docs_dir>/<name>.md`` verbatim.

    Raises:
        DocumentNotFound: If the file is missing or cannot be decoded
    """
    doc_path = Path(docs_dir) / f"{name}.md"
    try:
        return doc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentNotFound(doc_path) from e
