"""Prompt assembly from the lesson-generation template."""

import re
from pathlib import Path

from lesson_planner.errors import DocumentNotFound

PLACEHOLDERS = (
    "lesson_content",
    "voice_and_tone",
    "repository_structure",
    "target_repo",
    "branch_name",
)

# Literal markers only; no other template syntax is recognised
_MARKER_RE = re.compile(
    "|".join(re.escape("{{" + name + "}}") for name in PLACEHOLDERS)
)


def render_prompt(
    template: str,
    *,
    lesson_content: str,
    voice_and_tone: str,
    repository_structure: str,
    target_repo: str,
    branch_name: str,
) -> str:
    """Replace every ``{{name}}`` marker in the template with its value.

    Substitution is a single left-to-right pass, so substituted text is
    never rescanned: a marker appearing inside the lesson content is kept
    as written.

    Args:
        template: Template text containing the markers
        lesson_content: Lesson specification text
        voice_and_tone: Voice and tone guide
        repository_structure: Repository structure guide
        target_repo: Path of the target repository
        branch_name: Branch the agent should work on

    Returns:
        The assembled prompt
    """
    values = {
        "lesson_content": lesson_content,
        "voice_and_tone": voice_and_tone,
        "repository_structure": repository_structure,
        "target_repo": target_repo,
        "branch_name": branch_name,
    }
    return _MARKER_RE.sub(lambda m: values[m.group(0)[2:-2]], template)


def build_prompt(
    template_path: Path,
    *,
    lesson_content: str,
    voice_and_tone: str,
    repository_structure: str,
    target_repo: str,
    branch_name: str,
) -> str:
    """Read the template file and render it.

    Raises:
        DocumentNotFound: If the template cannot be read
    """
    try:
        template = Path(template_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentNotFound(template_path) from e

    return render_prompt(
        template,
        lesson_content=lesson_content,
        voice_and_tone=voice_and_tone,
        repository_structure=repository_structure,
        target_repo=target_repo,
        branch_name=branch_name,
    )


def save_prompt(prompt: str, path: Path) -> Path:
    """Write a copy of the prompt for inspection, overwriting any old copy."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(prompt, encoding="utf-8")
    return path
