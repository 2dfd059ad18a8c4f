"""Lesson generation pipeline.

Runs the generation steps in a fixed order, stopping at the first failure:

    load lesson -> load docs -> build prompt -> save prompt copy
    -> invoke agent -> (optional) git push

Files written before a failure are left in place.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from lesson_planner.config import DEFAULT_MODEL, PlannerConfig
from lesson_planner.loader import load_doc, load_lesson
from lesson_planner.prompt import build_prompt, save_prompt
from lesson_planner.utils.execution import invoke_agent
from lesson_planner.utils.git import git_push

logger = logging.getLogger(__name__)

VOICE_AND_TONE_DOC = "voice-and-tone"
REPOSITORY_STRUCTURE_DOC = "repository-structure"


def _status(console: Console, text: str = "") -> None:
    # User-supplied values may contain :shortcodes: or long paths
    console.print(text, emoji=False, soft_wrap=True)


def default_branch_name(now: Optional[datetime] = None) -> str:
    """Branch name derived from the local time, e.g. lesson-20250102-030405."""
    if now is None:
        now = datetime.now()
    return f"lesson-{now.strftime('%Y%m%d-%H%M%S')}"


@dataclass
class GenerationRequest:
    """Parameters for a single lesson generation run."""

    lesson: str
    target_repo: str
    branch: str
    model: str = DEFAULT_MODEL
    push_to_origin: bool = False
    validate_prompts: bool = False
    timeout: Optional[float] = None


def generate_lesson(
    request: GenerationRequest,
    config: Optional[PlannerConfig] = None,
    console: Optional[Console] = None,
) -> str:
    """Generate a lesson repository.

    Args:
        request: What to generate and where
        config: File-system layout and agent settings
        console: Console for progress output

    Returns:
        The assembled prompt that was passed to the agent

    Raises:
        LessonPlannerError: On the first failing step
        OSError: If a prompt copy cannot be written
    """
    config = config or PlannerConfig()
    console = console or Console(emoji=False, soft_wrap=True)

    _status(console, f"🚀 Generating lesson: {escape(request.lesson)}")
    _status(console, f"📁 Target repository: {escape(request.target_repo)}")
    _status(console, f"🌿 Branch: {escape(request.branch)}")
    _status(console, f"🤖 Model: {escape(request.model)}")
    _status(console)

    if request.validate_prompts:
        logger.debug("--validate-prompts given; no validation cycle is configured")

    _status(console, "📖 Loading lesson specification...")
    lesson_content = load_lesson(request.lesson, config.lessons_dir)

    _status(console, "📚 Loading documentation...")
    voice_and_tone = load_doc(VOICE_AND_TONE_DOC, config.docs_dir)
    repository_structure = load_doc(REPOSITORY_STRUCTURE_DOC, config.docs_dir)

    _status(console, "✍️  Building prompt for Goose...")
    prompt = build_prompt(
        config.template_path,
        lesson_content=lesson_content,
        voice_and_tone=voice_and_tone,
        repository_structure=repository_structure,
        target_repo=request.target_repo,
        branch_name=request.branch,
    )

    prompt_path = save_prompt(prompt, config.prompt_copy_path)
    _status(console, f"💾 Prompt saved to: {escape(str(prompt_path))}")
    _status(console)

    _status(console, "🦆 Invoking Goose...")
    invoke_agent(
        prompt,
        request.model,
        Path(request.target_repo),
        agent_command=config.agent_command,
        provider=config.provider,
        marker_filename=config.marker_filename,
        timeout=request.timeout,
    )

    if request.push_to_origin:
        _status(console)
        _status(console, "📤 Pushing branch to origin...")
        git_push(Path(request.target_repo), request.branch, logger=logger)

    _status(console)
    _status(console, "✅ Lesson generation complete!")
    _status(console, f"📁 Repository: {escape(request.target_repo)}")
    _status(console, f"🌿 Branch: {escape(request.branch)}")
    return prompt
