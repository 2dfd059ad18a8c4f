"""Command-line interface for lesson-planner."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from lesson_planner import __version__
from lesson_planner.config import DEFAULT_MODEL, load_config
from lesson_planner.errors import LessonPlannerError
from lesson_planner.pipeline import (
    GenerationRequest,
    default_branch_name,
    generate_lesson,
)
from lesson_planner.utils.logging import get_logger


@click.group()
@click.version_option(__version__, prog_name="lesson-planner")
def main():
    """Generate lesson repositories from lesson specifications."""
    pass


@main.command()
@click.option(
    "--lesson",
    required=True,
    help="Name of lesson file in lessons/ (without .md extension)",
)
@click.option(
    "--target-repo",
    required=True,
    type=click.Path(file_okay=False),
    help="Path to target repository (will be created if it doesn't exist)",
)
@click.option("--branch", help="Branch name (default: lesson-YYYYMMDD-HHMMSS)")
@click.option(
    "--model",
    default=None,
    help=f"Goose model to use (default: {DEFAULT_MODEL})",
)
@click.option(
    "--push-to-origin",
    is_flag=True,
    help="Push branch to origin after generation",
)
@click.option(
    "--validate-prompts",
    is_flag=True,
    help="Run prompt validation cycle with subagents",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Maximum agent run time in seconds (default: no limit)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: .lesson-planner.yaml if present)",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write log records to this file",
)
def generate(
    lesson: str,
    target_repo: str,
    branch: Optional[str],
    model: Optional[str],
    push_to_origin: bool,
    validate_prompts: bool,
    timeout: Optional[float],
    config_file: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
):
    """Generate a lesson repository."""
    branch_name = branch or default_branch_name()
    get_logger(verbose=verbose, log_file=log_file)
    console = Console(emoji=False, soft_wrap=True)
    err_console = Console(stderr=True, emoji=False, soft_wrap=True)

    try:
        config = load_config(config_file)
        request = GenerationRequest(
            lesson=lesson,
            target_repo=target_repo,
            branch=branch_name,
            model=model or config.default_model,
            push_to_origin=push_to_origin,
            validate_prompts=validate_prompts,
            timeout=timeout,
        )
        generate_lesson(request, config=config, console=console)
    except LessonPlannerError as e:
        err_console.print(f"❌ Error: {escape(e.message)}")
        sys.exit(e.exit_code)
    except OSError as e:
        err_console.print(f"❌ Error: {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
