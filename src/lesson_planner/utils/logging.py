"""Logging setup for lesson-planner.

Progress lines and agent output go to stdout; log records go to stderr
(and optionally a file) so they never interleave with the agent's output.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "lesson_planner"
PROMPT_PREVIEW_CHARS = 60


def get_logger(
    verbose: bool = False, log_file: Optional[Path] = None
) -> logging.Logger:
    """Configure the package logger shared by all lesson_planner modules.

    Module loggers (``lesson_planner.pipeline`` etc.) propagate here.

    Args:
        verbose: Log at DEBUG instead of WARNING
        log_file: Optional file that receives every record at DEBUG level

    Returns:
        The configured ``lesson_planner`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def describe_command(cmd: list[str], prompt: str) -> str:
    """Render a command for logs with the inline prompt shortened."""
    parts = []
    for arg in cmd:
        if arg == prompt and len(prompt) > PROMPT_PREVIEW_CHARS:
            preview = prompt[:PROMPT_PREVIEW_CHARS].replace("\n", " ")
            parts.append(f"'{preview}...' ({len(prompt)} chars)")
        elif " " in arg or "\n" in arg:
            parts.append(repr(arg))
        else:
            parts.append(arg)
    return " ".join(parts)


def log_execution_start(logger: logging.Logger, step: str, command: str) -> None:
    """Record the command a subprocess step is about to run."""
    logger.info(f"{step}: running {command}")


def log_execution_end(
    logger: logging.Logger,
    step: str,
    exit_code: int,
    duration_seconds: float,
    timed_out: bool = False,
) -> None:
    """Record how a subprocess step ended.

    Failures are logged at ERROR so they show without ``--verbose``.
    """
    if timed_out:
        logger.error(f"{step}: timed out after {duration_seconds:.1f}s, process killed")
    elif exit_code == 0:
        logger.info(f"{step}: completed in {duration_seconds:.1f}s")
    else:
        logger.error(
            f"{step}: failed with exit code {exit_code} after {duration_seconds:.1f}s"
        )
