"""Git operations for publishing generated lessons."""

import logging
import subprocess
import time
from pathlib import Path
from typing import Optional

from lesson_planner.errors import GitPushFailed
from lesson_planner.utils.logging import log_execution_end, log_execution_start


def git_push(
    repo_path: Path,
    branch: str,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Push a local branch to the same-named branch on origin.

    Output is captured and printed once git exits. No retries are made;
    the branch must already exist locally.

    Args:
        repo_path: Git repository path
        branch: Branch to push
        logger: Optional logger for messages

    Raises:
        GitPushFailed: If git is missing or exits non-zero
    """
    cmd = ["git", "push", "origin", f"{branch}:{branch}"]
    if logger:
        log_execution_start(logger, "git push", f"{' '.join(cmd)} (in {repo_path})")
    start = time.time()

    try:
        result = subprocess.run(
            cmd,
            cwd=repo_path,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise GitPushFailed(127, message=f"Failed to run git: {e}") from e

    if result.stdout:
        print(result.stdout)
    if result.stderr:
        print(result.stderr)

    if logger:
        log_execution_end(logger, "git push", result.returncode, time.time() - start)
    if result.returncode != 0:
        raise GitPushFailed(result.returncode)
