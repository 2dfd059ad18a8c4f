"""Execution utilities for running the goose agent."""

import logging
import os
import shutil
import subprocess
import sys
import threading
import time
from pathlib import Path
from typing import BinaryIO, Optional

from lesson_planner.errors import AgentInvocationFailed
from lesson_planner.utils.logging import (
    describe_command,
    log_execution_end,
    log_execution_start,
)

PROMPT_MARKER_FILE = ".lesson-planner-prompt.md"
CHUNK_SIZE = 4096

logger = logging.getLogger(__name__)


def build_agent_command(
    agent_path: str, prompt: str, model: str, provider: str = "anthropic"
) -> list[str]:
    """Build the argument list for a non-interactive goose run."""
    return [
        agent_path,
        "run",
        "--text",
        prompt,
        "--provider",
        provider,
        "--model",
        model,
    ]


def _forward(source: BinaryIO, dest: BinaryIO, name: str) -> None:
    """Copy bytes from a pipe to a stream as they arrive, until EOF.

    If the destination stops accepting writes (e.g. a closed pipe), the
    source is still drained so the child never blocks on a full pipe.
    """
    fd = source.fileno()
    writable = True
    try:
        while True:
            chunk = os.read(fd, CHUNK_SIZE)
            if not chunk:
                break
            if not writable:
                continue
            try:
                dest.write(chunk)
                dest.flush()
            except (OSError, ValueError) as e:
                writable = False
                logger.warning(f"{name}: output stream closed ({e}), discarding output")
    finally:
        source.close()


def _start_reader(source: BinaryIO, dest: BinaryIO, name: str) -> threading.Thread:
    thread = threading.Thread(
        target=_forward, args=(source, dest, name), name=name, daemon=True
    )
    thread.start()
    return thread


def invoke_agent(
    prompt: str,
    model: str,
    working_dir: Path,
    agent_command: str = "goose",
    provider: str = "anthropic",
    marker_filename: str = PROMPT_MARKER_FILE,
    timeout: Optional[float] = None,
    stdout: Optional[BinaryIO] = None,
    stderr: Optional[BinaryIO] = None,
) -> None:
    """Run the agent with the given prompt inside the working directory.

    The child's stdout and stderr are forwarded live by two reader threads
    while this thread waits for the child to exit.

    Args:
        prompt: Prompt text passed to the agent
        model: Model identifier for the agent
        working_dir: Directory the agent runs in (created if missing)
        agent_command: Agent executable, looked up in PATH
        provider: Provider identifier passed to the agent
        marker_filename: Name of the prompt copy written into working_dir
        timeout: Maximum execution time in seconds (None waits forever)
        stdout: Binary stream for the agent's stdout (default: sys.stdout)
        stderr: Binary stream for the agent's stderr (default: sys.stderr)

    Raises:
        AgentInvocationFailed: If the agent is missing, exits non-zero or
            times out
    """
    working_dir = Path(working_dir)
    working_dir.mkdir(parents=True, exist_ok=True)

    prompt_file = working_dir / marker_filename
    prompt_file.write_text(prompt, encoding="utf-8")
    logger.debug(f"Prompt written to {prompt_file}")

    agent_path = shutil.which(agent_command)
    if not agent_path:
        raise AgentInvocationFailed(
            127,
            message=f"{agent_command} not found in PATH. "
            "Install goose: https://block.github.io/goose/",
        )

    cmd = build_agent_command(agent_path, prompt, model, provider)

    out_stream = stdout if stdout is not None else sys.stdout.buffer
    err_stream = stderr if stderr is not None else sys.stderr.buffer

    log_execution_start(logger, "agent run", describe_command(cmd, prompt))
    start = time.time()

    try:
        process = subprocess.Popen(
            cmd,
            cwd=working_dir,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise AgentInvocationFailed(
            127, message=f"Failed to start {agent_command}: {e}"
        ) from e

    readers = [
        _start_reader(process.stdout, out_stream, "agent-stdout"),
        _start_reader(process.stderr, err_stream, "agent-stderr"),
    ]

    timed_out = False
    try:
        exit_code = process.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        timed_out = True
        process.kill()
        process.wait()
        exit_code = 124

    for reader in readers:
        reader.join()

    log_execution_end(
        logger, "agent run", exit_code, time.time() - start, timed_out=timed_out
    )

    if timed_out:
        raise AgentInvocationFailed(
            exit_code,
            timed_out=True,
            message=f"Agent invocation timed out after {timeout}s",
        )
    if exit_code != 0:
        raise AgentInvocationFailed(exit_code)

