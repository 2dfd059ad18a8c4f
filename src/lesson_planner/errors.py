"""
Error classes for lesson generation.

Every failure in the generation pipeline is terminal for the run. Each
error carries its structured payload (path, status code, reason) so the
CLI can render a message and pick an exit code.
"""


class LessonPlannerError(Exception):
    """Base exception for all lesson-planner errors."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DocumentNotFound(LessonPlannerError):
    """Raised when a documentation or template file cannot be read."""

    def __init__(self, path):
        """
        Initialize document error.

        Args:
            path: Path of the unreadable document
        """
        super().__init__(f"Document not found: {path}")
        self.path = path


class LessonNotFound(LessonPlannerError):
    """Raised when the lesson file does not exist."""

    def __init__(self, name: str, path):
        """
        Initialize lesson lookup error.

        Args:
            name: Lesson name as given on the command line
            path: Resolved lesson path that was checked
        """
        super().__init__(f"Lesson not found: {path}")
        self.name = name
        self.path = path


class InvalidLesson(LessonPlannerError):
    """Raised when a lesson cannot be decoded or lacks a required section."""

    def __init__(self, reason: str, section: str | None = None):
        super().__init__(f"Invalid lesson format: {reason}")
        self.reason = reason
        self.section = section


class _ProcessFailed(LessonPlannerError):
    """Shared behaviour for subprocess failures."""

    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.status = status

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Signals show up as negative return codes
        return self.status if 0 < self.status < 256 else 1


class AgentInvocationFailed(_ProcessFailed):
    """Raised when the agent process exits non-zero, times out or is missing."""

    def __init__(
        self, status: int, timed_out: bool = False, message: str | None = None
    ):
        """
        Initialize agent error.

        Args:
            status: Exit status of the agent process
            timed_out: Whether the process was killed after a timeout
            message: Optional message replacing the default one
        """
        super().__init__(
            message or f"Agent invocation failed with status {status}", status
        )
        self.timed_out = timed_out


class GitPushFailed(_ProcessFailed):
    """Raised when `git push` exits non-zero."""

    def __init__(self, status: int, message: str | None = None):
        super().__init__(message or f"Git push failed with status {status}", status)


class ConfigError(LessonPlannerError):
    """Raised when configuration is invalid or cannot be read."""

    pass
