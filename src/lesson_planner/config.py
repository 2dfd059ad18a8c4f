"""Configuration for lesson generation.

Defaults mirror the conventional layout of a lesson-planner workspace::

    lessons/<lesson>.md
    docs/voice-and-tone.md
    docs/repository-structure.md
    templates/lesson-generation-prompt.md

Any of these can be overridden from a YAML file (``.lesson-planner.yaml``
in the current directory, or one passed with ``--config``).
"""

import tempfile
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from lesson_planner.errors import ConfigError

CONFIG_FILENAME = ".lesson-planner.yaml"
DEFAULT_MODEL = "goose-claude-4-5-sonnet"

_PATH_KEYS = ("lessons_dir", "docs_dir", "template_path", "prompt_copy_path")


def _default_prompt_copy_path() -> Path:
    return Path(tempfile.gettempdir()) / "lesson-planner-prompt.md"


@dataclass
class PlannerConfig:
    """File-system layout and agent settings for a generation run."""

    lessons_dir: Path = Path("lessons")
    docs_dir: Path = Path("docs")
    template_path: Path = Path("templates/lesson-generation-prompt.md")
    prompt_copy_path: Path = field(default_factory=_default_prompt_copy_path)
    marker_filename: str = ".lesson-planner-prompt.md"
    agent_command: str = "goose"
    provider: str = "anthropic"
    default_model: str = DEFAULT_MODEL

    @classmethod
    def from_mapping(
        cls, data: dict[str, Any], base_dir: Optional[Path] = None
    ) -> "PlannerConfig":
        """Build a config from a mapping, e.g. parsed YAML.

        Args:
            data: Mapping of config keys to values
            base_dir: Directory that relative paths are resolved against
                (left relative to the working directory if omitted)

        Returns:
            PlannerConfig with defaults for missing keys

        Raises:
            ConfigError: If the mapping contains unknown keys or empty values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                raise ConfigError(f"Config key '{key}' has no value")
            if key in _PATH_KEYS:
                path = Path(str(value)).expanduser()
                if base_dir is not None and not path.is_absolute():
                    path = base_dir / path
                values[key] = path
            else:
                values[key] = str(value)
        return cls(**values)


def load_config(path: Optional[Path] = None) -> PlannerConfig:
    """Load configuration from a YAML file.

    Args:
        path: Config file to read. If omitted, ``.lesson-planner.yaml`` in
            the current directory is used when it exists.

    Returns:
        Loaded config, or the defaults when there is no config file

    Raises:
        ConfigError: If the file cannot be read or is not a mapping
    """
    if path is None:
        path = Path(CONFIG_FILENAME)
        if not path.exists():
            return PlannerConfig()

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Error loading config {path}: {e}") from e

    if data is None:
        return PlannerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    # Relative paths in an explicit config file are relative to that file
    return PlannerConfig.from_mapping(data, base_dir=Path(path).parent)
