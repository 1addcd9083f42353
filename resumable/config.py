import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

LOG_LEVEL_ENV = "RESUMABLE_LOG_LEVEL"


@dataclass(frozen=True, kw_only=True)
class Config:
    log_level: int = logging.WARNING


def find_pyproject(start: Path | None = None) -> Path | None:
    for path in [cwd := start or Path.cwd(), *cwd.parents]:
        candidate = path / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def pyproject_config(start: Path | None = None) -> dict[str, Any]:
    """Read the [tool.resumable] table of the nearest pyproject.toml."""
    if pyproject := find_pyproject(start):
        with pyproject.open("rb") as f:
            config = tomllib.load(f)
        return config.get("tool", {}).get("resumable", {})
    return {}


def parse_level(level: str | int, *, source: str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r} from {source}")
    return value


def load_config(start: Path | None = None) -> Config:
    """Load configuration, preferring environment variables over pyproject.toml."""
    if level := os.environ.get(LOG_LEVEL_ENV):
        return Config(log_level=parse_level(level, source=LOG_LEVEL_ENV))

    config = pyproject_config(start)
    if (level := config.get("log_level")) is not None:
        return Config(
            log_level=parse_level(level, source="[tool.resumable] log_level")
        )
    return Config()
