"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without leaking them
  into the CLI.
- The shell and `doctor` read the same settings the same way.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PREFIX = "BOOKSHELF_"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "bookshelf"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "bookshelf"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "bookshelf"
    return Path.home() / ".config" / "bookshelf"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _quote(value: str) -> str:
    """Quote values the `.env` reader would otherwise trim or cut at a comment.

    The default prompt `"> "` is the usual case: unquoted, its trailing space
    is lost on the next start.
    """

    if value == value.strip() and " #" not in value:
        return value
    quote = "'" if '"' in value else '"'
    return f"{quote}{value}{quote}"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = _unquote(value.strip())
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write/update `BOOKSHELF_*` variables in the per-user `.env`.

    Raises `ValueError` for keys outside the `BOOKSHELF_` prefix, which the
    settings would silently ignore.
    """

    foreign = sorted(k for k in values if not k.upper().startswith(ENV_PREFIX))
    if foreign:
        raise ValueError(f"not bookshelf settings: {', '.join(foreign)}")

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k.upper(): v for k, v in values.items() if v is not None})

    lines = ["# bookshelf user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={_quote(existing[key])}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Environment variables (`BOOKSHELF_*`) win over the `.env` files; the
    per-user `.env` wins over the project one.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    library_files: list[Path] = Field(
        default_factory=list,
        description="Catalogue files loaded when the shell starts (JSON list in env vars).",
    )
    prompt: str = Field(
        default="> ",
        min_length=1,
        description="Prompt shown before each command.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner when the shell starts.",
    )
    log_level: str = Field(
        default="INFO",
        description="Level for diagnostics written to stderr.",
    )
    file_encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Encoding used to read catalogue files.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


def _env_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        # Complex fields are read back as JSON.
        return json.dumps([str(item) for item in value])
    return str(value)


def save_user_settings(*, env_path: Path | None = None, **values: object) -> Path:
    """Persist `AppSettings` fields (by field name) to the per-user `.env`.

    Values are validated first, so a bad log level never reaches the file.
    Raises `ValueError` for unknown field names and pydantic `ValidationError`
    for invalid values.
    """

    unknown = sorted(set(values) - set(AppSettings.model_fields))
    if unknown:
        raise ValueError(f"unknown settings: {', '.join(unknown)}")

    checked = AppSettings(_env_file=None, **values)
    env_values = {
        f"{ENV_PREFIX}{name.upper()}": _env_value(getattr(checked, name))
        for name in values
    }
    return write_user_env_vars(env_values, env_path=env_path)
