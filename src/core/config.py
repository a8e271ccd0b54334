"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP) and views read configuration consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "fetchlab"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "fetchlab"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "fetchlab"
    return Path.home() / ".config" / "fetchlab"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


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
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# fetchlab user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed, validated values at the edge (env vars) without leaking into views.
    - One configuration contract shared by the CLI and the HTTP adapter.
    """

    model_config = SettingsConfigDict(
        env_prefix="FETCHLAB_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        min_length=8,
        description="Base URL of the REST API the views talk to.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="fetchlab/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    basic_resource: str = Field(
        default="posts",
        min_length=1,
        description="Collection fetched by the basic fetch view.",
    )
    crud_resource: str = Field(
        default="posts",
        min_length=1,
        description="Collection managed by the CRUD view.",
    )

    default_language: Language = Field(
        default_factory=Language.default,
        description="Language for user-facing labels (en/id).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING...).",
    )
