"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) for the CLI and the
  examples. `AgentAiClient` itself never reads the environment: it takes a
  token and a `ClientConfig`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from agentai.core.domain.actions import DEFAULT_LLM_ENGINE
from agentai.core.domain.models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ClientConfig


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "agentai"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "agentai"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "agentai"
    return Path.home() / ".config" / "agentai"


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


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Write/update variables in the user's global .env file.

    `None` values are skipped, existing keys not mentioned are kept.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# agentai user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    if os.name == "posix":
        env_path.chmod(0o600)
    return env_path


class AppSettings(BaseSettings):
    """Settings for the command line and example scripts.

    Why pydantic-settings:
    - Typed, validated env vars at the edge, nothing leaks into the client.
    - One contract shared by every entry point.
    """

    model_config = SettingsConfigDict(
        env_prefix="AGENTAI_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Project .env first (dev), then the per-user file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AGENTAI_API_KEY", "AGENT_API_KEY"),
        description="Agent.ai API key / bearer token.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="API root URL.",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    default_model: str = Field(
        default=DEFAULT_LLM_ENGINE,
        min_length=1,
        description="LLM engine used by `chat` when none is given.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR).",
    )

    def to_client_config(self, *, headers: dict[str, str] | None = None) -> ClientConfig:
        return ClientConfig(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            headers=dict(headers or {}),
        )
