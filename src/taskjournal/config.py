# src/taskjournal/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per invocation, passed explicitly to whoever needs it.
- No module-level settings instance; get_settings() reads the environment each call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKJOURNAL"

DEFAULT_JOURNAL_FILE = Path("todo.json")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Journal ----
    journal_file: Path
    atomic_writes: bool

    @staticmethod
    def from_env() -> Settings:
        journal_file = _env_path(_k("JOURNAL_FILE"), DEFAULT_JOURNAL_FILE) or DEFAULT_JOURNAL_FILE
        return Settings(
            app_name=_env(_k("APP_NAME"), "taskjournal") or "taskjournal",
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_dir=_env_path(_k("LOG_DIR"), None),
            journal_file=journal_file,
            atomic_writes=_env_bool(_k("ATOMIC_WRITES"), False),
        )


def get_settings(*, use_dotenv: bool = True) -> Settings:
    """
    Build Settings from the current environment.

    A .env in the working directory (or a parent) is loaded first when present;
    real environment variables win.
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
