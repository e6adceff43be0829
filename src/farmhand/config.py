# src/farmhand/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every timing knob of the task system is overridable without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "FARMHAND"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_ms(name: str, default_seconds: float) -> float:
    """Read a millisecond value, return seconds."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default_seconds
    try:
        return max(0.0, float(raw) / 1000.0)
    except ValueError:
        return default_seconds


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Task system timing ----
    startup_check_delay_seconds: float
    notify_claim_delay_seconds: float
    claim_interval_seconds: float

    # ---- Game data ----
    item_names_path: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "farmhand") or "farmhand"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_dir = _env_path(_k("LOG_DIR"), Path("logs")) or Path("logs")

        # Delays are configured in milliseconds, like the server's own timers.
        startup_check_delay_seconds = _env_ms(_k("STARTUP_CHECK_DELAY_MS"), 4.0)
        notify_claim_delay_seconds = _env_ms(_k("NOTIFY_CLAIM_DELAY_MS"), 1.0)
        claim_interval_seconds = _env_ms(_k("CLAIM_INTERVAL_MS"), 0.3)

        item_names_path = _env_path(_k("ITEM_NAMES_PATH"), None)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            startup_check_delay_seconds=startup_check_delay_seconds,
            notify_claim_delay_seconds=notify_claim_delay_seconds,
            claim_interval_seconds=claim_interval_seconds,
            item_names_path=item_names_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
