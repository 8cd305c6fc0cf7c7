# src/museum_visits/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every variable has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "MUSEUM"


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


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_choice(name: str, default: str, choices: set[str]) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    return value if value in choices else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- List behaviour ----
    seed_enabled: bool
    date_locale: str
    default_filter: str
    default_sort: str
    auto_list: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Musei di Bologna") or "Musei di Bologna"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/museum_visits"))

        seed_enabled = _env_bool(_k("SEED_ENABLED"), True)
        date_locale = _env_choice(_k("DATE_LOCALE"), "it", {"it", "en"})
        default_filter = _env_choice(_k("DEFAULT_FILTER"), "all", {"all", "pending", "completed"})
        default_sort = _env_choice(_k("DEFAULT_SORT"), "none", {"name", "date", "status", "none"})
        auto_list = _env_bool(_k("AUTO_LIST"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            seed_enabled=seed_enabled,
            date_locale=date_locale,
            default_filter=default_filter,
            default_sort=default_sort,
            auto_list=auto_list,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
