# src/gantt_planner/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- No secrets required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

ENV_PREFIX = "PLANNER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


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

    # ---- Chart ----
    period_count: int

    # ---- LLM / OpenRouter ----
    openrouter_api_key: Optional[str]
    openrouter_base_url: str
    llm_models: List[str]
    llm_temperature: float
    extra_headers: Dict[str, str]

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path
    storage_key: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Project Planner")
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        period_count = max(1, _env_int(_k("PERIOD_COUNT"), 60))

        openrouter_api_key = _first_env(_k("OPENROUTER_API_KEY"), "OPENROUTER_API_KEY", default=None)
        openrouter_base_url = _env(_k("OPENROUTER_BASE_URL"), "https://openrouter.ai/api/v1")

        extra_headers = {
            "HTTP-Referer": _env(_k("HTTP_REFERER"), "https://example.com"),
            "X-Title": _env(_k("APP_TITLE"), app_name),
        }

        llm_models = _env_list(
            _k("LLM_MODELS"),
            [
                "google/gemini-2.5-pro",
                "google/gemini-2.5-flash",
                "openai/gpt-4o-mini",
            ],
        )
        llm_temperature = _env_float(_k("LLM_TEMPERATURE"), 0.4)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/planner"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "local_storage.sqlite3")
        storage_key = _env(_k("STORAGE_KEY"), "project_planner_tasks").strip() or "project_planner_tasks"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            period_count=period_count,
            openrouter_api_key=openrouter_api_key,
            openrouter_base_url=openrouter_base_url,
            llm_models=llm_models,
            llm_temperature=llm_temperature,
            extra_headers=extra_headers,
            data_dir=data_dir,
            storage_path=storage_path,
            storage_key=storage_key,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
