# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets; keep them in .env (local, gitignored).
"""

ENV_VARS = {
    # App / logging
    "PLANNER_APP_NAME": "Sheet title and app display name (default: Project Planner).",
    "PLANNER_LOG_LEVEL": "Console logging level (default: INFO).",
    # Chart
    "PLANNER_PERIOD_COUNT": "Number of period columns drawn (default: 60).",
    # LLM / OpenRouter
    "PLANNER_OPENROUTER_API_KEY": "OpenRouter API key (without it, offline demo schedules are used).",
    "PLANNER_OPENROUTER_BASE_URL": "OpenAI-compatible base URL (default: https://openrouter.ai/api/v1).",
    "PLANNER_LLM_MODELS": "Comma/space separated list of models to try in order.",
    "PLANNER_LLM_TEMPERATURE": "Sampling temperature for schedule generation (default: 0.4).",
    "PLANNER_LLM_FIRST_TOKEN_TIMEOUT_SECONDS": "Give up on a model without output after this long (default: 60).",
    "PLANNER_LLM_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 90).",
    "PLANNER_LLM_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
    "PLANNER_HTTP_REFERER": "Optional OpenRouter metadata header.",
    "PLANNER_APP_TITLE": "Optional OpenRouter metadata header title.",
    # Paths (gitignored)
    "PLANNER_DATA_DIR": "Local data directory for storage and logs (default: .local/planner).",
    "PLANNER_STORAGE_PATH": "Key/value SQLite file (default: <data_dir>/local_storage.sqlite3).",
    "PLANNER_STORAGE_KEY": "Key holding the task list (default: project_planner_tasks).",
}
