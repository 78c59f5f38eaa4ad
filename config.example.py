# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: task-board).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Remote task service
    "TASKBOARD_API_URL": "Base URL of the task service (default: http://localhost:8000). API_URL also works.",
    "TASKBOARD_HTTP_TIMEOUT_SECONDS": "HTTP timeout per request in seconds (default: 10).",
    # Paths (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory, holds task-board.log (default: .local/task-board).",
}
