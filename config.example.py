# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "CHICKEN_APP_NAME": "Name used in the greeting (default: ChatterChicken).",
    "CHICKEN_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "CHICKEN_LOG_DIR": "Directory for chatterchicken.log (default: <data_dir>).",
    "CHICKEN_LOG_BACKUP_DAYS": "Rotated daily log files to keep (default: 7).",
    # Connectors
    "CHICKEN_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Persistence
    "CHICKEN_SAVE_TASKS": "Load/save the task list between runs (true/false, default: true).",
    # Paths (gitignored)
    "CHICKEN_DATA_DIR": "Local data directory (default: .local/chatterchicken).",
    "CHICKEN_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
}
