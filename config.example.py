# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-list).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_LOG_DIR": "Directory for todo.log (default: <data_dir>).",
    # Task file
    "TODO_TASKS_FILE": "Task file path (default: tasks.txt).",
    "TODO_FILE_ENCODING": "Task file encoding (default: utf-8).",
    # Behaviour
    "TODO_LOAD_ON_START": "Load the task file at startup (default: true).",
    "TODO_SAVE_ON_EXIT": "Save automatically when leaving with unsaved changes (default: false).",
}
