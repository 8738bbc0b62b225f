"""
Core of the task list.

Components:
- errors.py: error hierarchy (ValidationError, FormatError, StorageError)
- ports.py: TaskRepo protocol the controller persists through
- controller.py: TaskListController, the in-memory ordered list
- state.py: AppState wiring for the front end
"""
