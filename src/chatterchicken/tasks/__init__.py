"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind) and date handling
- task_list.py: the in-memory task list manager (mutations, filters, stats)
- task_errors.py: error types raised by the two above
- task_store.py: SQLite-backed snapshot storage for a TaskList
"""
