"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Todo, Deadline, Event, TaskKind)
- task_list.py: ordered in-memory list addressed by 1-based task numbers
- task_store.py: SQLite-backed durable mirror of the task list
"""
