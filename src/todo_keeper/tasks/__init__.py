"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStats)
- task_codec.py: JSON encoding/decoding of the whole task list
- task_store.py: TaskListStore, the single owner of the task list
- debounce.py: single-slot debounced writer used for persistence
- celebration.py: transient "just completed" marker
"""
