"""
Task subsystem.

Components:
- task_models.py: data structures (Task, CompletionResult)
- task_store.py: in-memory registry (create / complete / list)
"""
