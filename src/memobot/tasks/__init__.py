"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Rating)
- task_store.py: SQLite-backed storage + date-ordered queries
- task_scheduler.py: review policy (level/interval) and the review transaction
- task_api.py: the commands exposed to the UI layer
"""
