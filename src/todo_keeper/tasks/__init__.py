"""
Task subsystem.

Components:
- task_models.py: data structure (Task) and its JSON shape
- task_store.py: JSON file storage (load/save of the whole list)
- task_api.py: index-based operations on an in-memory task list
"""
