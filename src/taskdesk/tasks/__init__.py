"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, filter/sort enums) and input parsing
- task_store.py: whole-file JSON storage (load_all / save_all)
- task_api.py: load-mutate-save operations and id generation
"""
