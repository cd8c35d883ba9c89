"""
Task subsystem.

Components:
- task_models.py: the Task record and the default id generator
- task_codec.py: JSON serialization of the whole task list (+ TaskDataError)
"""
