"""
todo_manager: a single-user to-do list kept in a local key-value store.

Subpackages:
- tasks: Task record + JSON codec for the whole list
- core: ports, view model and the TaskManager
- storage: JSON file / SQLite / in-memory key-value stores
- connectors: console front end (dialogs, input, REPL)
- cli: composition root, slash commands, entrypoint
"""

__version__ = "0.1.0"
