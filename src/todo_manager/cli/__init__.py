"""
Command-line layer.

Components:
- bootstrap.py: composition root (settings -> store -> TaskManager)
- commands.py: slash-command registry (/help, /edit, /delete, ...)
- main.py: `todo-manager` entrypoint
"""
