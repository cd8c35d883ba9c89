"""
Core of the to-do manager.

Components:
- ports.py: Protocols for the injected store, view, dialogs and input
- view.py: rendered rows (ListItem) and the in-memory list view
- manager.py: TaskManager, owner of the task list
"""
