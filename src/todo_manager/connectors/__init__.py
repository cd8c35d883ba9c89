"""
Front ends that drive the TaskManager.

Components:
- console_connector.py: terminal dialogs, line input and the REPL loop
"""
