"""
Key-value stores implementing core.ports.KeyValueStore.

Components:
- file_store.py: JsonFileStore, one JSON object on disk (default backend)
- sqlite_store.py: SqliteStore, a single `kv` table
- memory_store.py: MemoryStore, nothing persisted
"""
