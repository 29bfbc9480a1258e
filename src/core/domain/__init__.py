"""Domain models and entities.

Why:
- Pure, strict data structures live here (Pydantic v2).
- The domain knows nothing about files or the CLI: only book entries and
  the commands that act on them.
"""
