"""Domain models and state records.

Why:
- Pure, strict data structures live here (Pydantic v2 and dataclasses).
- The domain knows nothing about HTTP or the CLI: only the problem's concepts.
"""
