"""Domain models, errors and patterns.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about HTTP, the CLI or SDKs: only the problem itself.
"""
