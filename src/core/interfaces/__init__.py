"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: the core depends on abstractions.
"""

from core.interfaces.revision_source import RevisionSource

__all__ = ["RevisionSource"]
