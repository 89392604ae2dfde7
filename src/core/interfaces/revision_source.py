"""Revision source contract.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- Lets tests swap the GitHub API for a double without touching the bump service.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RevisionSource(Protocol):
    """Minimal contract for reading the latest revision of a branch.

    Design rules:
    - `latest_revision` is synchronous: one request per run.
    - Returns the identifier as is (hex), or raises a `HeadbumpError`.
    """

    def latest_revision(self) -> str:
        """Return the head commit of the tracked branch."""

        ...
