"""Error taxonomy shared by the core and the adapters.

Every failure the CLI can report derives from `HeadbumpError`, so the
command layer only needs a single `except` clause to turn it into a
message and a non-zero exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class HeadbumpError(Exception):
    """Base class for expected, user-facing failures."""


class TargetNotFoundError(HeadbumpError):
    """None of the candidate files exists."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = tuple(candidates)
        names = " and ".join(self.candidates) if self.candidates else "no candidates"
        super().__init__(f"{names} not found")


class TargetAccessError(HeadbumpError):
    """The target file could not be checked, read or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"can not access {self.path}: {reason}")


class PinNotFoundError(HeadbumpError):
    """The target file has no pinned nixpkgs tarball."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        where = f" in {self.path}" if self.path is not None else ""
        super().__init__(f"no pinned nixpkgs revision found{where}")


class FetchError(HeadbumpError):
    """Transport failure or unexpected HTTP status from the GitHub API."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DecodeError(HeadbumpError):
    """The GitHub API answered with a body we can not interpret."""
