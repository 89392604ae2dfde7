"""Pinned-revision pattern for Nix files.

A pin is three parts: a literal prefix (`import (fetchTarball "https://...archive/`),
the revision itself and a literal suffix (`.tar.gz")`). Extraction and
replacement both work on the middle group only, so whatever surrounds the
revision is preserved byte for byte.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.domain.errors import PinNotFoundError


@dataclass(frozen=True)
class PinPattern:
    """Compiled three-part pattern: group 1 prefix, group 2 revision, group 3 suffix."""

    regex: re.Pattern[str]

    @classmethod
    def compile(cls, prefix: str, revision: str, suffix: str) -> "PinPattern":
        return cls(re.compile(f"({prefix})({revision})({suffix})", re.DOTALL))

    def extract(self, content: str) -> str:
        """Return the first pinned revision in `content`.

        Raises `PinNotFoundError` when the pattern is absent.
        """

        match = self.regex.search(content)
        if match is None:
            raise PinNotFoundError()
        return match.group(2)

    def replace(self, content: str, revision: str) -> str:
        """Return `content` with every pinned revision set to `revision`.

        Content without a pin is returned unchanged.
        """

        # Callable replacement: `revision` is inserted literally, no `\1` expansion.
        return self.regex.sub(lambda m: m.group(1) + revision + m.group(3), content)

    def contains(self, content: str) -> bool:
        return self.regex.search(content) is not None


NIXPKGS_PIN = PinPattern.compile(
    r'import\s+\(fetchTarball\s+"https://github\.com/NixOS/nixpkgs/archive/',
    r'[^"]+?',
    r'\.tar\.gz"\)',
)


def extract_version(content: str, pattern: PinPattern = NIXPKGS_PIN) -> str:
    return pattern.extract(content)


def replace_version(content: str, revision: str, pattern: PinPattern = NIXPKGS_PIN) -> str:
    return pattern.replace(content, revision)
