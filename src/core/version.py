"""Version metadata for nix-headbump.

Release builds overwrite `__commit__` and `__date__`; development checkouts
keep the placeholders.
"""

from __future__ import annotations

__version__ = "0.1.0"
__commit__ = "none"
__date__ = "unknown"

PROGRAM_NAME = "nix-headbump"


def version_banner(
    *,
    version: str = __version__,
    commit: str = __commit__,
    date: str = __date__,
) -> str:
    """Return the one-line banner printed by `--version`."""

    return f"{PROGRAM_NAME} {version} ({commit[:7]}) # {date}"
