"""Access to the project Nix files.

Rules:
- Candidates are tried in order; the first one that exists wins.
- The file is written only when its content changes.
- Every `OSError` becomes a `TargetAccessError` carrying the affected path.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from core.domain.errors import TargetAccessError, TargetNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATES: tuple[str, ...] = ("default.nix", "shell.nix")


def locate_target(
    candidates: Sequence[str] = DEFAULT_CANDIDATES,
    *,
    directory: Path | None = None,
) -> Path:
    """Return the first candidate that exists in `directory` (cwd by default).

    The returned path is relative when `directory` is None (`default.nix`,
    `shell.nix`), which is also what `detect --target` prints.
    """

    for name in candidates:
        path = Path(name) if directory is None else Path(directory) / name
        try:
            path.stat()
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise TargetAccessError(path, exc.strerror or str(exc)) from exc
        logger.debug("Target file: %s", path)
        return path
    raise TargetNotFoundError(candidates)


def read_text(path: Path) -> str:
    try:
        # newline="" keeps line endings as they are on disk; surrogateescape
        # carries non-UTF-8 bytes through to the write unchanged.
        with path.open(encoding="utf-8", errors="surrogateescape", newline="") as fh:
            return fh.read()
    except OSError as exc:
        raise TargetAccessError(path, exc.strerror or str(exc)) from exc


def write_if_changed(path: Path, original: str, updated: str) -> bool:
    """Write `updated` to `path` unless it equals `original`.

    Returns True when the file was written. Overwriting in place keeps the
    existing file mode.
    """

    if updated == original:
        return False
    try:
        with path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(updated)
    except OSError as exc:
        raise TargetAccessError(path, exc.strerror or str(exc)) from exc
    return True
