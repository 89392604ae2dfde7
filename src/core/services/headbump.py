"""Bump orchestration.

The CLI delegates every step to these helpers so that printing and exit
codes stay in the command layer, while locating, reading, fetching and
patching stay reusable (and testable without a terminal).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from adapters.github_branches import GitHubBranchSource
from adapters.nix_files import DEFAULT_CANDIDATES, locate_target, read_text, write_if_changed
from core.config import AppSettings
from core.domain.errors import PinNotFoundError
from core.domain.models import BumpResult
from core.domain.pin import NIXPKGS_PIN, PinPattern
from core.interfaces import RevisionSource

logger = logging.getLogger(__name__)


def find_target(
    candidates: Sequence[str] = DEFAULT_CANDIDATES,
    *,
    directory: Path | None = None,
) -> Path:
    return locate_target(candidates, directory=directory)


def read_current_version(path: Path, pattern: PinPattern = NIXPKGS_PIN) -> str:
    """Pinned revision of `path`; `PinNotFoundError` if the file has none."""

    content = read_text(path)
    try:
        return pattern.extract(content)
    except PinNotFoundError as exc:
        raise PinNotFoundError(path) from exc


def fetch_last_version(
    source: RevisionSource | None = None,
    *,
    settings: AppSettings | None = None,
) -> str:
    source = source or GitHubBranchSource(settings=settings)
    return source.latest_revision()


def bump(path: Path, latest: str, pattern: PinPattern = NIXPKGS_PIN) -> BumpResult:
    """Pin `path` to `latest`.

    The file is rewritten only when its content changes, so bumping an
    up-to-date file leaves it (and its mtime) untouched.
    """

    original = read_text(path)
    try:
        previous = pattern.extract(original)
    except PinNotFoundError as exc:
        raise PinNotFoundError(path) from exc

    updated = pattern.replace(original, latest)
    changed = write_if_changed(path, original, updated)
    if changed:
        logger.info("Bumped %s: %s -> %s", path, previous, latest)
    else:
        logger.info("%s is already pinned to %s", path, latest)
    return BumpResult(path=path, previous=previous, latest=latest, changed=changed)


def bump_to_latest(
    source: RevisionSource | None = None,
    *,
    candidates: Sequence[str] = DEFAULT_CANDIDATES,
    directory: Path | None = None,
    settings: AppSettings | None = None,
) -> BumpResult:
    """Locate the target, fetch the latest revision and patch.

    The target is located first so a missing file fails before any network
    traffic; the write is always the last step.
    """

    path = find_target(candidates, directory=directory)
    latest = fetch_last_version(source, settings=settings)
    return bump(path, latest)
