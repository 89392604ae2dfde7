"""
Pytest fixtures for nix-headbump tests.
Ensures src/ is on sys.path when running from the repo root.
"""

import os
import sys
from pathlib import Path

import pytest

_src = Path(__file__).resolve().parent.parent / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

PIN_TEMPLATE = (
    "{ pkgs ? import (fetchTarball "
    '"https://github.com/NixOS/nixpkgs/archive/{rev}.tar.gz") { } }:\n'
    "pkgs.mkShell {\n"
    "  buildInputs = [ pkgs.hello ];\n"
    "}\n"
)


def pinned(rev: str) -> str:
    return PIN_TEMPLATE.replace("{rev}", rev)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep the developer's NIX_HEADBUMP_* variables out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("NIX_HEADBUMP_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Empty working directory for a Nix project."""
    work = tmp_path / "project"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


class FakeSource:
    """RevisionSource double that records calls."""

    def __init__(self, revision="def456", error=None):
        self.revision = revision
        self.error = error
        self.calls = 0

    def latest_revision(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.revision
