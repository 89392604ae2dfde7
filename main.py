"""Development entrypoint for running nix-headbump from a checkout.

    python -m main detect --target
    python -m main bump

The packages live under `src/`, so without an editable install Python can
not import `cli`, `core` or `adapters`; this shim adds `src/` to the path.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
