"""Run the drills from a checkout: `python main.py twelve-days`.

Puts `src/` on the import path, then starts the Typer app under the same
program name as the installed `drills` script, so help and usage text match.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main(argv: list[str] | None = None) -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    # cp1252 consoles cannot print every gift line or non-ASCII JSON.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import app  # noqa: PLC0415

    app(args=argv, prog_name="drills")


if __name__ == "__main__":
    main()
