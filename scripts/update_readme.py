"""Regenerate the root README's folder links for this repository.

Takes no arguments: the project root is the directory above ``scripts/``.
"""

from __future__ import annotations

from pathlib import Path

from readme_toc.cli import main as cli_main

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def main() -> int:
    return cli_main(["--root", str(PROJECT_ROOT), "--readme", str(PROJECT_ROOT / "README.md")])


if __name__ == "__main__":
    raise SystemExit(main())
