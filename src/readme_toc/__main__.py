"""Entry point for running with python -m readme_toc."""

from readme_toc.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
