"""Local configuration for readme_toc."""

from __future__ import annotations

import os


DEFAULT_MARKER = "<!-- FOLDER LINKS -->"
DEFAULT_END_MARKER = "<!-- /FOLDER LINKS -->"
DEFAULT_README_NAME = "README.md"
DEFAULT_ENCODING = "utf-8"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


README_TOC_MARKER = os.getenv("README_TOC_MARKER", DEFAULT_MARKER)
# An empty end marker disables the closed managed block.
README_TOC_END_MARKER = os.getenv("README_TOC_END_MARKER", DEFAULT_END_MARKER)
README_TOC_SORT_DIRECTORIES = _env_flag("README_TOC_SORT_DIRECTORIES", True)
README_TOC_INCLUDE_HIDDEN = _env_flag("README_TOC_INCLUDE_HIDDEN", False)
README_TOC_REFRESH_SECTIONS = _env_flag("README_TOC_REFRESH_SECTIONS", False)
README_TOC_STRICT = _env_flag("README_TOC_STRICT", False)
