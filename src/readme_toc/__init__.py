"""readme_toc: keep a README's folder table of contents in sync with the tree."""

from readme_toc.aggregator import AggregatorOptions, regenerate
from readme_toc.exceptions import (
    ConfigurationError,
    FormatMismatchError,
    ReadmeIOError,
    ReadmeTocError,
)
from readme_toc.markers import find_marker, split_document
from readme_toc.parser import parse_managed_region
from readme_toc.schemas import FolderLink, ReadmeSection, RegenerationResult

__all__ = [
    "AggregatorOptions",
    "ConfigurationError",
    "FolderLink",
    "FormatMismatchError",
    "ReadmeIOError",
    "ReadmeSection",
    "ReadmeTocError",
    "RegenerationResult",
    "find_marker",
    "parse_managed_region",
    "regenerate",
    "split_document",
]
