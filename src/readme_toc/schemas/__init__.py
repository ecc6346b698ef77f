"""Shared schemas for readme_toc."""

from readme_toc.schemas.blocks import Block, FolderLink, ManagedRegion, ReadmeSection, TextSpan
from readme_toc.schemas.document import MarkerLocation, ReadmeDocument
from readme_toc.schemas.result import RegenerationResult, SubdirectoryEntry

__all__ = [
    "Block",
    "FolderLink",
    "ManagedRegion",
    "MarkerLocation",
    "ReadmeDocument",
    "ReadmeSection",
    "RegenerationResult",
    "SubdirectoryEntry",
    "TextSpan",
]
