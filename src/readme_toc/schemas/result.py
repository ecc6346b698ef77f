"""Aggregation input and output models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class SubdirectoryEntry(BaseModel):
    """A top-level project directory and its optional README content."""

    name: str
    path: Path
    readme: str | None = None


class RegenerationResult(BaseModel):
    """Outcome of a README regeneration."""

    content: str
    changed: bool
    written: bool = False
    added_links: list[str] = Field(default_factory=list)
    added_sections: list[str] = Field(default_factory=list)
    refreshed_sections: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
