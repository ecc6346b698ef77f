"""README document models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MarkerLocation(BaseModel):
    """Position of a marker inside the README text."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)


class ReadmeDocument(BaseModel):
    """README text split around the managed region.

    Attributes:
        prefix: Text up to and including the start marker.
        region: Raw managed region text.
        suffix: Text from the end marker onward; empty when no end marker is used.
    """

    prefix: str
    region: str
    suffix: str = ""
