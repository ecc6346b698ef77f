"""Locate the managed region markers inside a README."""

from __future__ import annotations

from readme_toc.exceptions import ConfigurationError
from readme_toc.schemas import MarkerLocation, ReadmeDocument


def find_marker(text: str, marker: str, start: int = 0) -> MarkerLocation | None:
    """Find the first occurrence of ``marker`` at or after ``start``.

    Returns:
        The marker location, or None when the marker does not occur.
    """
    if not marker:
        return None
    index = text.find(marker, start)
    if index < 0:
        return None
    return MarkerLocation(start=index, end=index + len(marker))


def split_document(text: str, *, marker: str, end_marker: str | None = None) -> ReadmeDocument:
    """Split README text into prefix, managed region and preserved suffix.

    The prefix keeps everything up to and including ``marker``. When
    ``end_marker`` occurs after the marker, the region stops there and the
    rest of the file is kept as the suffix; otherwise the region runs to the
    end of the text.

    Raises:
        ConfigurationError: If the marker is empty, missing or not unique.
    """
    if not marker:
        raise ConfigurationError("Marker must be a non-empty string")

    location = find_marker(text, marker)
    if location is None:
        raise ConfigurationError(f"Placeholder {marker} not found in README")
    if find_marker(text, marker, location.end) is not None:
        raise ConfigurationError(f"Placeholder {marker} must appear exactly once in README")

    closing = find_marker(text, end_marker, location.end) if end_marker else None
    if closing is None:
        return ReadmeDocument(prefix=text[: location.end], region=text[location.end :])

    return ReadmeDocument(
        prefix=text[: location.end],
        region=text[location.end : closing.start],
        suffix=text[closing.start :],
    )
