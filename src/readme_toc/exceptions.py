"""Custom exceptions for readme_toc."""


class ReadmeTocError(Exception):
    """Base exception for readme_toc operations."""


class ConfigurationError(ReadmeTocError):
    """README template is unusable, e.g. the marker is missing."""


class ReadmeIOError(ReadmeTocError):
    """A README or project directory could not be read or written."""


class FormatMismatchError(ReadmeTocError):
    """Managed region content does not match the canonical rendering."""
