"""Regenerate a README's folder table of contents from the project tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from readme_toc.config import (
    DEFAULT_README_NAME,
    README_TOC_END_MARKER,
    README_TOC_INCLUDE_HIDDEN,
    README_TOC_MARKER,
    README_TOC_REFRESH_SECTIONS,
    README_TOC_SORT_DIRECTORIES,
    README_TOC_STRICT,
)
from readme_toc.exceptions import FormatMismatchError
from readme_toc.file_utils import read_text, write_text_atomic
from readme_toc.markers import split_document
from readme_toc.parser import parse_managed_region
from readme_toc.render import compose_document
from readme_toc.scanner import scan_subdirectories
from readme_toc.schemas import FolderLink, ReadmeSection, RegenerationResult, SubdirectoryEntry

logger = logging.getLogger(__name__)


@dataclass
class AggregatorOptions:
    """Options for README regeneration.

    Attributes:
        marker: Literal text after which generated content begins.
        end_marker: Optional closing marker; content from it onward is kept.
            None or empty manages everything after ``marker``.
        sort_directories: Sort subdirectories by name instead of using
            filesystem order.
        include_hidden: Also list directories whose name starts with a dot.
        refresh_sections: Replace the body of an existing section with the
            same heading instead of appending a second one.
        strict: Raise FormatMismatchError when the managed region holds
            markup that had to be normalized or dropped.
        dry_run: Compute the new content without writing it.
        readme_name: File name of the README inside each subdirectory.
    """

    marker: str = README_TOC_MARKER
    end_marker: str | None = README_TOC_END_MARKER or None
    sort_directories: bool = README_TOC_SORT_DIRECTORIES
    include_hidden: bool = README_TOC_INCLUDE_HIDDEN
    refresh_sections: bool = README_TOC_REFRESH_SECTIONS
    strict: bool = README_TOC_STRICT
    dry_run: bool = False
    readme_name: str = DEFAULT_README_NAME


def regenerate(
    project_root: str | Path,
    readme_path: str | Path | None = None,
    options: AggregatorOptions | None = None,
) -> RegenerationResult:
    """Rebuild the managed region of ``readme_path`` from ``project_root``.

    Existing links and sections are kept in document order. Every
    subdirectory without a link gets one, and every subdirectory README
    whose exact heading and content are not yet present becomes a new
    section. All reads and checks finish before the file is replaced.

    Args:
        project_root: Directory whose immediate subdirectories are listed.
        readme_path: README to rewrite; defaults to ``<project_root>/README.md``.
        options: Processing options. Uses defaults if None.

    Returns:
        The regeneration result, including the new content.

    Raises:
        ConfigurationError: If the marker is missing or not unique.
        ReadmeIOError: If a file or directory cannot be read or written.
        FormatMismatchError: In strict mode, if the managed region is not canonical.
    """
    opts = options or AggregatorOptions()
    root = Path(project_root)
    path = Path(readme_path) if readme_path is not None else root / opts.readme_name

    original = read_text(path)
    document = split_document(original, marker=opts.marker, end_marker=opts.end_marker)
    region = parse_managed_region(document.region)
    entries = scan_subdirectories(
        root,
        sort=opts.sort_directories,
        include_hidden=opts.include_hidden,
        readme_name=opts.readme_name,
    )

    links = list(region.links)
    sections = list(region.sections)
    added_links = merge_links(links, entries)
    added_sections, refreshed = merge_sections(
        sections, entries, refresh=opts.refresh_sections
    )

    if opts.strict and region.warnings:
        raise FormatMismatchError(
            f"{path} managed region is not canonical: " + "; ".join(region.warnings)
        )

    content = compose_document(document, links, sections)
    result = RegenerationResult(
        content=content,
        changed=content != original,
        added_links=added_links,
        added_sections=added_sections,
        refreshed_sections=refreshed,
        warnings=list(region.warnings),
    )

    if opts.dry_run:
        logger.debug("Dry run, not writing %s", path)
        return result

    write_text_atomic(path, content)
    result.written = True
    logger.info(
        "Updated %s (%d new links, %d new sections)",
        path,
        len(added_links),
        len(added_sections),
    )
    return result


def merge_links(links: list[FolderLink], entries: list[SubdirectoryEntry]) -> list[str]:
    """Append a link for every entry not linked yet; return the added names."""
    known = {link.name for link in links}
    added: list[str] = []
    for entry in entries:
        if entry.name in known:
            continue
        links.append(FolderLink(name=entry.name, title=entry.name))
        known.add(entry.name)
        added.append(entry.name)
        logger.info("Adding link for %s", entry.name)
    return added


def merge_sections(
    sections: list[ReadmeSection],
    entries: list[SubdirectoryEntry],
    *,
    refresh: bool = False,
) -> tuple[list[str], list[str]]:
    """Merge subdirectory READMEs into ``sections`` in place.

    Returns:
        Tuple of (added headings, refreshed headings).
    """
    added: list[str] = []
    refreshed: list[str] = []
    for entry in entries:
        if entry.readme is None:
            continue
        candidate = ReadmeSection(heading=entry.name, body=entry.readme)
        if any(section.key == candidate.key for section in sections):
            logger.debug("Section for %s is up to date", entry.name)
            continue

        if refresh:
            position = next(
                (i for i, section in enumerate(sections) if section.heading == entry.name),
                None,
            )
            if position is not None:
                sections[position] = candidate
                refreshed.append(entry.name)
                logger.info("Refreshing section for %s", entry.name)
                continue

        sections.append(candidate)
        added.append(entry.name)
        logger.info("Adding section for %s", entry.name)
    return added, refreshed
