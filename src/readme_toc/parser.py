"""Parse the managed region of a README into typed blocks."""

from __future__ import annotations

import logging
import re

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for link parsing (pip install beautifulsoup4)."
    ) from exc

from readme_toc.render import LINK_GLYPH, render_link
from readme_toc.schemas import FolderLink, ManagedRegion, ReadmeSection, TextSpan

logger = logging.getLogger(__name__)

_HREF_RE = re.compile(r"^\./([^/]+)/?$")
_HEADING_RE = re.compile(r"^\s*###(?!#)\s*(\S.*?)\s*$")
_SEPARATOR_RE = re.compile(r"^\s*-{3,}\s*$")


def parse_managed_region(text: str) -> ManagedRegion:
    """Parse managed region text into links, sections and stray text.

    Any line holding a ``./name/`` anchor outside a section is a link,
    whatever its markup; links repeating an earlier directory name are
    dropped. A section starts at a ``###`` heading line naming an already
    linked directory and directly followed by a ``---`` line. It runs until
    the next such pair, so headings and rules inside a copied README body
    stay part of that body.
    """
    region = ManagedRegion()
    seen: set[str] = set()
    lines = text.split("\n")
    index = 0

    while index < len(lines):
        heading = _section_heading(lines, index, seen)
        if heading is not None:
            index += 2
            body_lines: list[str] = []
            while index < len(lines) and _section_heading(lines, index, seen) is None:
                body_lines.append(lines[index])
                index += 1
            region.blocks.append(ReadmeSection(heading=heading, body="\n".join(body_lines).strip()))
            continue

        line = lines[index].strip()
        index += 1
        if not line:
            continue

        links = parse_link_line(line)
        if not links:
            region.blocks.append(TextSpan(text=line))
            _warn(region, f"Dropping unrecognized text in managed region: {line!r}")
            continue

        if len(links) > 1 or render_link(links[0]) != line:
            _warn(region, f"Normalizing non-canonical link markup: {line!r}")
        for link in links:
            if link.name in seen:
                _warn(region, f"Dropping duplicate link for {link.name!r}")
                continue
            seen.add(link.name)
            region.blocks.append(link)

    return region


def parse_link_line(line: str) -> list[FolderLink]:
    """Extract folder links from a single line of markup.

    Anchors are matched on their ``href`` only; attribute order, quoting,
    styling and whitespace do not matter. The display title is the anchor
    text without the leading glyph, falling back to the directory name.
    """
    if "<a" not in line.lower():
        return []

    soup = BeautifulSoup(line, "html.parser")
    links: list[FolderLink] = []
    for anchor in soup.find_all("a", href=True):
        match = _HREF_RE.match(str(anchor["href"]).strip())
        if not match:
            continue
        name = match.group(1)
        title = anchor.get_text(" ", strip=True).lstrip(LINK_GLYPH).strip()
        links.append(FolderLink(name=name, title=title or name))
    return links


def _section_heading(lines: list[str], index: int, names: set[str]) -> str | None:
    if index + 1 >= len(lines):
        return None
    match = _HEADING_RE.match(lines[index])
    if not match or match.group(1) not in names:
        return None
    if not _SEPARATOR_RE.match(lines[index + 1]):
        return None
    return match.group(1)


def _warn(region: ManagedRegion, message: str) -> None:
    logger.warning(message)
    region.warnings.append(message)
