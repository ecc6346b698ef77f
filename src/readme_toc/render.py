"""Render folder links and sections back into README text."""

from __future__ import annotations

import html
from typing import Iterable

from readme_toc.schemas import FolderLink, ReadmeDocument, ReadmeSection

LINK_GLYPH = "❉"
LINK_TEMPLATE = (
    '<a href="./{name}/" style="font-weight: bold; margin-bottom:200px;">'
    + LINK_GLYPH
    + " {title}</a></br>"
)


def render_link(link: FolderLink) -> str:
    """Render a folder link in the canonical anchor format, HTML-escaped."""
    return LINK_TEMPLATE.format(
        name=html.escape(link.name, quote=True),
        title=html.escape(link.title, quote=True),
    )


def render_section(section: ReadmeSection) -> str:
    """Render a section as heading, separator and body."""
    return f"### {section.heading}\n---\n{section.body}"


def render_region(links: Iterable[FolderLink], sections: Iterable[ReadmeSection]) -> str:
    """Render the managed region body: all links first, then all sections."""
    blocks = [render_link(link) for link in links]
    blocks.extend(render_section(section) for section in sections)
    return "\n".join(blocks)


def compose_document(
    document: ReadmeDocument,
    links: Iterable[FolderLink],
    sections: Iterable[ReadmeSection],
) -> str:
    """Recombine the README around a freshly rendered managed region."""
    body = render_region(links, sections)
    if not body:
        return document.prefix + "\n" + document.suffix
    return document.prefix + "\n" + body + "\n" + document.suffix
