from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from scraper.models import (
    ExtractedPage,
    PageHeading,
    PageImage,
    PageLink,
    PageList,
    PageTable,
)
from scraper.parsing.dom import Node, parse_document
from scraper.utils.url_utils import is_external_url


HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
LIST_TAGS = ("ul", "ol")
CELL_TAGS = ("td", "th")


def clean_text(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return " ".join(text.split())


def is_meaningful(text: Optional[str]) -> bool:
    return bool(text and text.strip())


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. ``2024-05-01T10:00:00.000Z``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def extract_title(doc: Node) -> str:
    title = doc.find("title")
    return title.text_content.strip() if title is not None else ""


def extract_meta(doc: Node, name: str) -> str:
    """``content`` of the first ``<meta name=...>`` matching ``name``, or ''."""
    wanted = name.lower()
    for meta in doc.find_all("meta"):
        if meta.get("name").strip().lower() == wanted:
            return meta.get("content").strip()
    return ""


def extract_links(doc: Node) -> List[PageLink]:
    links = []
    for anchor in doc.find_all("a"):
        href = anchor.get("href").strip()
        text = anchor.text_content.strip()
        if href and is_meaningful(text):
            links.append(PageLink(url=href, text=text, is_external=is_external_url(href)))
    return links


def extract_images(doc: Node) -> List[PageImage]:
    images = []
    for img in doc.find_all("img"):
        src = img.get("src").strip()
        if src:
            images.append(
                PageImage(src=src, alt=img.get("alt").strip(), title=img.get("title").strip())
            )
    return images


def extract_headings(doc: Node) -> List[PageHeading]:
    headings = []
    for node in doc.find_all(*HEADING_TAGS):
        text = node.text_content.strip()
        if is_meaningful(text):
            headings.append(PageHeading(level=int(node.tag_name[1]), text=text))
    return headings


def extract_paragraphs(doc: Node) -> List[str]:
    return [
        text
        for text in (p.text_content.strip() for p in doc.find_all("p"))
        if is_meaningful(text)
    ]


def extract_lists(doc: Node) -> List[PageList]:
    """
    Every ``ul``/``ol`` becomes its own flat entry, nested lists included.

    Items are the list's own ``li`` children; the text of a nested list is
    part of its parent item's text as well.
    """
    lists = []
    for node in doc.find_all(*LIST_TAGS):
        items = [
            text
            for text in (
                li.text_content.strip() for li in node.element_children if li.tag_name == "li"
            )
            if is_meaningful(text)
        ]
        if items:
            lists.append(PageList(type=node.tag_name, items=items))
    return lists


def extract_tables(doc: Node) -> List[PageTable]:
    tables = []
    for table in doc.find_all("table"):
        rows = []
        for tr in table.find_all("tr"):
            cells = [
                text
                for text in (cell.text_content.strip() for cell in tr.find_all(*CELL_TAGS))
                if is_meaningful(text)
            ]
            if cells:
                rows.append(cells)
        if rows:
            tables.append(PageTable(rows=rows))
    return tables


def extract_full_text(doc: Node) -> str:
    body = doc.find("body")
    if body is None:
        return ""
    return clean_text(body.text_content)


def count_words(text: str) -> int:
    return len(text.split())


def extract_page(url: str, html: str, captured_at: Optional[datetime] = None) -> ExtractedPage:
    """Parse ``html`` (with script/style removed) into an ``ExtractedPage``.

    Never raises for bad markup; missing nodes give empty strings and lists.
    """
    doc = parse_document(html)
    full_text = extract_full_text(doc)

    return ExtractedPage(
        url=url,
        timestamp=format_timestamp(captured_at or datetime.now(timezone.utc)),
        title=extract_title(doc),
        description=extract_meta(doc, "description"),
        keywords=extract_meta(doc, "keywords"),
        author=extract_meta(doc, "author"),
        links=extract_links(doc),
        images=extract_images(doc),
        headings=extract_headings(doc),
        paragraphs=extract_paragraphs(doc),
        lists=extract_lists(doc),
        tables=extract_tables(doc),
        full_text=full_text,
        word_count=count_words(full_text),
    )
