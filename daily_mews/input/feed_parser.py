"""
Tolerant field extraction for the Reddit Atom feed.

The feed is scanned with independent regex extractors instead of a strict XML
parser. Records routinely arrive with missing fields, and image URLs inside
the embedded HTML content are escaped twice, so every field is optional and
the caller decides what to do when one is absent:
- <entry> blocks delimit records
- <title>, <link href="..."/> and <author><name> give the entry fields
- <media:thumbnail url="..."/> or the first <img src=&quot;...&quot;> in
  <content> give the image candidates
"""

from __future__ import annotations

import re
from typing import Iterator

from ..core.types import FeaturedItem, FeedEntry


ENTRY_RE = re.compile(r"<entry>([\s\S]*?)</entry>")
TITLE_RE = re.compile(r"<title>([\s\S]*?)</title>")
LINK_RE = re.compile(r"<link\s+href=\"([^\"]+)\"\s*/>")
AUTHOR_RE = re.compile(r"<author>[\s\S]*?<name>([\s\S]*?)</name>[\s\S]*?</author>")
THUMBNAIL_RE = re.compile(r"<media:thumbnail\s+url=\"([^\"]+)\"\s*/>")
# Content HTML is entity-escaped inside the XML, hence &quot; around src.
CONTENT_IMG_RE = re.compile(r"<content[^>]*>.*?<img\s+src=&quot;([^&]*)&quot;")
IMAGE_URL_RE = re.compile(r"\.(png|jpe?g|gif|webp)(\?.*)?$", re.IGNORECASE)

DEFAULT_FEATURED_TITLE = "A Very Serious Cat Development"
DEFAULT_PERMALINK = "https://www.reddit.com/r/Catmemes/"

FALLBACK_FEATURED = FeaturedItem(
    title="Breaking: Cat Seen Being A Cat",
    permalink=DEFAULT_PERMALINK,
    image_url="https://cataas.com/cat",
)

_XML_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def decode_xml_entities(text: str) -> str:
    """Decode the five predefined XML entities.

    Replacement runs in a fixed order with ``&amp;`` first, so a doubly
    escaped ``&amp;lt;`` decodes all the way to ``<``.
    """
    for entity, char in _XML_ENTITIES:
        text = text.replace(entity, char)
    return text


def is_likely_image_url(url: str) -> bool:
    return bool(IMAGE_URL_RE.search(url))


def _field(pattern: re.Pattern[str], block: str) -> str | None:
    match = pattern.search(block)
    return match.group(1) if match else None


def iter_records(xml: str) -> Iterator[str]:
    """Yield the raw body of every <entry> block in document order."""
    for match in ENTRY_RE.finditer(xml):
        yield match.group(1)


def parse_entry(record: str) -> FeedEntry | None:
    """Build a FeedEntry from one record, or None when title or link is missing."""
    title = decode_xml_entities(_field(TITLE_RE, record) or "").strip()
    permalink = decode_xml_entities(_field(LINK_RE, record) or "").strip()
    author = decode_xml_entities(_field(AUTHOR_RE, record) or "").strip()
    if not title or not permalink:
        return None
    return FeedEntry(title=title, permalink=permalink, author=author)


def parse_entries(xml: str) -> list[FeedEntry]:
    """Parse every usable record in feed order.

    Records missing a title or a permalink are dropped silently; partial
    entries are normal for a live third-party feed.
    """
    entries: list[FeedEntry] = []
    for record in iter_records(xml):
        entry = parse_entry(record)
        if entry is not None:
            entries.append(entry)
    return entries


def image_candidates(record: str) -> list[str]:
    """Image URLs for a record, thumbnail first, then embedded content image."""
    raw = [_field(THUMBNAIL_RE, record), _field(CONTENT_IMG_RE, record)]
    candidates = []
    for value in raw:
        url = decode_xml_entities(value or "")
        if url:
            # Content URLs are escaped twice; one decode leaves &amp; behind.
            candidates.append(url.replace("&amp;", "&"))
    return candidates


def choose_image_url(candidates: list[str]) -> str | None:
    """First candidate that looks like an image file, else the first candidate."""
    for url in candidates:
        if is_likely_image_url(url):
            return url
    return candidates[0] if candidates else None


def extract_featured_item(xml: str) -> FeaturedItem:
    """Promote the first feed record to the meme of the day.

    Only the first record is considered. When the feed has no records, or the
    first record has no image candidate, the fixed FALLBACK_FEATURED item is
    returned instead.
    """
    record = next(iter_records(xml), None)
    if record is None:
        return FALLBACK_FEATURED

    image_url = choose_image_url(image_candidates(record))
    if not image_url:
        return FALLBACK_FEATURED

    title = decode_xml_entities(_field(TITLE_RE, record) or DEFAULT_FEATURED_TITLE).strip()
    permalink = decode_xml_entities(_field(LINK_RE, record) or DEFAULT_PERMALINK)
    return FeaturedItem(title=title, permalink=permalink, image_url=image_url)
