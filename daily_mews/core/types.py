"""
Core data types for The Daily Mews.

This module defines the values that flow through one build:
- FeedEntry: One usable record parsed from the feed
- FeaturedItem: The "meme of the day" promoted to the top of the page
- Headline: A satirical story assembled from a template
- BuildResult: The snapshot written verbatim to data.json
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FeedEntry:
    """A single feed record with the fields needed for headlines.

    Attributes:
        title: Entry title with XML entities decoded and whitespace trimmed
        permalink: Link to the entry on the feed provider
        author: Display name of the poster, empty when the feed omits it
    """
    title: str
    permalink: str
    author: str = ""


@dataclass(frozen=True)
class FeaturedItem:
    """The image-bearing record shown as the meme of the day.

    Attributes:
        title: Title shown under the image
        permalink: Source link for attribution
        image_url: Remote URL the image bytes are downloaded from
    """
    title: str
    permalink: str
    image_url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "permalink": self.permalink,
            "imageUrl": self.image_url,
        }


@dataclass(frozen=True)
class Headline:
    """A synthesized story: a templated headline plus a fixed body line."""
    headline: str
    body: str

    def to_dict(self) -> dict[str, str]:
        return {"headline": self.headline, "body": self.body}


@dataclass
class BuildResult:
    """Durable output of one successful build.

    Attributes:
        updated_at_iso: Local build time as ISO 8601 with UTC offset
        timezone: IANA zone name the build time is expressed in
        featured: The selected meme of the day
        headlines: Up to four headlines, in selection order
    """
    updated_at_iso: str
    timezone: str
    featured: FeaturedItem
    headlines: list[Headline] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "updatedAt": self.updated_at_iso,
            "tz": self.timezone,
            "meme": self.featured.to_dict(),
            "headlines": [item.to_dict() for item in self.headlines],
        }
