"""
Satirical headline synthesis.

Trending feed titles are slotted into six fixed templates. Two independent
draws from the same seeded stream decide the outcome: first which titles fill
the slots, then which four of the six assembled stories are published. The
order of those draws is part of the output contract.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from .selection import pick_n
from .types import FeedEntry, Headline

_WHITESPACE_RE = re.compile(r"\s+")

CANDIDATE_COUNT = 6
HEADLINE_COUNT = 4


@dataclass(frozen=True)
class HeadlineTemplate:
    """One story template.

    Attributes:
        headline: Format string with a single ``{title}`` slot
        body: Format string that may reference ``{date}``
        default_title: Used when neither a picked title nor the featured title exists
    """
    headline: str
    body: str
    default_title: str


TEMPLATES: tuple[HeadlineTemplate, ...] = (
    HeadlineTemplate(
        headline="BREAKING: “{title}”",
        body='Officials confirm this is being treated as a "meow-jor" development. (Filed: {date})',
        default_title="Cat Declares Independence From Gravity",
    ),
    HeadlineTemplate(
        headline="Markets React To: {title}",
        body="Treat futures up. Productivity down. The couch remains occupied.",
        default_title="Human Opens Can; Civilization Restored",
    ),
    HeadlineTemplate(
        headline="Opinion: {title} (And You Know It)",
        body="Experts urge humans to stop taking it personally and start providing snacks.",
        default_title="Your Keyboard Was Always A Heated Bed",
    ),
    HeadlineTemplate(
        headline="Science Desk Investigates: {title}",
        body="The peer review process consisted of one stare, two slow blinks, and a decisive nap.",
        default_title="The Mystery Of The 0.7% Empty Bowl",
    ),
    HeadlineTemplate(
        headline="Exclusive: Government Announces New Standard: “{title}\"",
        body="Applies to boxes, laundry baskets, and your freshly folded clothes (especially those).",
        default_title="If It Fits, It Sits",
    ),
    HeadlineTemplate(
        headline="Weather Alert: {title}",
        body="Residents advised to secure fragile objects and prepare for hallway drag races.",
        default_title="Chance Of Zoomies After Midnight",
    ),
)


def normalize_title(title: str) -> str:
    return _WHITESPACE_RE.sub(" ", title).strip()


def candidate_titles(entries: Iterable[FeedEntry], exclude_title: str) -> list[str]:
    """Distinct normalized titles in feed order, minus the featured title.

    Falls back to every normalized title (duplicates included) when the
    exclusion would leave nothing to pick from.
    """
    titles = [normalize_title(entry.title) for entry in entries if entry.title]
    titles = [title for title in titles if title]
    distinct = [title for title in dict.fromkeys(titles) if title != exclude_title]
    return distinct or titles


def build_headlines(
    entries: Iterable[FeedEntry],
    featured_title: str,
    date_str: str,
    rng: Callable[[], float],
    candidates: int = CANDIDATE_COUNT,
    count: int = HEADLINE_COUNT,
) -> list[Headline]:
    """Assemble the day's headlines from feed entries.

    Args:
        entries: Parsed feed entries in feed order
        featured_title: Title of the meme of the day, excluded from the pool
        date_str: ISO calendar date shown in the "Filed:" body line
        rng: Seeded generator shared with the rest of the build
        candidates: Number of titles to draw for template slots
        count: Number of assembled stories to publish

    Returns:
        Up to ``count`` headlines in draw order
    """
    # One draw per template slot; extra draws would shift the second selection.
    candidates = min(candidates, len(TEMPLATES))
    pool = candidate_titles(entries, featured_title)
    picked = pick_n(pool, candidates, rng)

    assembled = []
    for index, template in enumerate(TEMPLATES[:candidates]):
        title = picked[index] if index < len(picked) else ""
        title = title or featured_title or template.default_title
        assembled.append(
            Headline(
                headline=template.headline.format(title=title),
                body=template.body.format(date=date_str),
            )
        )

    return pick_n(assembled, count, rng)
