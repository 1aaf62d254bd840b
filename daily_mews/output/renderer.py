"""
HTML page rendering.

The page is a single Jinja2 template with inline styles. Autoescaping is on
for every interpolated value: headline text comes from an untrusted feed.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.types import BuildResult

SITE_TITLE = "The Daily Mews"
SOURCE_URL = "https://github.com/karmolty/daily-mews"
MARQUEE = (
    "BREAKING: Experts confirm your cat was right all along • "
    "UPDATE: the bowl is 0.7% empty • "
    "DEVELOPING: box acquisition at an all-time high •"
)


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(Path(__file__).resolve().parent.parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )


def format_pretty_date(moment: datetime) -> str:
    """Masthead date, e.g. ``Monday, January 1, 2024 • 6:00 AM PST``."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    zone = moment.tzname() or ""
    return (
        f"{moment:%A}, {moment:%B} {moment.day}, {moment.year} • "
        f"{hour}:{moment:%M} {meridiem} {zone}"
    ).strip()


def render_html(result: BuildResult, now_local: datetime, image_src: str) -> str:
    """Render the full page for a build.

    Args:
        result: The build snapshot; supplies the meme and headlines
        now_local: Build time in the publishing zone, shown in the masthead
        image_src: Site-relative path of the downloaded meme image
    """
    template = _environment().get_template("index.html")
    return template.render(
        site_title=SITE_TITLE,
        date_pretty=format_pretty_date(now_local),
        marquee=MARQUEE,
        image_src=image_src,
        meme=result.featured,
        headlines=result.headlines,
        year=datetime.now(timezone.utc).year,
        source_url=SOURCE_URL,
    )
