"""
The Daily Mews - a once-a-day satirical cat news page.

This package reads the day's top r/Catmemes posts, picks a featured meme and
turns trending titles into headlines, then writes a static site (index.html,
data.json and the meme image). Selection is seeded by the calendar date, so
every run on the same day produces the same page.

Main entry point is the CLI via `daily-mews run` command.

Example:
    $ FORCE_UPDATE=1 daily-mews run -o site/
"""

__all__ = ["__version__", "build_headlines", "extract_featured_item", "parse_entries", "should_publish"]
__version__ = "0.1.0"

from .core.gate import should_publish
from .core.headlines import build_headlines
from .input.feed_parser import extract_featured_item, parse_entries
