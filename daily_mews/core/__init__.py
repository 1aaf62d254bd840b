"""
Core domain models and selection logic.

Everything in this package is pure: no network, filesystem, or clock access.
"""

from .gate import should_publish
from .headlines import TEMPLATES, build_headlines, candidate_titles, normalize_title
from .prng import date_seed, mulberry32
from .selection import pick_n
from .types import BuildResult, FeaturedItem, FeedEntry, Headline

__all__ = [
    "BuildResult",
    "FeaturedItem",
    "FeedEntry",
    "Headline",
    "TEMPLATES",
    "build_headlines",
    "candidate_titles",
    "date_seed",
    "mulberry32",
    "normalize_title",
    "pick_n",
    "should_publish",
]
