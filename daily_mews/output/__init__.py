"""Page rendering and artifact persistence."""

from .publisher import snapshot_json, write_artifacts
from .renderer import format_pretty_date, render_html

__all__ = ["format_pretty_date", "render_html", "snapshot_json", "write_artifacts"]
