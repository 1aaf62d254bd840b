"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FeedConfig: Feed URL and HTTP client settings
- ScheduleConfig: Publishing time zone, hour and override switch
- HeadlinesConfig: How many titles and stories to draw
- OutputConfig: Site directory and artifact names
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


@dataclass
class FeedConfig:
    """Configuration for fetching the feed and the featured image.

    Attributes:
        url: Atom feed of the day's top posts
        user_agent: HTTP User-Agent header string; must not look generic
        timeout_seconds: HTTP request timeout
        trust_env: Whether to respect system proxy settings
    """

    url: str = "https://www.reddit.com/r/Catmemes/top/.rss?t=day"
    user_agent: str = "TheDailyMewsBot/1.0 (GitHub Actions)"
    timeout_seconds: float = 20.0
    trust_env: bool = True


@dataclass
class ScheduleConfig:
    """Configuration for the publish gate.

    Attributes:
        timezone: IANA zone the publish hour and the date seed are evaluated in
        publish_hour: Local hour (0-23) at which a scheduled run publishes
        force_env: Environment variable that bypasses the gate
        force_value: Exact value of force_env that enables the bypass
    """

    timezone: str = "America/Los_Angeles"
    publish_hour: int = 6
    force_env: str = "FORCE_UPDATE"
    force_value: str = "1"


@dataclass
class HeadlinesConfig:
    """Configuration for headline synthesis.

    Attributes:
        candidates: Number of feed titles drawn into template slots
        count: Number of assembled stories published
    """

    candidates: int = 6
    count: int = 4


@dataclass
class OutputConfig:
    """Configuration for output artifacts.

    Attributes:
        site_dir: Directory the static site is written to
        image_path: Featured image location, relative to site_dir
        html_filename: Rendered page file name
        json_filename: Snapshot file name
    """

    site_dir: str = "site"
    image_path: str = "assets/daily-meme.jpg"
    html_filename: str = "index.html"
    json_filename: str = "data.json"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to a file in the site directory
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "run.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    feed: FeedConfig = field(default_factory=FeedConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    headlines: HeadlinesConfig = field(default_factory=HeadlinesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def site_dir(self) -> Path:
        return Path(self.output.site_dir)


DEFAULT_CONFIG = AppConfig()


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return _fromdict(_asdict(DEFAULT_CONFIG))

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(DEFAULT_CONFIG, raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "feed": {
            "url": cfg.feed.url,
            "user_agent": cfg.feed.user_agent,
            "timeout_seconds": cfg.feed.timeout_seconds,
            "trust_env": cfg.feed.trust_env,
        },
        "schedule": {
            "timezone": cfg.schedule.timezone,
            "publish_hour": cfg.schedule.publish_hour,
            "force_env": cfg.schedule.force_env,
            "force_value": cfg.schedule.force_value,
        },
        "headlines": {
            "candidates": cfg.headlines.candidates,
            "count": cfg.headlines.count,
        },
        "output": {
            "site_dir": cfg.output.site_dir,
            "image_path": cfg.output.image_path,
            "html_filename": cfg.output.html_filename,
            "json_filename": cfg.output.json_filename,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        feed=FeedConfig(**data["feed"]),
        schedule=ScheduleConfig(**data["schedule"]),
        headlines=HeadlinesConfig(**data["headlines"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


def is_force_requested(cfg: ScheduleConfig, environ: Mapping[str, str] | None = None) -> bool:
    """Check the environment override for the publish gate.

    Only the exact sentinel value counts; "true" or "yes" do not.
    """
    env = os.environ if environ is None else environ
    return env.get(cfg.force_env) == cfg.force_value
