"""
Main pipeline orchestration for The Daily Mews.

This module coordinates one build, strictly in order:
1. Publish gate (skip is a successful no-op)
2. Local time, date seed and seeded generator
3. Fetch the feed and pick the featured meme
4. Download the meme image into the site assets
5. Fetch the feed again and synthesize headlines
6. Render index.html and write it together with data.json

Any failure aborts the remaining steps. Files written by completed steps (the
image, in particular) are left in place.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable
from zoneinfo import ZoneInfo

import httpx
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from .config import AppConfig, FeedConfig
from .core.gate import should_publish
from .core.headlines import build_headlines
from .core.prng import date_seed, mulberry32
from .core.types import BuildResult
from .fetch.fetcher import build_client, download_to_file, fetch_text
from .input.feed_parser import FALLBACK_FEATURED, extract_featured_item, parse_entries
from .output.publisher import write_artifacts
from .output.renderer import render_html
from .utils.logging import get_logger, log_event, setup_logging

STAGE_COUNT = 5


@dataclass
class RunOutcome:
    """What a single invocation did.

    Attributes:
        published: False when the publish gate refused the run
        now_local: Invocation time in the publishing zone
        seed: Date seed used for selection, None when skipped
        result: The build snapshot, None when skipped
        html_path: Written page path
        json_path: Written snapshot path
        image_path: Written image path
    """
    published: bool
    now_local: datetime
    seed: int | None = None
    result: BuildResult | None = None
    html_path: Path | None = None
    json_path: Path | None = None
    image_path: Path | None = None


def local_now(tz_name: str, now: datetime | None = None) -> datetime:
    """Express ``now`` (default: the current instant) in the given zone.

    Naive datetimes are taken to be wall-clock time in that zone already.
    """
    zone = ZoneInfo(tz_name)
    if now is None:
        return datetime.now(zone)
    if now.tzinfo is None:
        return now.replace(tzinfo=zone)
    return now.astimezone(zone)


def run_pipeline(
    cfg: AppConfig,
    now: datetime | None = None,
    force: bool = False,
    show_progress: bool = True,
    console: Console | None = None,
    client_factory: Callable[[FeedConfig], httpx.AsyncClient] = build_client,
) -> RunOutcome:
    """Run one scheduled invocation end to end.

    Args:
        cfg: Application configuration
        now: Pinned invocation time; defaults to the current instant
        force: Bypass the publish gate
        show_progress: Whether to display a stage progress bar
        console: Rich console for the progress bar (creates default if None)
        client_factory: Builds the HTTP client for the run

    Returns:
        RunOutcome describing whether anything was published
    """
    # Console only until the gate passes; a skipped run must not touch site_dir.
    logger = setup_logging(cfg.logging, None)
    now_local = local_now(cfg.schedule.timezone, now)

    if not should_publish(now_local, force, cfg.schedule.publish_hour):
        log_event(
            logger,
            f"[skip] It's {now_local:%H:%M} in {cfg.schedule.timezone}; "
            f"only updating at {cfg.schedule.publish_hour:02d}:xx.",
            event="gate_skip",
            hour=now_local.hour,
        )
        return RunOutcome(published=False, now_local=now_local)

    if cfg.logging.file:
        logger = setup_logging(cfg.logging, cfg.site_dir)

    async def _run(progress: Progress | None) -> RunOutcome:
        async with client_factory(cfg.feed) as client:
            return await build_site(cfg, now_local, client, logger, progress)

    if not show_progress:
        return asyncio.run(_run(None))

    progress = Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console or Console(),
    )
    with progress:
        return asyncio.run(_run(progress))


async def build_site(
    cfg: AppConfig,
    now_local: datetime,
    client: httpx.AsyncClient,
    logger: logging.Logger | None = None,
    progress: Progress | None = None,
) -> RunOutcome:
    """Build and publish the site for ``now_local``; the gate is not checked here.

    Raises:
        FetchError: A feed or image request failed
        OSError: An artifact could not be written
    """
    logger = logger or get_logger()
    stage_task = progress.add_task("Stages", total=STAGE_COUNT) if progress else None

    def _advance(description: str) -> None:
        if progress is not None and stage_task is not None:
            progress.update(stage_task, advance=1, description=description)

    site_dir = cfg.site_dir
    date_str = now_local.date().isoformat()
    seed = date_seed(now_local)
    rng = mulberry32(seed)
    log_event(
        logger,
        "Pipeline start",
        level=logging.DEBUG,
        event="pipeline_start",
        date=date_str,
        seed=seed,
        site_dir=str(site_dir),
    )

    featured = extract_featured_item(await fetch_text(client, cfg.feed.url))
    if featured is FALLBACK_FEATURED:
        log_event(logger, "No usable featured image in feed; using fallback", event="featured_fallback")
    log_event(
        logger,
        f"Featured: {featured.title}",
        level=logging.DEBUG,
        event="featured_selected",
        url=featured.image_url,
    )
    _advance("Featured")

    image_path = site_dir / cfg.output.image_path
    size = await download_to_file(client, featured.image_url, image_path)
    log_event(logger, "Image saved", level=logging.DEBUG, event="image_saved", path=str(image_path), size=size)
    _advance("Image")

    entries = parse_entries(await fetch_text(client, cfg.feed.url))
    log_event(logger, "Feed entries parsed", level=logging.DEBUG, event="entries_parsed", count=len(entries))
    headlines = build_headlines(
        entries,
        featured.title,
        date_str,
        rng,
        candidates=cfg.headlines.candidates,
        count=cfg.headlines.count,
    )
    log_event(logger, "Headlines built", level=logging.DEBUG, event="headlines_built", count=len(headlines))
    _advance("Headlines")

    result = BuildResult(
        updated_at_iso=now_local.isoformat(),
        timezone=cfg.schedule.timezone,
        featured=featured,
        headlines=headlines,
    )
    html = render_html(result, now_local, image_src=Path(cfg.output.image_path).as_posix())
    _advance("Render")

    html_path, json_path = write_artifacts(
        site_dir,
        html,
        result,
        cfg.output.html_filename,
        cfg.output.json_filename,
    )
    log_event(
        logger,
        "Artifacts written",
        level=logging.DEBUG,
        event="artifacts_written",
        html=str(html_path),
        json=str(json_path),
    )
    _advance("Done")

    log_event(
        logger,
        f"[ok] updated site for {date_str} ({cfg.schedule.timezone})",
        event="pipeline_complete",
        seed=seed,
    )
    return RunOutcome(
        published=True,
        now_local=now_local,
        seed=seed,
        result=result,
        html_path=html_path,
        json_path=json_path,
        image_path=image_path,
    )
