"""
Artifact persistence for the static site.

The page and the snapshot are published as a pair: both are staged next to
their targets and swapped in with ``os.replace`` only after both staged
files are complete. The featured image is written earlier in the run by the
downloader and is not part of the pair.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from ..core.types import BuildResult


def snapshot_json(result: BuildResult) -> str:
    """Serialize a build as pretty-printed JSON with a trailing newline."""
    return f"{json.dumps(result.to_dict(), ensure_ascii=False, indent=2)}\n"


def _stage(target: Path, text: str) -> Path:
    fd, staged = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    return Path(staged)


def write_artifacts(site_dir: Path, html: str, result: BuildResult, html_name: str, json_name: str) -> tuple[Path, Path]:
    """Write ``index.html`` and ``data.json`` into ``site_dir``.

    Returns:
        Paths of the written HTML and JSON files
    """
    site_dir.mkdir(parents=True, exist_ok=True)
    html_path = site_dir / html_name
    json_path = site_dir / json_name

    staged: list[Path] = []
    try:
        staged.append(_stage(html_path, html))
        staged.append(_stage(json_path, snapshot_json(result)))
        os.replace(staged[0], html_path)
        os.replace(staged[1], json_path)
    finally:
        for path in staged:
            if path.exists():
                path.unlink()
    return html_path, json_path
