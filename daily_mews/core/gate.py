"""Publish gate: one build per day at a fixed local hour."""

from __future__ import annotations

from datetime import datetime

DEFAULT_PUBLISH_HOUR = 6


def should_publish(now_local: datetime, force: bool, publish_hour: int = DEFAULT_PUBLISH_HOUR) -> bool:
    """Return True when this invocation may write artifacts.

    ``now_local`` must already be expressed in the publishing time zone. The
    scheduler may call the job every hour; only the run whose local hour equals
    ``publish_hour`` publishes, unless ``force`` is set.
    """
    if force:
        return True
    return now_local.hour == publish_hour
