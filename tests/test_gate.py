from datetime import datetime
from zoneinfo import ZoneInfo

from daily_mews.core.gate import should_publish

LA = ZoneInfo("America/Los_Angeles")


def test_publishes_at_six():
    assert should_publish(datetime(2024, 1, 1, 6, 0, tzinfo=LA), force=False)
    assert should_publish(datetime(2024, 1, 1, 6, 59, tzinfo=LA), force=False)


def test_skips_other_hours():
    assert not should_publish(datetime(2024, 1, 1, 5, 59, tzinfo=LA), force=False)
    assert not should_publish(datetime(2024, 1, 1, 7, 0, tzinfo=LA), force=False)


def test_force_always_publishes():
    assert should_publish(datetime(2024, 1, 1, 5, 0, tzinfo=LA), force=True)
    assert should_publish(datetime(2024, 1, 1, 23, 0, tzinfo=LA), force=True)


def test_custom_publish_hour():
    assert should_publish(datetime(2024, 1, 1, 9, 0, tzinfo=LA), force=False, publish_hour=9)
    assert not should_publish(datetime(2024, 1, 1, 6, 0, tzinfo=LA), force=False, publish_hour=9)
