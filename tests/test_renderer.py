import json
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from daily_mews.core.types import BuildResult, FeaturedItem, Headline
from daily_mews.output.publisher import snapshot_json, write_artifacts
from daily_mews.output.renderer import format_pretty_date, render_html

LA = ZoneInfo("America/Los_Angeles")


def _result(**overrides) -> BuildResult:
    data = dict(
        updated_at_iso="2024-01-01T06:00:00-08:00",
        timezone="America/Los_Angeles",
        featured=FeaturedItem(
            title="Loaf & Sploot",
            permalink="https://www.reddit.com/r/Catmemes/comments/1/",
            image_url="https://i.redd.it/loaf.jpg",
        ),
        headlines=[Headline("Weather Alert: Zoomies", "Secure the vases.")],
    )
    data.update(overrides)
    return BuildResult(**data)


def test_format_pretty_date():
    assert format_pretty_date(datetime(2024, 1, 1, 6, 5, tzinfo=LA)) == "Monday, January 1, 2024 • 6:05 AM PST"
    assert format_pretty_date(datetime(2024, 7, 4, 0, 30, tzinfo=LA)) == "Thursday, July 4, 2024 • 12:30 AM PDT"
    assert format_pretty_date(datetime(2024, 7, 4, 13, 0, tzinfo=LA)) == "Thursday, July 4, 2024 • 1:00 PM PDT"


def test_render_html_contains_page_parts():
    html = render_html(_result(), datetime(2024, 1, 1, 6, 0, tzinfo=LA), image_src="assets/daily-meme.jpg")

    assert html.startswith("<!doctype html>")
    assert html.rstrip().endswith("</html>")
    assert '<img class="meme" src="assets/daily-meme.jpg"' in html
    assert 'href="https://www.reddit.com/r/Catmemes/comments/1/"' in html
    assert "Loaf &amp; Sploot" in html
    assert "Weather Alert: Zoomies" in html
    assert "Monday, January 1, 2024 • 6:00 AM PST" in html


def test_render_html_escapes_script_in_headlines():
    result = _result(headlines=[Headline("<script>alert(1)</script>", "body <script>x()</script>")])

    html = render_html(result, datetime(2024, 1, 1, 6, 0, tzinfo=LA), image_src="assets/daily-meme.jpg")

    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "body &lt;script&gt;x()&lt;/script&gt;" in html


def test_snapshot_json_layout():
    text = snapshot_json(_result())

    assert text.endswith("}\n")
    assert text.startswith('{\n  "updatedAt"')
    data = json.loads(text)
    assert data == {
        "updatedAt": "2024-01-01T06:00:00-08:00",
        "tz": "America/Los_Angeles",
        "meme": {
            "title": "Loaf & Sploot",
            "permalink": "https://www.reddit.com/r/Catmemes/comments/1/",
            "imageUrl": "https://i.redd.it/loaf.jpg",
        },
        "headlines": [{"headline": "Weather Alert: Zoomies", "body": "Secure the vases."}],
    }


def test_write_artifacts_replaces_pair(tmp_path: Path):
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text("old", encoding="utf-8")

    html_path, json_path = write_artifacts(site, "<html>new</html>", _result(), "index.html", "data.json")

    assert html_path.read_text(encoding="utf-8") == "<html>new</html>"
    assert json.loads(json_path.read_text(encoding="utf-8"))["tz"] == "America/Los_Angeles"
    assert sorted(p.name for p in site.iterdir()) == ["data.json", "index.html"]


def test_write_artifacts_failure_leaves_previous_pair(tmp_path: Path, monkeypatch):
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text("old html", encoding="utf-8")
    (site / "data.json").write_text("old json", encoding="utf-8")

    def broken_snapshot(result):
        raise ValueError("cannot serialize")

    monkeypatch.setattr("daily_mews.output.publisher.snapshot_json", broken_snapshot)

    try:
        write_artifacts(site, "<html>new</html>", _result(), "index.html", "data.json")
    except ValueError:
        pass
    else:
        raise AssertionError("expected ValueError")

    assert (site / "index.html").read_text(encoding="utf-8") == "old html"
    assert (site / "data.json").read_text(encoding="utf-8") == "old json"
    assert sorted(p.name for p in site.iterdir()) == ["data.json", "index.html"]
