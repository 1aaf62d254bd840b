from daily_mews.core.headlines import TEMPLATES, build_headlines, candidate_titles, normalize_title
from daily_mews.core.prng import mulberry32
from daily_mews.core.types import FeedEntry, Headline


def _entries(*titles: str) -> list[FeedEntry]:
    return [FeedEntry(title=title, permalink=f"https://example.com/{i}") for i, title in enumerate(titles)]


def test_normalize_title_collapses_whitespace():
    assert normalize_title("  Cat \n\t in   box ") == "Cat in box"


def test_candidate_titles_dedupes_and_excludes_featured():
    entries = _entries("Loaf", "Loaf  ", "Featured", "Sploot", "Loaf")
    assert candidate_titles(entries, "Featured") == ["Loaf", "Sploot"]


def test_candidate_titles_falls_back_to_all_titles():
    entries = _entries("Featured", "Featured")
    assert candidate_titles(entries, "Featured") == ["Featured", "Featured"]


def test_build_headlines_reference_selection():
    entries = _entries(*(f"Cat {i}" for i in range(1, 9)))

    headlines = build_headlines(entries, "Breaking: Cat Seen Being A Cat", "2024-01-01", mulberry32(20240101))

    assert headlines == [
        Headline(
            "Weather Alert: Cat 7",
            "Residents advised to secure fragile objects and prepare for hallway drag races.",
        ),
        Headline(
            "Opinion: Cat 4 (And You Know It)",
            "Experts urge humans to stop taking it personally and start providing snacks.",
        ),
        Headline(
            "Markets React To: Cat 3",
            "Treat futures up. Productivity down. The couch remains occupied.",
        ),
        Headline(
            "BREAKING: “Cat 5”",
            'Officials confirm this is being treated as a "meow-jor" development. (Filed: 2024-01-01)',
        ),
    ]


def test_build_headlines_is_stable_for_same_seed():
    entries = _entries(*(f"Story {i}" for i in range(12)))
    first = build_headlines(entries, "Meme", "2024-05-05", mulberry32(20240505))
    second = build_headlines(entries, "Meme", "2024-05-05", mulberry32(20240505))
    assert first == second


def test_build_headlines_differs_across_days():
    entries = _entries(*(f"Cat {i}" for i in range(1, 9)))
    day_one = build_headlines(entries, "Meme", "2024-01-01", mulberry32(20240101))
    day_two = build_headlines(entries, "Meme", "2024-01-02", mulberry32(20240102))
    assert [h.headline for h in day_two] == [
        "BREAKING: “Cat 4”",
        "Exclusive: Government Announces New Standard: “Cat 5\"",
        "Markets React To: Cat 6",
        "Science Desk Investigates: Cat 1",
    ]
    assert day_one != day_two


def test_build_headlines_never_uses_featured_title_when_alternatives_exist():
    entries = _entries("Featured", *(f"Cat {i}" for i in range(10)))
    for seed in range(20240101, 20240131):
        headlines = build_headlines(entries, "Featured", "2024-01-01", mulberry32(seed))
        assert len(headlines) == 4
        assert all("Featured" not in h.headline for h in headlines)


def test_build_headlines_fills_missing_slots_with_featured_title():
    headlines = build_headlines([], "Cat Sits", "2024-01-01", mulberry32(1))

    assert len(headlines) == 4
    assert all("Cat Sits" in h.headline for h in headlines)


def test_build_headlines_uses_template_defaults_without_any_title():
    headlines = build_headlines([], "", "2024-01-01", mulberry32(1))

    defaults = {template.headline.format(title=template.default_title) for template in TEMPLATES}
    assert {h.headline for h in headlines} <= defaults
    assert len({h.headline for h in headlines}) == 4


def test_build_headlines_titles_with_braces_are_literal():
    headlines = build_headlines(_entries("{date} {0}"), "", "2024-01-01", mulberry32(3), count=6)
    assert any("{date} {0}" in h.headline for h in headlines)


def test_build_headlines_caps_candidate_draws_at_template_count():
    entries = _entries(*(f"Cat {i}" for i in range(1, 13)))

    capped = build_headlines(entries, "Meme", "2024-01-01", mulberry32(20240101), candidates=10)
    standard = build_headlines(entries, "Meme", "2024-01-01", mulberry32(20240101), candidates=6)

    assert capped == standard
