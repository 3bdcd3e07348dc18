from datetime import datetime, timedelta, timezone

import pytest

from portfolio_app.builder.listing import format_time_ago, portfolio_cards

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("delta, expected", [
    (timedelta(seconds=20), "just now"),
    (timedelta(minutes=1), "1 minute ago"),
    (timedelta(minutes=45), "45 minutes ago"),
    (timedelta(hours=3), "3 hours ago"),
    (timedelta(days=1, hours=2), "yesterday"),
    (timedelta(days=4), "4 days ago"),
    (timedelta(days=15), "2 weeks ago"),
    (timedelta(days=65), "2 months ago"),
    (timedelta(days=800), "2 years ago"),
])
def test_format_time_ago(delta, expected):
    assert format_time_ago(NOW - delta, now=NOW) == expected


def test_iso_strings_without_timezone_are_utc():
    assert format_time_ago("2026-03-01T11:00:00", now=NOW) == "1 hour ago"


def test_portfolio_cards():
    cards = portfolio_cards(
        [{"id": "p1", "name": "Site", "template": "creative", "updated_at": "2026-03-01T11:58:00Z"}],
        now=NOW,
    )
    assert cards == [{
        "id": "p1",
        "name": "Site",
        "template": "creative",
        "template_label": "Creative",
        "last_edited": "2 minutes ago",
    }]
