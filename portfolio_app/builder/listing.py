"""Labels for the "my portfolios" page."""
from datetime import datetime, timezone

from .starters import template_display_name


def _plural(count, unit):
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def _parse(value):
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_time_ago(value, now=None):
    if not value:
        return ""
    now = _parse(now) if now is not None else datetime.now(timezone.utc)
    diff = (now - _parse(value)).total_seconds()

    minutes = int(diff // 60)
    hours = int(diff // 3600)
    days = int(diff // 86400)

    if minutes < 1:
        return "just now"
    if minutes < 60:
        return _plural(minutes, "minute")
    if hours < 24:
        return _plural(hours, "hour")
    if days == 1:
        return "yesterday"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return _plural(days // 7, "week")
    if days < 365:
        return _plural(days // 30, "month")
    return _plural(days // 365, "year")


def portfolio_cards(portfolios, now=None):
    """Card data for each saved portfolio, in the order the server listed them."""
    return [
        {
            "id": p["id"],
            "name": p.get("name") or "",
            "template": p.get("template"),
            "template_label": template_display_name(p.get("template")),
            "last_edited": format_time_ago(p.get("updated_at"), now=now),
        }
        for p in portfolios
    ]
