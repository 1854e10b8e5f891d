from datetime import datetime, timezone
from typing import Optional


# SerpApi google_news and google (tbm=nws) date shapes
SEARCH_DATE_FORMATS = [
    '%m/%d/%Y, %I:%M %p, %z UTC',
    '%m/%d/%Y, %I:%M %p',
    '%Y-%m-%dT%H:%M:%SZ',
    '%Y-%m-%dT%H:%M:%S.%fZ',
    '%Y-%m-%dT%H:%M:%S%z',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d',
    '%b %d, %Y',
    '%d %b %Y',
]


def to_iso(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso(datetime.now(timezone.utc))


def parse_published_date(date_str: str) -> Optional[str]:
    if not date_str or not isinstance(date_str, str):
        return None

    date_str = date_str.strip()
    for fmt in SEARCH_DATE_FORMATS:
        try:
            return to_iso(datetime.strptime(date_str, fmt))
        except ValueError:
            continue

    try:
        return to_iso(datetime.fromisoformat(date_str))
    except ValueError:
        return None
