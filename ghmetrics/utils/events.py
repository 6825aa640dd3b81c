# ghmetrics/utils/events.py
"""
Commit events for the activity tab.

Source: GET /search/commits?q=author:{username} (newest first).
Each search item becomes an immutable Event keyed by its UTC calendar date.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from ghmetrics.utils.time import utc_date

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5

@dataclass(frozen=True)
class Event:
    date: date
    label: str
    source: str
    timestamp: str = ""
    url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "repo": self.source,
            "message": self.label,
            "date": self.date.isoformat(),
            "timestamp": self.timestamp,
            "html_url": self.url,
        }

def event_from_commit(item: dict) -> Event:
    """Raises ValueError/KeyError when the item has no usable author date."""
    commit = item.get("commit") or {}
    timestamp = commit["author"]["date"]
    if not isinstance(timestamp, str):
        raise ValueError(f"author date is not a string: {timestamp!r}")
    return Event(
        date=utc_date(timestamp),
        label=commit.get("message") or "",
        source=(item.get("repository") or {}).get("name") or "",
        timestamp=timestamp,
        url=item.get("html_url"),
    )

def events_from_commits(items: Sequence[dict]) -> List[Event]:
    events: List[Event] = []
    for item in items:
        try:
            events.append(event_from_commit(item))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping commit with unusable timestamp: %s (%r)", item.get("html_url"), e)
    return events

def recent_events(events: Sequence[Event], limit: int = RECENT_LIMIT) -> List[Event]:
    # upstream order is newest first; kept as is
    return list(events[:limit])
