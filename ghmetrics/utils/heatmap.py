# ghmetrics/utils/heatmap.py
"""
30-day commit heatmap.

- build_daily_histogram: one bucket per day in [today - 29, today], ascending,
  count = number of events on that UTC date (0 when none).
- color_tier: fixed thresholds  0 -> empty | 1..5 -> low | 6..7 -> medium | 8+ -> high
- render_heatmap: one cell per bucket with the tier color and tooltip text.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Dict, Iterable, List

from ghmetrics.utils.events import Event

WINDOW_DAYS = 30

class Tier(str, Enum):
    EMPTY = "empty"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

TIER_COLORS: Dict[Tier, str] = {
    Tier.EMPTY: "#ebedf0",
    Tier.LOW: "#818cf8",     # lighter indigo
    Tier.MEDIUM: "#6366f1",  # indigo
    Tier.HIGH: "#7c3aed",    # purple
}

@dataclass(frozen=True)
class DailyBucket:
    date: date
    count: int

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "count": self.count}

def window_dates(today: date, days: int = WINDOW_DAYS) -> List[date]:
    start = today - timedelta(days=days - 1)
    return [start + timedelta(days=i) for i in range(days)]

def build_daily_histogram(today: date, events: Iterable[Event]) -> List[DailyBucket]:
    counts: Dict[date, int] = {d: 0 for d in window_dates(today)}
    for ev in events:
        if ev.date in counts:
            counts[ev.date] += 1
    # dict keeps insertion order, which is already ascending
    return [DailyBucket(d, n) for d, n in counts.items()]

def color_tier(count: int) -> Tier:
    if count == 0:
        return Tier.EMPTY
    if count <= 5:
        return Tier.LOW
    if count <= 7:
        return Tier.MEDIUM
    return Tier.HIGH

def render_heatmap(buckets: Iterable[DailyBucket]) -> List[dict]:
    cells = []
    for b in buckets:
        tier = color_tier(b.count)
        cells.append({
            "date": b.date.isoformat(),
            "count": b.count,
            "tier": tier.value,
            "color": TIER_COLORS[tier],
            "title": f"{b.count} commits on {b.date.isoformat()}",
        })
    return cells
