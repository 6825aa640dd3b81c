# ghmetrics/routers/activity.py
"""
Activity tab: 30-day commit heatmap + recent commits.

Source: GET /search/commits?q=author:{username}&sort=author-date&order=desc (first page).

Returns:
- commit_data:    30 x {date, count}, ascending, today (UTC) last
- heatmap:        same days with tier/color/title for the grid
- recent_commits: the 5 newest commits as returned by the search
"""

from fastapi import APIRouter, Depends

from ghmetrics.routers.deps import username_param
from ghmetrics.services.github import search_commits
from ghmetrics.utils.events import events_from_commits, recent_events
from ghmetrics.utils.heatmap import WINDOW_DAYS, build_daily_histogram, render_heatmap
from ghmetrics.utils.time import utc_today

router = APIRouter()

@router.get("/activity")
def user_activity(username: str = Depends(username_param)):
    events = events_from_commits(search_commits(username))
    buckets = build_daily_histogram(utc_today(), events)
    return {
        "username": username,
        "window_days": WINDOW_DAYS,
        "total": sum(b.count for b in buckets),
        "commit_data": [b.to_dict() for b in buckets],
        "heatmap": render_heatmap(buckets),
        "recent_commits": [ev.to_dict() for ev in recent_events(events)],
    }
