from datetime import date, datetime, timezone

def utc_today() -> date:
    return datetime.now(timezone.utc).date()

def parse_iso_dt(s: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values and bare dates are taken as UTC."""
    dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

def utc_date(s: str) -> date:
    return parse_iso_dt(s).date()
