from datetime import datetime, timezone


def utcnow():
    # Stored timestamps are naive UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today(now=None):
    return (now or utcnow()).date()
