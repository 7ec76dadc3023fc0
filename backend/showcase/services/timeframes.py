import enum
from datetime import datetime, timedelta


class Timeframe(str, enum.Enum):
    TODAY = "today"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ALL = "all"


def start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def timeframe_lower_bound(timeframe, now: datetime | None = None) -> datetime | None:
    """Inclusive created_at lower bound for a ranking window, None for "all".

    Raises ValueError for anything that is not a Timeframe value.
    """
    timeframe = Timeframe(timeframe)
    now = now or datetime.utcnow()

    if timeframe == Timeframe.TODAY:
        return start_of_day(now)
    if timeframe == Timeframe.WEEKLY:
        return now - timedelta(days=7)
    if timeframe == Timeframe.MONTHLY:
        return now - timedelta(days=30)
    return None
