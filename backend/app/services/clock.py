from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Current instant, timezone-aware (UTC)."""
    return datetime.now(timezone.utc)
