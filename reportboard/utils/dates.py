from __future__ import annotations
from datetime import date, datetime
from zoneinfo import ZoneInfo

from reportboard.core.config import TIMEZONE

TZ = ZoneInfo(TIMEZONE)

def now_local() -> datetime:
    return datetime.now(TZ)

def today_local() -> date:
    return now_local().date()

def now_naive() -> datetime:
    """Local wall-clock time without tzinfo; SQLite DateTime columns drop the offset anyway."""
    return now_local().replace(tzinfo=None)
