from __future__ import annotations
from datetime import datetime, timedelta, timezone

# Момент, которым помечается удалённая запись (как у браузерной cookie)
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DEFAULT_PATH = "/"
SAME_SITE = "Strict"


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def expires_in_days(days: int, now: datetime | None = None) -> datetime:
    return (now or now_utc()) + timedelta(days=days)


def format_expires(moment: datetime) -> str:
    # HTTP-дата, как в атрибуте expires: Thu, 01 Jan 1970 00:00:00 GMT
    return moment.astimezone(timezone.utc).strftime("%a, %d %b %Y %H:%M:%S GMT")
