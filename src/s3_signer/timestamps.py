from datetime import datetime, timezone
from email.utils import format_datetime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(timestamp: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def rfc1123_date(timestamp: datetime) -> str:
    """Date header value, e.g. 'Tue, 15 Nov 1994 08:12:31 GMT'."""
    return format_datetime(as_utc(timestamp).replace(microsecond=0), usegmt=True)


def amz_date(timestamp: datetime) -> str:
    """ISO8601 basic format used by x-amz-date, e.g. '20130524T000000Z'."""
    return as_utc(timestamp).strftime("%Y%m%dT%H%M%SZ")


def date_stamp(timestamp: datetime) -> str:
    """YYYYMMDD day used in the V4 credential scope."""
    return as_utc(timestamp).strftime("%Y%m%d")
