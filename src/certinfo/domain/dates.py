"""
Date parser — cert info date text → timezone-aware UTC instant.

TLS libraries disagree on how they print certificate validity dates:

  1. "Jan 10 08:29:52 2023 GMT"   (OpenSSL style, day may be space-padded)
  2. "2023-01-10 08:29:52 GMT"    (ISO-like)

Formats are tried in order and the first match wins. The GMT suffix is
matched literally and the result is always read as UTC.

A leap second (":60") is accepted and read as the first instant of the
next minute, e.g. "Dec 31 23:59:60 2016 GMT" → 2017-01-01T00:00:00Z.
strptime itself only allows seconds up to 59 here.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import structlog
from railway import ErrorCode
from railway.result import Result

log = structlog.get_logger()

DEFAULT_DATE_FORMATS: tuple[str, ...] = (
    "%b %d %H:%M:%S %Y GMT",
    "%Y-%m-%d %H:%M:%S GMT",
)

_LEAP_SECOND = re.compile(r"(\d{2}:\d{2}):60(?!\d)")


def _try_format(value: str, fmt: str) -> datetime | None:
    """Parse with a single strptime format, or None if it does not match."""
    try:
        return datetime.strptime(value, fmt)
    except ValueError:
        pass

    # Parse 23:59:60 as 23:59:59, then step one second.
    clamped, count = _LEAP_SECOND.subn(r"\1:59", value, count=1)
    if not count:
        return None
    try:
        return datetime.strptime(clamped, fmt) + timedelta(seconds=1)
    except ValueError:
        return None


def parse_date(
    value: str,
    formats: Sequence[str] = DEFAULT_DATE_FORMATS,
) -> Result[datetime]:
    """
    Parse a cert info date into a UTC datetime.

    Returns Result.failure(VALIDATION_ERROR, "can not parse date <value>")
    when no format matches.
    """
    for fmt in formats:
        naive = _try_format(value, fmt)
        if naive is not None:
            return Result.success(naive.replace(tzinfo=UTC))

    log.debug("date.unparseable", value=value, formats=list(formats))
    return Result.failure(ErrorCode.VALIDATION_ERROR, f"can not parse date <{value}>")
