from __future__ import annotations
import datetime
import re
from typing import Optional

from dateutil import tz

# Placeholder written by producers for "no date"; compared literally.
BLANK_SENTINEL = "00000000"

_EXTENDED_DATE_RE = re.compile(r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})", re.ASCII)
_EXTENDED_TIME_RE = re.compile(r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})", re.ASCII)
_OFFSET_RE = re.compile(r"(?P<sign>[+-])(?P<hours>\d{2}):(?P<minutes>\d{2})", re.ASCII)

# ISO-8601 limits offsets to +/-18:00
_MAX_OFFSET = datetime.timedelta(hours=18)

EXTENDED_DATETIME_LENGTH = 19


def is_blank(value: Optional[str]) -> bool:
    """
    Tell whether a date/time slice carries no value.

    :param value: The raw slice extracted from the record.
    :return: True if the slice is empty, whitespace only, or the literal zero sentinel.
    """
    return value is None or value.strip() == "" or value == BLANK_SENTINEL


# ----------------------------------------------------------------------------
# Basic (compact) -> extended conversion
# ----------------------------------------------------------------------------

def basic_to_extended_date(value: str) -> str:
    """``YYYYMMDD`` -> ``YYYY-MM-DD``."""
    return f"{value[:4]}-{value[4:6]}-{value[6:]}"


def basic_to_extended_time(value: str) -> str:
    """``HHMMSS`` -> ``HH:MM:SS``."""
    return f"{value[:2]}:{value[2:4]}:{value[4:]}"


def basic_to_extended_datetime(value: str) -> str:
    """
    Insert separators into ``YYYYMMDDTHHMMSS[+HHMM]``.

    Separators go at fixed character positions; the character at index 8 (the
    ``T``) and the offset sign are carried over untouched so the extended parser
    gets to reject them.

    :param value: The compact datetime slice.
    :return: The same value in extended form.
    """
    out = basic_to_extended_date(value[:8]) + value[8:9] + basic_to_extended_time(value[9:15])
    if len(value) > 15:
        out += f"{value[15:18]}:{value[18:]}"
    return out


# ----------------------------------------------------------------------------
# Strict extended parsers
# ----------------------------------------------------------------------------

def parse_extended_date(value: str) -> datetime.date:
    """
    Parse an ISO-8601 extended date (``YYYY-MM-DD``).

    :raises ValueError: if the text does not match the format or is not a calendar date.
    """
    match = _EXTENDED_DATE_RE.fullmatch(value)
    if not match:
        raise ValueError(f"bad date: {value!r}")
    return datetime.date(int(match["year"]), int(match["month"]), int(match["day"]))


def parse_extended_time(value: str) -> datetime.time:
    """
    Parse an ISO-8601 extended time (``HH:MM:SS``).

    :raises ValueError: if the text does not match the format or a component is out of range.
    """
    match = _EXTENDED_TIME_RE.fullmatch(value)
    if not match:
        raise ValueError(f"bad time: {value!r}")
    return datetime.time(int(match["hour"]), int(match["minute"]), int(match["second"]))


def parse_offset(value: str) -> datetime.tzinfo:
    """
    Parse a ``+HH:MM`` / ``-HH:MM`` UTC offset into a fixed-offset tzinfo.

    :raises ValueError: on malformed text or an offset outside +/-18:00.
    """
    match = _OFFSET_RE.fullmatch(value)
    if not match:
        raise ValueError(f"bad offset: {value!r}")
    minutes = int(match["minutes"])
    if minutes > 59:
        raise ValueError(f"bad offset: {value!r}")
    delta = datetime.timedelta(hours=int(match["hours"]), minutes=minutes)
    if delta > _MAX_OFFSET:
        raise ValueError(f"offset out of range: {value!r}")
    if match["sign"] == "-":
        delta = -delta
    return tz.tzoffset(None, delta)


def parse_extended_datetime(value: str, time_offset: bool = False) -> datetime.datetime:
    """
    Parse ``YYYY-MM-DDTHH:MM:SS``, optionally followed by a ``+HH:MM`` offset.

    Without an offset the result is naive. With an offset the wall-clock time is
    interpreted at that offset and the result is converted to UTC
    (``tzinfo`` is :data:`dateutil.tz.UTC`).

    :param value: The datetime text.
    :param time_offset: Whether the text carries a trailing offset.
    :raises ValueError: if the text is malformed or any component is out of range.
    """
    local_part = value[:EXTENDED_DATETIME_LENGTH]
    offset_part = value[EXTENDED_DATETIME_LENGTH:]
    if len(local_part) != EXTENDED_DATETIME_LENGTH or local_part[10] != "T":
        raise ValueError(f"bad datetime: {value!r}")
    if not time_offset and offset_part:
        raise ValueError(f"unexpected offset in datetime: {value!r}")

    day = parse_extended_date(local_part[:10])
    clock = parse_extended_time(local_part[11:])
    if not time_offset:
        return datetime.datetime.combine(day, clock)

    aware = datetime.datetime.combine(day, clock, tzinfo=parse_offset(offset_part))
    return aware.astimezone(tz.UTC)


__all__ = [
    "BLANK_SENTINEL",
    "is_blank",
    "basic_to_extended_date",
    "basic_to_extended_time",
    "basic_to_extended_datetime",
    "parse_extended_date",
    "parse_extended_time",
    "parse_offset",
    "parse_extended_datetime",
]
