import datetime

import pytest
from dateutil import tz

from fixedrec.utils.date_parser import (
    BLANK_SENTINEL,
    is_blank,
    basic_to_extended_date,
    basic_to_extended_time,
    basic_to_extended_datetime,
    parse_extended_date,
    parse_extended_time,
    parse_offset,
    parse_extended_datetime,
)

# blank detection

def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("   ")
    assert is_blank(BLANK_SENTINEL)
    assert not is_blank("000000")
    assert not is_blank("0000000000")
    assert not is_blank("20250101")

# separator insertion

def test_basic_to_extended_conversions():
    assert basic_to_extended_date("20250725") == "2025-07-25"
    assert basic_to_extended_time("091123") == "09:11:23"
    assert basic_to_extended_datetime("20250725T091123") == "2025-07-25T09:11:23"
    assert basic_to_extended_datetime("20250725T091123+0200") == "2025-07-25T09:11:23+02:00"
    assert basic_to_extended_datetime("20250725T091123-0530") == "2025-07-25T09:11:23-05:30"

# strict parsers

def test_parse_extended_date_success_and_failures():
    assert parse_extended_date("2024-02-29") == datetime.date(2024, 2, 29)
    with pytest.raises(ValueError):
        parse_extended_date("2023-02-29")
    with pytest.raises(ValueError):
        parse_extended_date("2025/07/25")
    with pytest.raises(ValueError):
        parse_extended_date("2025-7-25 ")


def test_parse_extended_date_rejects_non_ascii_digits():
    with pytest.raises(ValueError):
        parse_extended_date("２０２５-07-25")


def test_parse_extended_time_limits():
    assert parse_extended_time("00:00:00") == datetime.time(0, 0, 0)
    assert parse_extended_time("23:59:59") == datetime.time(23, 59, 59)
    for bad in ("24:00:00", "12:60:00", "12:00:60", "12-00-00", "1:00:00 "):
        with pytest.raises(ValueError):
            parse_extended_time(bad)


def test_parse_offset():
    assert parse_offset("+02:00").utcoffset(None) == datetime.timedelta(hours=2)
    assert parse_offset("-05:30").utcoffset(None) == -datetime.timedelta(hours=5, minutes=30)
    assert parse_offset("+18:00").utcoffset(None) == datetime.timedelta(hours=18)
    for bad in ("+18:01", "+02:60", "02:00", "Z", "+0200"):
        with pytest.raises(ValueError):
            parse_offset(bad)


def test_parse_extended_datetime_naive():
    dt = parse_extended_datetime("2025-07-25T09:11:23")
    assert dt == datetime.datetime(2025, 7, 25, 9, 11, 23)
    assert dt.tzinfo is None


def test_parse_extended_datetime_offset_normalised_to_utc():
    dt = parse_extended_datetime("2025-07-25T09:11:23+02:00", time_offset=True)
    assert dt.tzinfo is tz.UTC
    assert (dt.hour, dt.minute, dt.second) == (7, 11, 23)


def test_parse_extended_datetime_offset_mismatch():
    with pytest.raises(ValueError):
        parse_extended_datetime("2025-07-25T09:11:23+02:00")
    with pytest.raises(ValueError):
        parse_extended_datetime("2025-07-25T09:11:23", time_offset=True)
    with pytest.raises(ValueError):
        parse_extended_datetime("2025-07-25")


def test_parsers_reject_trailing_newline():
    for call, text in (
        (parse_extended_date, "2025-07-25\n"),
        (parse_extended_time, "09:11:23\n"),
        (parse_offset, "+02:00\n"),
    ):
        with pytest.raises(ValueError):
            call(text)
