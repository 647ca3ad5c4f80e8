import datetime as dt

from utils.dates import display_date, to_calendar_date


def test_iso_timestamp_keeps_calendar_date():
    assert to_calendar_date('2024-03-05T10:30:00.000Z') == dt.date(2024, 3, 5)


def test_offset_timestamp_is_converted_to_utc_first():
    # 01:00 at +02:00 is still the previous day in UTC
    assert to_calendar_date('2024-03-05T01:00:00+02:00') == dt.date(2024, 3, 4)


def test_plain_date_string():
    assert to_calendar_date('2023-12-31') == dt.date(2023, 12, 31)


def test_date_and_datetime_objects():
    assert to_calendar_date(dt.date(2022, 1, 2)) == dt.date(2022, 1, 2)
    assert to_calendar_date(dt.datetime(2022, 1, 2, 23, 59)) == dt.date(2022, 1, 2)


def test_empty_and_invalid_values():
    assert to_calendar_date(None) is None
    assert to_calendar_date('') is None
    assert to_calendar_date('not a date') is None


def test_display_date():
    assert display_date('2024-03-05T10:30:00.000Z') == '2024-03-05'
    assert display_date(None) == 'N/A'
