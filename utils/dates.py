import datetime as _dt
from typing import Any, Optional


def today() -> _dt.date:
    return _dt.date.today()


def to_calendar_date(value: Any) -> Optional[_dt.date]:
    """Reduce a backend date value to a plain calendar date.

    Accepts date/datetime objects and ISO strings, either date-only
    (``2024-03-05``) or full timestamps (``2024-03-05T10:00:00.000Z``).
    Aware timestamps are converted to UTC first so the result matches the
    date portion of their ISO form. Unparseable or empty values give None.
    """
    if value is None or value == '':
        return None
    if isinstance(value, _dt.datetime):
        parsed = value
    elif isinstance(value, _dt.date):
        return value
    else:
        text = str(value).strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = _dt.datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(_dt.timezone.utc)
    return parsed.date()


def display_date(value: Any) -> str:
    parsed = to_calendar_date(value)
    return parsed.isoformat() if parsed else 'N/A'
