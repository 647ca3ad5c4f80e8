from typing import List, Dict, Any


def _as_text(value: Any) -> str:
    # Missing values read as "null", the same text the backend's JSON uses
    if value is None:
        return 'null'
    return str(value)


def record_matches(record: Dict[str, Any], query: str) -> bool:
    needle = (query or '').lower()
    if not needle:
        return True
    return any(needle in _as_text(v).lower() for v in record.values())


def filter_registrations(records: List[Dict[str, Any]], query: str) -> List[Dict[str, Any]]:
    """Case-insensitive substring search over every field of each record.

    No field-specific matching: the opaque id and the year digits are searched
    like any other value. An empty query returns all records.
    """
    return [r for r in records if record_matches(r, query)]
