"""
Filtering, sorting and paging of already-fetched records for list views.

All functions are pure: the same records and arguments give the same result
in the same order.
"""
import json
import math
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional, Union

DateBound = Union[date, datetime, str, None]


def _as_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    # Stored timestamps are naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _start_bound(value: DateBound) -> Optional[datetime]:
    return _as_datetime(value)


def _end_bound(value: DateBound) -> Optional[datetime]:
    """A bare date as the end bound includes that whole day."""
    if isinstance(value, str) and len(value) == 10:
        try:
            value = date.fromisoformat(value)
        except ValueError:
            return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.max)
    return _as_datetime(value)


def matches_search(record: Dict[str, Any], term: str) -> bool:
    """Case-insensitive substring match against the whole serialized record."""
    return term.lower() in json.dumps(record, default=str, ensure_ascii=False).lower()


def filter_records(
    records: List[Dict[str, Any]],
    search: Optional[str] = None,
    status: Optional[str] = None,
    start: DateBound = None,
    end: DateBound = None,
    status_field: str = "status",
    date_field: str = "createdAt",
) -> List[Dict[str, Any]]:
    """
    Applies, in order: full-text search, status equality (skipped for None or
    "all"), and an inclusive date range on `date_field`. Either bound may be
    omitted. Records without a parseable date drop out once a bound is set.
    """
    result = list(records)
    if search:
        result = [record for record in result if matches_search(record, search)]
    if status and status != "all":
        result = [record for record in result if record.get(status_field) == status]

    lower, upper = _start_bound(start), _end_bound(end)
    if lower or upper:
        in_range = []
        for record in result:
            stamp = _as_datetime(record.get(date_field))
            if stamp is None:
                continue
            if lower and stamp < lower:
                continue
            if upper and stamp > upper:
                continue
            in_range.append(record)
        result = in_range
    return result


def sort_records(records: List[Dict[str, Any]], sort_by: Optional[str] = None, descending: bool = False) -> List[Dict[str, Any]]:
    """Stable sort on one key; records missing the key always go last."""
    if not sort_by:
        return list(records)
    present = [record for record in records if record.get(sort_by) is not None]
    missing = [record for record in records if record.get(sort_by) is None]

    def key(record):
        value = record[sort_by]
        if isinstance(value, str):
            stamp = _as_datetime(value) if len(value) >= 10 and value[4:5] == "-" else None
            return (1, stamp) if stamp else (2, value.lower())
        if isinstance(value, datetime):
            return (1, value)
        return (0, value)

    try:
        present.sort(key=key, reverse=descending)
    except TypeError:
        present.sort(key=lambda record: str(record[sort_by]), reverse=descending)
    return present + missing


def page_count(total: int, page_size: int) -> int:
    return max(1, math.ceil(total / page_size))


def paginate(records: List[Dict[str, Any]], page: int, page_size: int) -> Dict[str, Any]:
    """
    Slices one page out of `records`. The page number is clamped into
    [1, pageCount], so an empty list still has exactly one (empty) page.
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    count = page_count(len(records), page_size)
    page = min(max(1, page), count)
    offset = (page - 1) * page_size
    return {
        "items": records[offset:offset + page_size],
        "page": page,
        "pageCount": count,
        "pageSize": page_size,
        "total": len(records),
    }
