import logging
from datetime import datetime, timezone

from .config import EVEN_SENTINEL, INTEGER_COLUMNS, MISSING_MARKERS, TIMESTAMP_OFFSET
from .errors import ParseError

logger = logging.getLogger(__name__)

EVEN_FIELDS = ("total_under", "today_under")
INTEGER_FIELDS = tuple(INTEGER_COLUMNS)


def coerce_value(value, field, row_index):
    """Parse one score cell. Blank and dash cells (rounds not played yet) become None."""
    if value is None: return None
    text = str(value).strip()
    if text in MISSING_MARKERS: return None
    if field in EVEN_FIELDS and text == EVEN_SENTINEL: text = "0"
    try: return int(text)
    except ValueError: raise ParseError(field, row_index, value) from None


def coerce_row(row, row_index):
    typed = dict(row)
    for field in INTEGER_FIELDS: typed[field] = coerce_value(row.get(field), field, row_index)
    return typed


def coerce_rows(rows):
    return [coerce_row(row, idx) for idx, row in enumerate(rows, start=1)]


def capture_timestamp(now=None, offset=TIMESTAMP_OFFSET):
    """Shift a UTC instant by the fixed offset. Naive datetimes are read as UTC."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None: now = now.astimezone(timezone.utc).replace(tzinfo=None)
    return (now + offset).replace(microsecond=0)
