import logging

from .coerce import capture_timestamp, coerce_rows
from .config import ROW_WIDTH, TIMESTAMP_OFFSET
from .normalize import normalize_rows
from .segment import segment_rows
from .snapshot import LeaderboardSnapshot
from .tokens import tokenize_page

logger = logging.getLogger(__name__)


def build_snapshot(tokens, cut_line=None, row_width=ROW_WIDTH, now=None, offset=TIMESTAMP_OFFSET):
    slices = segment_rows(tokens, row_width=row_width)
    rows = coerce_rows(normalize_rows(slices, cut_line=cut_line))
    return LeaderboardSnapshot(rows=rows, last_updated=capture_timestamp(now, offset))


def run_cycle(fetch_page, sink, destination_id, sheet_name, cut_line=None, now=None):
    """Fetch, rebuild and write one leaderboard snapshot.

    The sink only sees a snapshot once every row has been parsed; any error
    before that leaves the sheet untouched.
    """
    html = fetch_page()
    tokens = tokenize_page(html)
    snapshot = build_snapshot(tokens, cut_line=cut_line, now=now)
    logger.info(f"Built snapshot of {len(snapshot)} rows (last_updated {snapshot.last_updated}).")
    sink.append(snapshot, destination_id, sheet_name)
    return snapshot
