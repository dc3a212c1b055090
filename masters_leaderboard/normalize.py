"""Map row slices onto the fixed leaderboard columns.

Players who made the cut fill every cell. Players who missed it (or withdrew)
only have their first two rounds, and the page shifts those into the
``thru``/``today`` cells with their 36-hole total under R3. Those rows are
remapped so the rounds land in round1/round2 and the total in total_score.
"""
import logging

from .config import COLUMNS
from .tokens import TokenKind, classify_token

logger = logging.getLogger(__name__)

FULL_LAYOUT = {col: offset for offset, col in enumerate(COLUMNS)}
MISSED_CUT_LAYOUT = {'place': 0, 'player': 1, 'round1': 3, 'round2': 4, 'total_score': 7}
MISSED_CUT_DEFAULTS = {'total_under': '0'}


def initialize_row():
    return {col: None for col in COLUMNS}


def is_missed_cut(row_slice):
    return bool(row_slice) and classify_token(row_slice[0]) is TokenKind.STATUS_CODE


def normalize_row(row_slice, missed_cut=False):
    row = initialize_row()
    layout = MISSED_CUT_LAYOUT if missed_cut else FULL_LAYOUT
    for col, offset in layout.items(): row[col] = row_slice[offset]
    if missed_cut: row.update(MISSED_CUT_DEFAULTS)
    return row


def normalize_rows(slices, cut_line=None):
    """Normalize every slice, in leaderboard order.

    With ``cut_line`` unset the shape of each row is read from its place
    cell (MC/WD). With a number, rows past that rank are treated as missed-cut
    whatever they contain. A board shorter than the cut line (before the cut
    is made) just yields full rows.
    """
    if cut_line is None:
        flags = [is_missed_cut(s) for s in slices]
    else:
        if len(slices) < cut_line:
            logger.warning(f"Only {len(slices)} rows found, fewer than the cut line of {cut_line}. "
                           "Treating every row as a full row.")
        flags = [rank > cut_line for rank in range(1, len(slices) + 1)]
    rows = [normalize_row(s, missed_cut=mc) for s, mc in zip(slices, flags)]
    logger.info(f"Normalized {len(rows)} rows ({sum(flags)} missed cut / withdrawn).")
    return rows
