import logging

from .config import ROW_WIDTH
from .errors import StructuralError
from .tokens import is_name_marker

logger = logging.getLogger(__name__)


def find_name_indices(tokens):
    return [idx for idx, token in enumerate(tokens) if is_name_marker(token)]


def row_bounds(tokens, row_width=ROW_WIDTH):
    """Return (start, stop) pairs, stop exclusive, one per player name.

    The place cell sits right before the name, so a row starts one token
    earlier and spans ``row_width`` tokens. Rows closer together than that
    overlap; they are reported but left as they are.
    """
    bounds = []
    for row_num, name_idx in enumerate(find_name_indices(tokens), start=1):
        start = name_idx - 1; stop = start + row_width
        if start < 0:
            raise StructuralError(f"Row {row_num}: player name at token 0 has no place token before it")
        if stop > len(tokens):
            raise StructuralError(
                f"Row {row_num}: slice [{start}:{stop}] runs past the end of {len(tokens)} tokens "
                f"(player {tokens[name_idx]!r})")
        if bounds and start < bounds[-1][1]:
            logger.warning(f"Row {row_num} ({tokens[name_idx]!r}) overlaps the previous row: "
                           f"starts at {start}, previous row ends at {bounds[-1][1]}.")
        bounds.append((start, stop))
    return bounds


def segment_rows(tokens, row_width=ROW_WIDTH):
    rows = [list(tokens[start:stop]) for start, stop in row_bounds(tokens, row_width)]
    logger.info(f"Segmented {len(tokens)} tokens into {len(rows)} rows.")
    return rows
