"""
Pytest configuration and shared fixtures.
"""
from datetime import datetime

import pytest

from .leaderboard_data import FULL_ROWS, MISSED_CUT_ROW, TRAILING, flatten


@pytest.fixture
def full_rows():
    return [list(r) for r in FULL_ROWS]


@pytest.fixture
def missed_cut_row():
    return list(MISSED_CUT_ROW)


@pytest.fixture
def leaderboard_tokens():
    """62 tokens: five full rows, one missed-cut row and two trailing cells."""
    return flatten(FULL_ROWS + [MISSED_CUT_ROW]) + TRAILING


@pytest.fixture
def leaderboard_html(leaderboard_tokens):
    cells = "".join(f'<div class="data">\n  {t}  </div><span class="label">x</span>' for t in leaderboard_tokens)
    return f'<html><body><div class="leaderboard">{cells}</div></body></html>'


@pytest.fixture
def fixed_now():
    return datetime(2022, 4, 10, 18, 30, 15, 123456)
