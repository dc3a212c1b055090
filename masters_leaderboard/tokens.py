"""Turn leaderboard markup into a flat list of text tokens and tag each token.

The scores page does not render a real table. Every cell is an element with
the ``data`` class, so the page reads as one long run of strings: place,
player, total, thru, today, R1-R4, total strokes, then the next player.
"""
import logging
import re
from enum import Enum

from bs4 import BeautifulSoup

from .config import EVEN_SENTINEL, STATUS_CODES

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r'^[A-Za-z]{2}')
STATUS_PATTERN = re.compile(r'^(?:' + '|'.join(STATUS_CODES) + r')')
SCORE_PATTERN = re.compile(r'^[+-]?\d+$')


class TokenKind(Enum):
    NAME_MARKER = "name"
    STATUS_CODE = "status"
    SCORE = "score"
    OTHER = "other"


def classify_token(token):
    """Tag a single token.

    A player name is anything starting with two letters. Every other field on
    the board is at most one letter followed by digits ("T3"), a lone "F"/"E"
    or a number, except the two status codes MC and WD, which are checked
    first. A one-letter player name or a new multi-letter status would be
    misread; neither has shown up on the page so far.
    """
    if token is None: return TokenKind.OTHER
    token = token.strip()
    if STATUS_PATTERN.match(token): return TokenKind.STATUS_CODE
    if NAME_PATTERN.match(token): return TokenKind.NAME_MARKER
    if token == EVEN_SENTINEL or SCORE_PATTERN.match(token): return TokenKind.SCORE
    return TokenKind.OTHER


def is_name_marker(token):
    return classify_token(token) is TokenKind.NAME_MARKER


def clean_text(text):
    return re.sub(r'\s+', ' ', text or '').strip()


def tokenize_page(html, selector='.data'):
    if not html: return []
    soup = BeautifulSoup(html, 'html.parser')
    tokens = [clean_text(el.get_text(separator=' ')) for el in soup.select(selector)]
    logger.debug(f"Extracted {len(tokens)} '{selector}' tokens from page source.")
    return tokens
