from .errors import (BrowserError, FetchError, FormatError, LeaderboardError, ParseError, SinkError,
                     StructuralError)
from .pipeline import build_snapshot, run_cycle
from .snapshot import LeaderboardSnapshot
from .tokens import TokenKind, classify_token, tokenize_page

__version__ = "0.1.0"
