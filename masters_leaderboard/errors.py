class LeaderboardError(Exception):
    """Base class for every failure a scrape cycle can raise."""


class ParseError(LeaderboardError, ValueError):
    def __init__(self, field, row_index, value):
        self.field = field
        self.row_index = row_index
        self.value = value
        super().__init__(f"Row {row_index}: cannot parse {field}={value!r} as an integer")


FormatError = ParseError


class StructuralError(LeaderboardError):
    pass


class SinkError(LeaderboardError, OSError):
    pass


class BrowserError(LeaderboardError):
    pass


class FetchError(LeaderboardError):
    pass
