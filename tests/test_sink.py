"""Unit tests for the Google Sheets sink, against a stand-in gspread client."""
from datetime import datetime
from unittest.mock import MagicMock

import gspread
from gspread.utils import ValueInputOption
import pytest

from masters_leaderboard.errors import SinkError
from masters_leaderboard.sink import SheetSink
from masters_leaderboard.snapshot import LeaderboardSnapshot


@pytest.fixture
def snapshot():
    row = {'place': "1", 'player': "Scottie Scheffler", 'total_under': -10, 'thru': "F", 'today_under': 0,
           'round1': 69, 'round2': 67, 'round3': 71, 'round4': 71, 'total_score': 278}
    return LeaderboardSnapshot(rows=[row], last_updated=datetime(2022, 4, 10, 12, 30))


@pytest.fixture
def client():
    client = MagicMock()
    client.open_by_key.return_value.worksheet.return_value.row_count = 1000
    return client


class TestSheetSinkAppend:

    def test_overwrites_then_clears_leftover_rows(self, client, snapshot):
        """New rows go over the old ones; only the rows below them are cleared."""
        worksheet = client.open_by_key.return_value.worksheet.return_value
        SheetSink(client).append(snapshot, "doc-id", "leaderboard")
        client.open_by_key.assert_called_once_with("doc-id")
        client.open_by_key.return_value.worksheet.assert_called_once_with("leaderboard")
        worksheet.update.assert_called_once_with(snapshot.to_records(), range_name="A1",
                                                 value_input_option=ValueInputOption.user_entered)
        worksheet.batch_clear.assert_called_once_with(["A3:K"])
        worksheet.clear.assert_not_called()

    def test_timestamp_written_as_user_entered(self, client, snapshot):
        """Sheets parses the last_updated text as a date rather than storing it raw."""
        worksheet = client.open_by_key.return_value.worksheet.return_value
        SheetSink(client).append(snapshot, "doc-id", "leaderboard")
        args, kwargs = worksheet.update.call_args
        assert kwargs['value_input_option'] == "USER_ENTERED"
        assert args[0][1][-1] == "2022-04-10 12:30:00"

    def test_grows_short_worksheet(self, client, snapshot):
        worksheet = client.open_by_key.return_value.worksheet.return_value
        worksheet.row_count = 1
        SheetSink(client).append(snapshot, "doc-id", "leaderboard")
        worksheet.add_rows.assert_called_once_with(1)

    def test_creates_missing_worksheet(self, client, snapshot):
        spreadsheet = client.open_by_key.return_value
        spreadsheet.worksheet.side_effect = gspread.exceptions.WorksheetNotFound("leaderboard")
        spreadsheet.add_worksheet.return_value.row_count = 2
        SheetSink(client).append(snapshot, "doc-id", "leaderboard")
        spreadsheet.add_worksheet.assert_called_once_with(title="leaderboard", rows=2, cols=11)
        spreadsheet.add_worksheet.return_value.update.assert_called_once()
        spreadsheet.add_worksheet.return_value.batch_clear.assert_not_called()

    def test_api_failure_becomes_sink_error(self, client, snapshot):
        """Sheet failures surface as an OSError-compatible SinkError."""
        client.open_by_key.side_effect = gspread.exceptions.SpreadsheetNotFound("doc-id")
        with pytest.raises(SinkError) as exc_info:
            SheetSink(client).append(snapshot, "doc-id", "leaderboard")
        assert isinstance(exc_info.value, OSError)
        assert "leaderboard" in str(exc_info.value)

    def test_write_failure_keeps_previous_board(self, client, snapshot):
        """A failed update raises SinkError and leaves the old rows in place."""
        worksheet = client.open_by_key.return_value.worksheet.return_value
        worksheet.update.side_effect = gspread.exceptions.GSpreadException("quota exceeded")
        with pytest.raises(SinkError, match="quota exceeded"):
            SheetSink(client).append(snapshot, "doc-id", "leaderboard")
        worksheet.clear.assert_not_called()
        worksheet.batch_clear.assert_not_called()


class TestFromServiceAccount:

    def test_missing_credentials_file(self, tmp_path):
        with pytest.raises(SinkError, match="service account"):
            SheetSink.from_service_account(str(tmp_path / "missing.json"))

    def test_authorizes_client(self, monkeypatch):
        creds = object()
        monkeypatch.setattr("masters_leaderboard.sink.Credentials.from_service_account_file",
                            lambda path, scopes: creds)
        monkeypatch.setattr("masters_leaderboard.sink.gspread.authorize", lambda c: ("client", c))
        sink = SheetSink.from_service_account("creds.json")
        assert sink.client == ("client", creds)
