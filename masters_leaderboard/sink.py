import logging

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from gspread.utils import ValueInputOption, rowcol_to_a1

from .config import CREDENTIALS_FILE, SCOPES
from .errors import SinkError

logger = logging.getLogger(__name__)

SHEET_ERRORS = (gspread.exceptions.GSpreadException, GoogleAuthError, requests.RequestException)


class SheetSink:
    """Writes leaderboard snapshots to a Google Sheet, replacing the tab each time."""

    def __init__(self, client):
        self.client = client

    @classmethod
    def from_service_account(cls, creds_file=CREDENTIALS_FILE, scopes=SCOPES):
        try:
            creds = Credentials.from_service_account_file(creds_file, scopes=scopes)
            return cls(gspread.authorize(creds))
        except (OSError, ValueError, GoogleAuthError) as e:
            raise SinkError(f"Could not authorize with service account file '{creds_file}': {e}") from e

    def _worksheet(self, spreadsheet, sheet_name, rows, cols):
        try: return spreadsheet.worksheet(sheet_name)
        except gspread.exceptions.WorksheetNotFound:
            logger.info(f"Worksheet '{sheet_name}' not found, creating it.")
            return spreadsheet.add_worksheet(title=sheet_name, rows=max(rows, 1), cols=cols)

    def append(self, snapshot, destination_id, sheet_name):
        records = snapshot.to_records()
        try:
            spreadsheet = self.client.open_by_key(destination_id)
            worksheet = self._worksheet(spreadsheet, sheet_name, len(records), len(records[0]))
            if worksheet.row_count < len(records): worksheet.add_rows(len(records) - worksheet.row_count)
            # Overwrite in place, then clear rows left over from a longer board.
            worksheet.update(records, range_name="A1", value_input_option=ValueInputOption.user_entered)
            if worksheet.row_count > len(records):
                last_col = rowcol_to_a1(1, len(records[0])).rstrip("0123456789")
                worksheet.batch_clear([f"A{len(records) + 1}:{last_col}"])
        except SHEET_ERRORS as e:
            raise SinkError(f"Failed to write {len(snapshot)} rows to sheet '{sheet_name}' of {destination_id}: {e}") from e
        logger.info(f"Wrote {len(snapshot)} rows to sheet '{sheet_name}'.")
