import base64
import io
import json
import logging

from .config import TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

EXCEL_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _data_link(payload, mime, filename, label):
    b64 = base64.b64encode(payload).decode()
    return f'<a href="data:{mime};base64,{b64}" download="{filename}">{label}</a>'


def snapshot_csv_link(snapshot, filename="leaderboard.csv"):
    if not snapshot: return ""
    csv_string = snapshot.to_frame().to_csv(index=False, date_format=TIMESTAMP_FORMAT)
    return _data_link(csv_string.encode(), "file/csv", filename, "Download CSV file")


def snapshot_json_link(snapshot, filename="leaderboard.json"):
    if not snapshot: return ""
    data = {'last_updated': snapshot.last_updated.strftime(TIMESTAMP_FORMAT), 'rows': [dict(r) for r in snapshot.rows]}
    return _data_link(json.dumps(data, indent=2).encode(), "file/json", filename, "Download JSON file")


def snapshot_excel_link(snapshot, filename="leaderboard.xlsx"):
    if not snapshot: return ""
    xl_buf = io.BytesIO()
    snapshot.to_frame().to_excel(xl_buf, index=False, engine='openpyxl')
    return _data_link(xl_buf.getvalue(), EXCEL_MIME, filename, "Download Excel")
