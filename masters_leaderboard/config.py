from datetime import timedelta

# --- Source page ---
LEADERBOARD_URL = "https://www.masters.com/en_US/scores/index.html"
SELENIUM_REMOTE_URL = "http://localhost:4445/wd/hub"
SETTLE_DELAY = 6  # seconds to wait after a navigate/refresh

# --- Leaderboard layout ---
ROW_WIDTH = 10
CUT_LINE = 52  # players making the cut in the reference field
DETECT_CUT_BY_STATUS = True  # False falls back to the fixed CUT_LINE partition
STATUS_CODES = ("MC", "WD")
EVEN_SENTINEL = "E"
MISSING_MARKERS = ("", "-", "--")

COLUMNS = ["place", "player", "total_under", "thru", "today_under",
           "round1", "round2", "round3", "round4", "total_score"]
TEXT_COLUMNS = ["place", "player", "thru"]
INTEGER_COLUMNS = [c for c in COLUMNS if c not in TEXT_COLUMNS]
SNAPSHOT_COLUMNS = COLUMNS + ["last_updated"]

# --- Polling ---
POLL_INTERVAL = 600
# Google Sheets shows datetimes in UTC, so shift to mountain time before writing.
TIMESTAMP_OFFSET = timedelta(hours=-6)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Destination sheet ---
SHEET_ID = "1-Mq_xMxERqTPUnSerpig5NU9oDVj4a09KFH1WSSedBw"
SHEET_NAME = "leaderboard"
CREDENTIALS_FILE = ".secrets/service_account.json"
SCOPES = ["https://www.googleapis.com/auth/spreadsheets", "https://www.googleapis.com/auth/drive"]
