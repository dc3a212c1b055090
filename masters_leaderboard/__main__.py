"""Scrape the Masters leaderboard every ten minutes and write it to a Google sheet.

Run with: python -m masters_leaderboard
"""
import logging
from functools import partial

from .browser import LeaderboardBrowser, LeaderboardSession
from .config import (CREDENTIALS_FILE, CUT_LINE, DETECT_CUT_BY_STATUS, LEADERBOARD_URL, POLL_INTERVAL,
                     SCOPES, SELENIUM_REMOTE_URL, SHEET_ID, SHEET_NAME)
from .pipeline import run_cycle
from .scheduler import PollingScheduler
from .sink import SheetSink

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main():
    sink = SheetSink.from_service_account(CREDENTIALS_FILE, SCOPES)
    connect = partial(LeaderboardBrowser.connect, remote_url=SELENIUM_REMOTE_URL)
    with LeaderboardSession(LEADERBOARD_URL, connect=connect) as session:
        cycle = partial(run_cycle, session.page_source, sink, SHEET_ID, SHEET_NAME,
                        cut_line=None if DETECT_CUT_BY_STATUS else CUT_LINE)
        scheduler = PollingScheduler(cycle, interval=POLL_INTERVAL)
        try: scheduler.run()
        except KeyboardInterrupt:
            scheduler.stop(); logger.info("Interrupted, shutting down.")


if __name__ == "__main__":
    main()
