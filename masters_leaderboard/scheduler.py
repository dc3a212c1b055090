import logging
import threading
import time

from .config import POLL_INTERVAL
from .errors import LeaderboardError

logger = logging.getLogger(__name__)


class PollingScheduler:
    """Runs a cycle callable on a fixed cadence until stopped.

    The wait is measured from the start of each cycle, so a cycle that
    overruns the interval is followed immediately by the next one. Cycles
    never overlap.
    """

    def __init__(self, cycle, interval=POLL_INTERVAL, stop_event=None, clock=time.monotonic):
        self.cycle = cycle
        self.interval = interval
        self.stop_event = stop_event or threading.Event()
        self.clock = clock

    def stop(self):
        self.stop_event.set()

    @property
    def stopped(self):
        return self.stop_event.is_set()

    def run(self, max_cycles=None):
        completed = 0
        while not self.stopped:
            started = self.clock()
            logger.info(f"Initiating leaderboard refresh at {time.strftime('%Y-%m-%d %H:%M:%S')}")
            try: self.cycle()
            except LeaderboardError: logger.exception("Leaderboard cycle failed:")
            completed += 1
            if max_cycles is not None and completed >= max_cycles: break
            wait = max(0.0, self.interval - (self.clock() - started))
            logger.info(f"Waiting {wait:.0f}s for next loop...")
            self.stop_event.wait(wait)
        return completed
