"""Page-source collaborators: a Selenium session and a plain HTTP fetch."""
import logging
import time

import requests
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.common.by import By
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from webdriver_manager.chrome import ChromeDriverManager

from .config import SETTLE_DELAY
from .errors import BrowserError, FetchError

logger = logging.getLogger(__name__)

HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36',
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.9',
    'Connection': 'keep-alive',
}

# The board opens in "Over/Under" mode; these find the mode dropdown and its options.
BOARD_MENU_XPATH = ('//*[contains(concat(" ", @class, " "), " select-menu-tabs2dropdown ")]'
                    '//*[contains(concat(" ", @class, " "), " navigation_down_arrow ")]')
BOARD_OPTION_XPATH = ('//*[contains(concat(" ", @class, " "), " option ") '
                      'and ((count(preceding-sibling::*) + 1) = 2) and parent::*]')


def fetch_page_html(url, timeout=15, max_retries=3, retry_delay=1):
    retry_count = 0
    while retry_count < max_retries:
        try:
            if not url.startswith(('http://', 'https://')): url = 'https://' + url
            response = requests.get(url, headers=HEADERS, timeout=timeout, allow_redirects=True)
            response.raise_for_status()
            try: return response.content.decode(response.apparent_encoding or 'utf-8')
            except (UnicodeDecodeError, LookupError): return response.content.decode('utf-8', errors='replace')
        except requests.RequestException as e:
            retry_count += 1
            logger.warning(f"Attempt {retry_count} failed: Error fetching {url}: {e}")
            if retry_count >= max_retries:
                raise FetchError(f"Failed to fetch {url} after {max_retries} attempts: {e}") from e
            time.sleep(retry_delay)


class LeaderboardBrowser:
    def __init__(self, driver, sleep=time.sleep):
        self.driver = driver
        self.sleep = sleep

    @classmethod
    def connect(cls, remote_url=None, headless=True, timeout=30):
        """Start a WebDriver session: a remote Firefox if ``remote_url`` is given, else local Chrome."""
        try:
            if remote_url:
                options = FirefoxOptions()
                if headless: options.add_argument('-headless')
                driver = webdriver.Remote(command_executor=remote_url, options=options)
            else:
                options = Options()
                if headless: options.add_argument('--headless')
                options.add_argument('--no-sandbox')
                options.add_argument('--disable-dev-shm-usage')
                driver = webdriver.Chrome(service=Service(ChromeDriverManager().install()), options=options)
            driver.set_page_load_timeout(timeout)
        except WebDriverException as e:
            raise BrowserError(f"Could not start browser session ({remote_url or 'local chrome'}): {e}") from e
        logger.info(f"Finished connecting to browser ({remote_url or 'local chrome'}).")
        return cls(driver)

    def open(self, url, settle_delay=SETTLE_DELAY):
        try: self.driver.get(url)
        except WebDriverException as e: raise BrowserError(f"Error navigating to {url}: {e}") from e
        self.sleep(settle_delay)
        logger.info(f"Finished navigating to {url}.")

    def _click_by_text(self, xpath, text):
        try: elements = self.driver.find_elements(By.XPATH, xpath)
        except WebDriverException as e: raise BrowserError(f"Error looking up '{text}' element: {e}") from e
        for element in elements:
            if element.text.strip() == text:
                element.click()
                return element
        raise BrowserError(f"No element with text '{text}' among {len(elements)} candidates.")

    def select_traditional_view(self):
        """Switch the board from "Over/Under" to "Traditional". The choice sticks across refreshes."""
        self._click_by_text(BOARD_MENU_XPATH, "Over/Under")
        self._click_by_text(BOARD_OPTION_XPATH, "Traditional")
        logger.info("Selected the traditional leaderboard.")

    def page_source(self, settle_delay=SETTLE_DELAY):
        try:
            self.driver.refresh()
            self.sleep(settle_delay)
            html = self.driver.page_source
        except WebDriverException as e:
            raise BrowserError(f"Error refreshing leaderboard page: {e}") from e
        logger.info("Page refresh complete.")
        return html

    def close(self):
        try: self.driver.quit()
        except WebDriverException as e: logger.warning(f"Error closing browser: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class LeaderboardSession:
    """Keeps a browser parked on the traditional board across polling cycles.

    A failed session is closed and a new one is started on the next call, so a
    dead WebDriver costs one cycle instead of every cycle after it.
    """

    def __init__(self, url, connect=LeaderboardBrowser.connect):
        self.url = url
        self.connect = connect
        self.browser = None

    def _start(self):
        browser = self.connect()
        try:
            browser.open(self.url)
            browser.select_traditional_view()
        except BrowserError:
            browser.close(); raise
        self.browser = browser

    def page_source(self):
        if self.browser is None: self._start()
        try: return self.browser.page_source()
        except BrowserError:
            logger.warning("Browser session failed, reconnecting on the next cycle.")
            self.close(); raise

    def close(self):
        if self.browser is not None:
            self.browser.close(); self.browser = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
