import logging

import streamlit as st

from masters_leaderboard.browser import LeaderboardBrowser, fetch_page_html
from masters_leaderboard.config import (CREDENTIALS_FILE, CUT_LINE, LEADERBOARD_URL, SCOPES, SELENIUM_REMOTE_URL,
                                        SHEET_ID, SHEET_NAME)
from masters_leaderboard.errors import LeaderboardError
from masters_leaderboard.export import snapshot_csv_link, snapshot_excel_link, snapshot_json_link
from masters_leaderboard.pipeline import build_snapshot
from masters_leaderboard.sink import SheetSink
from masters_leaderboard.tokens import tokenize_page

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def fetch_with_browser(url, remote_url):
    with LeaderboardBrowser.connect(remote_url=remote_url or None) as browser:
        browser.open(url)
        browser.select_traditional_view()
        return browser.page_source()


# --- Streamlit UI ---
def main():
    st.set_page_config(page_title="Masters Leaderboard Scraper", layout="wide")
    st.title("Masters Leaderboard Scraper"); st.markdown("Scrape the **traditional leaderboard** once and inspect the result.")
    st.sidebar.title("Configuration")
    url = st.sidebar.text_input("Leaderboard URL", value=LEADERBOARD_URL)
    fetch_mode = st.sidebar.radio("Fetch page with", ["Browser (Selenium)", "Plain HTTP"])
    remote_url = st.sidebar.text_input("Selenium remote URL (blank for local Chrome)", value=SELENIUM_REMOTE_URL)
    with st.sidebar.expander("Advanced Options"):
        cut_mode = st.radio("Missed-cut detection", ["From MC/WD status", "Fixed cut line"])
        cut_line = st.number_input("Cut line", min_value=1, value=CUT_LINE, step=1, disabled=cut_mode != "Fixed cut line")
        show_debug = st.checkbox("Show debug logs in console", value=False)
        logging.getLogger().setLevel(logging.DEBUG if show_debug else logging.INFO)

    if 'snapshot' not in st.session_state: st.session_state.snapshot = None
    tab1, tab2, tab3 = st.tabs(["Leaderboard", "Export", "Push to Sheet"])
    with tab1:
        if st.button("Scrape Leaderboard", type="primary"):
            if url:
                with st.spinner(f'Scraping {url}...'):
                    try:
                        html = fetch_with_browser(url, remote_url) if fetch_mode.startswith("Browser") else fetch_page_html(url)
                        tokens = tokenize_page(html)
                        snapshot = build_snapshot(tokens, cut_line=int(cut_line) if cut_mode == "Fixed cut line" else None)
                        st.session_state.snapshot = snapshot
                        if not snapshot: st.warning("No player rows found. Check the URL or that the traditional board loaded.")
                        else: st.success(f"Rebuilt {len(snapshot)} rows from {len(tokens)} page tokens.")
                    except LeaderboardError as e:
                        st.error(f"Scraping error: {e}"); logger.exception("Scraping failed:")
                        st.session_state.snapshot = None
            else: st.error("Please enter a URL.")

        snapshot = st.session_state.snapshot
        if snapshot:
            st.subheader(f"Leaderboard (last updated {snapshot.last_updated})")
            st.dataframe(snapshot.to_frame(), use_container_width=True, height=600)
            with st.expander("Raw rows (for debugging)"):
                st.json([dict(r) for r in snapshot.rows], expanded=False)
        elif not url: st.info("Enter URL and click 'Scrape Leaderboard'.")
    with tab2:
        snapshot = st.session_state.snapshot
        if snapshot:
            st.subheader("Export Options")
            exp_fmt = st.radio("Export format", ["CSV", "JSON", "Excel"])
            fname = st.text_input("Filename", value="leaderboard")
            if exp_fmt == "CSV": st.markdown(snapshot_csv_link(snapshot, f"{fname}.csv"), unsafe_allow_html=True)
            elif exp_fmt == "JSON": st.markdown(snapshot_json_link(snapshot, f"{fname}.json"), unsafe_allow_html=True)
            elif exp_fmt == "Excel": st.markdown(snapshot_excel_link(snapshot, f"{fname}.xlsx"), unsafe_allow_html=True)
        else: st.info("Scrape data first for export options.")
    with tab3:
        snapshot = st.session_state.snapshot
        sheet_id = st.text_input("Spreadsheet ID", value=SHEET_ID)
        sheet_name = st.text_input("Sheet name", value=SHEET_NAME)
        if st.button("Write to Google Sheet", disabled=not snapshot):
            try:
                SheetSink.from_service_account(CREDENTIALS_FILE, SCOPES).append(snapshot, sheet_id, sheet_name)
                st.success(f"Wrote {len(snapshot)} rows to '{sheet_name}'.")
            except LeaderboardError as e:
                st.error(f"Sheet error: {e}"); logger.exception("Sheet write failed:")


if __name__ == "__main__":
    main()
