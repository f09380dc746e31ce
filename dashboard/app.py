import sys
import os
import time
import logging
import traceback
import streamlit as st

# Add parent directory to path to allow imports
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from styles import setup_page, COLORS
from config import PAGE_TITLE, UIConfig
from views import overview
from pulse.session import DashboardSession

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("Dashboard")

# ==============================================================================
# 1. SETUP & STATE
# ==============================================================================
setup_page(PAGE_TITLE)

if 'session' not in st.session_state:
    # One session per browser tab. Streamlit drops session_state when the tab goes
    # away, and the session stops its feed thread once it is garbage collected
    st.session_state.session = DashboardSession()
    st.session_state.session.load()
if 'is_paused' not in st.session_state:
    st.session_state.is_paused = False

session = st.session_state.session

# ==============================================================================
# 2. SIDEBAR (CONTROLS)
# ==============================================================================
with st.sidebar:
    st.markdown(f"<h1 style='text-align: center; color: {COLORS['highlight']}; margin-bottom: 0;'>Pulse</h1>", unsafe_allow_html=True)
    st.caption("Live sales monitor")
    st.markdown("---")

    refresh_rate = st.select_slider(
        "Refresh Rate (s)", options=UIConfig.REFRESH_OPTIONS, value=UIConfig.DEFAULT_REFRESH_RATE
    )

    c1, c2 = st.columns(2)
    with c1:
        if st.button("⏸ PAUSE" if not st.session_state.is_paused else "▶ RESUME"):
            st.session_state.is_paused = not st.session_state.is_paused
            st.rerun()

    with c2:
        if st.button("🔄 RELOAD"):
            session.load()
            st.rerun()

    st.markdown("---")
    if session.api_online:
        st.caption("🟢 Backend: Online")
    else:
        st.caption("🔴 Backend: Offline (demo data)")

# ==============================================================================
# 3. MAIN CONTROLLER
# ==============================================================================
def main():
    try:
        st.title(PAGE_TITLE)

        query = st.text_input("Search", key="search", placeholder="Filter by product or ID")
        session.set_query(query)

        overview.render_page(session.view())

        # Auto-refresh picks up synthetic transactions appended by the feed
        if not st.session_state.is_paused:
            time.sleep(refresh_rate)
            st.rerun()

    except Exception:
        logger.error(f"Dashboard render error: {traceback.format_exc()}")
        st.error("🚨 An unexpected error occurred in the dashboard controller.")
        with st.expander("Technical Details"):
            st.code(traceback.format_exc())

if __name__ == "__main__":
    main()
