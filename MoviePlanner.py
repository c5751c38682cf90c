import streamlit as st

from Modules.auth import init_session_state, show_login
from Modules.config import DISCOVER_PAGE
from Modules.logging_config import configure_logging
from Modules.Menu import global_sidebar

st.set_page_config(page_title="Movie Planner | Log in", page_icon="🎬")

configure_logging()

# ------------------------
# Session Initialization
# ------------------------
session, db = init_session_state()

# Already logged in: skip the form entirely
if session.is_authenticated:
    st.switch_page(DISCOVER_PAGE)

global_sidebar(session)

# ------------------------
# Auth Form
# ------------------------
st.title("🎬 Movie Planner")
st.caption("Track movies you've watched and plan to watch. Each account has its own list.")

show_login(db, session)
