import streamlit as st

from Modules.config import ACCOUNT_PAGE, AUTH_PAGE, DISCOVER_PAGE


def global_sidebar(session):
    st.sidebar.title("🎬 Movie Planner")

    if session.is_authenticated:
        # Full navigation for logged-in users
        st.sidebar.markdown(f"👤 Logged in as `{session.username}`")

        st.sidebar.page_link(DISCOVER_PAGE, label="Discover", icon="🍿")
        st.sidebar.page_link(ACCOUNT_PAGE, label="My Account", icon="📋")

        if st.sidebar.button("Log out"):
            session.logout()

    else:
        st.sidebar.page_link(AUTH_PAGE, label="Login / Register", icon="🔐")
