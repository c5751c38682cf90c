import streamlit as st

from Modules.auth import init_session_state, login_blocker
from Modules.Catalog import DISCOVER_MOVIES, get_entry
from Modules.Dialogs import pop_review_result, review_dialog
from Modules.DiscoverMovies import ERROR_KEY, add_to_list, display_catalog, load_global_ratings, mark_watched
from Modules.logging_config import configure_logging
from Modules.Menu import global_sidebar
from Modules.validation import INVALID_RATING

st.set_page_config(page_title="Discover", page_icon="🍿", layout="wide")

configure_logging()

session, db = init_session_state()

# protect the page
login_blocker(session)

global_sidebar(session)


# Widget callbacks only record intent; requests run in the script body
def request_add(entry):
    st.session_state.pending_add = entry.id


def request_review(entry):
    st.session_state.review_target = entry.id


def show():
    state = st.session_state

    st.title("🍿 Discover movies")
    st.write("Browse a curated list of movies and add them to your personal watchlist "
             "or mark them as watched with a review.")

    if state.get("discover_notice"):
        st.success(state.pop("discover_notice"))
    if state.get("discover_warning"):
        st.warning(state.pop("discover_warning"))
    if state.get(ERROR_KEY):
        st.error(state[ERROR_KEY])

    pending_add = get_entry(state.pop("pending_add", None))
    review_result = pop_review_result(state)
    pending_review = get_entry(review_result[0]) if review_result else None
    busy = pending_add or pending_review

    ratings = load_global_ratings(db)
    display_catalog(
        DISCOVER_MOVIES, ratings, session.is_authenticated, request_add, request_review,
        busy_id=busy.id if busy else None,
    )

    # The triggering card is already drawn busy; run the request, then redraw
    if pending_add:
        if add_to_list(db, session, state, pending_add):
            state["discover_notice"] = f"✅ Added {pending_add.title} to your list"
        st.rerun()

    if pending_review:
        review = review_result[1]
        state["discover_warning"] = review.warning
        if mark_watched(db, session, state, pending_review, review):
            state["discover_notice"] = f"✅ Marked {pending_review.title} as watched"
        st.rerun()

    target = get_entry(state.pop("review_target", None))
    if target:
        review_dialog(target.id, target.title, invalid_message=f"{INVALID_RATING} Saving with no rating.")


show()
