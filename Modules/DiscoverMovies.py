import logging

import streamlit as st

from Api.MoviePlanner_Connection import ApiError
from Modules.auth import guarded_call
from Modules.config import RATINGS_CACHE_TTL
from Modules.models import HAVE_WATCHED, PLAN_TO_WATCH

logger = logging.getLogger(__name__)

ERROR_KEY = "discover_error"


def render_stars(rounded_rating):
    r = max(1, min(5, int(rounded_rating)))
    return "★" * r + "☆" * (5 - r)


def get_global_summary(ratings, title):
    """Exact-title lookup; a summary nobody has rated yet counts as missing."""
    match = next((r for r in ratings if r.title == title), None)
    if match is None or match.rating_count == 0:
        return None
    return match


def summary_label(summary):
    plural = "" if summary.rating_count == 1 else "s"
    return f"{summary.average_rating:.1f}/5 from {summary.rating_count} rating{plural} (global)"


@st.cache_data(ttl=RATINGS_CACHE_TTL, show_spinner=False)
def _cached_ratings(base_url, _db):
    return _db.list_ratings()


def load_global_ratings(db, use_cache=True):
    """Best-effort read: any failure leaves every badge unset instead of blocking the page."""
    try:
        if use_cache:
            return _cached_ratings(db.base_url, db)
        return db.list_ratings()
    except ApiError as e:
        logger.warning("Error fetching ratings: %s", e)
        return []


def _save_entry(db, session, state, entry, payload, fallback):
    # one in-flight request per catalog entry
    if state.get("busy_id") == entry.id:
        return False

    state["busy_id"] = entry.id
    try:
        ok, _ = guarded_call(session, state, ERROR_KEY, fallback, lambda token: db.create_movie(token, payload))
    finally:
        state["busy_id"] = None
    return ok


def add_to_list(db, session, state, entry):
    return _save_entry(
        db, session, state, entry,
        {"title": entry.title, "status": PLAN_TO_WATCH},
        "Failed to add movie",
    )


def mark_watched(db, session, state, entry, review):
    """Saves a catalog entry as watched with the dialog's rating and review."""
    return _save_entry(
        db, session, state, entry,
        {"title": entry.title, "status": HAVE_WATCHED, "rating": review.rating, "review": review.review},
        "Failed to add watched movie",
    )


def display_catalog(entries, ratings, logged_in, on_add, on_review, busy_id=None):
    columns = st.columns(2)
    for i, entry in enumerate(entries):
        with columns[i % 2].container(border=True):
            poster, body = st.columns([1, 3])
            poster.image(entry.image_url, width="stretch")

            with body:
                st.markdown(f"**{entry.title}** <span style='font-size:0.8em; color:gray;'>({entry.year})</span>",
                            unsafe_allow_html=True)
                st.caption(" • ".join(entry.genres))
                st.write(entry.description)

                summary = get_global_summary(ratings, entry.title)
                if summary:
                    st.markdown(
                        f"<span style='color:#ffd700; font-family:monospace;'>{render_stars(summary.rounded_rating)}</span> "
                        f"<span style='font-size:0.8em; color:#ccc;'>{summary_label(summary)}</span>",
                        unsafe_allow_html=True,
                    )

                busy = busy_id == entry.id
                st.button(
                    "Adding..." if busy else "Add to My List",
                    key=f"add_{entry.id}",
                    disabled=not logged_in or busy,
                    on_click=on_add,
                    args=(entry,),
                )
                st.button(
                    "Saving..." if busy else "Mark Watched & Review",
                    key=f"review_{entry.id}",
                    disabled=not logged_in or busy,
                    on_click=on_review,
                    args=(entry,),
                )
