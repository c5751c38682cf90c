import streamlit as st

from Modules.Analytics_Utils import safe_bar_chart, safe_metric, safe_pie_chart
from Modules.auth import init_session_state, login_blocker
from Modules.Dialogs import confirm_delete_dialog, pop_confirmed_delete, pop_review_result, review_dialog
from Modules.GetAnalytics import get_list_stats
from Modules.logging_config import configure_logging
from Modules.Menu import global_sidebar
from Modules.models import (
    FILTER_ALL,
    FILTER_OPTIONS,
    HAVE_WATCHED,
    PLAN_TO_WATCH,
    STATUS_LABELS,
    NewMovieForm,
)
from Modules.MovieList import (
    ERROR_KEY,
    create_movie,
    delete_movie,
    display_movie,
    filter_movies,
    load_movies,
    mark_watched,
    update_movie_status,
)

st.set_page_config(page_title="My Account", page_icon="📋", layout="wide")

configure_logging()

session, db = init_session_state()

# protect the page
login_blocker(session)

global_sidebar(session)

FILTER_LABELS = {FILTER_ALL: "All", **STATUS_LABELS}


def find_movie(movie_id):
    return next((m for m in st.session_state.get("movies", []) if m.id == movie_id), None)


# Widget callbacks only record intent; requests run in the script body
def request_review(movie):
    st.session_state.review_target = movie.id


def request_plan(movie):
    st.session_state.pending_plan = movie.id


def request_delete(movie):
    st.session_state.delete_target = movie.id


def run_pending_actions(state):
    """Applies whatever the last interaction asked for. Every write ends in a full refetch."""
    plan_id = state.pop("pending_plan", None)
    if plan_id:
        update_movie_status(db, session, state, plan_id, PLAN_TO_WATCH)

    result = pop_review_result(state)
    if result:
        movie_id, review = result
        movie = find_movie(movie_id)
        if review.warning:
            st.warning(review.warning)
        if movie:
            mark_watched(db, session, state, movie, review)

    confirmed_id = pop_confirmed_delete(state)
    if confirmed_id:
        delete_movie(db, session, state, confirmed_id, confirmed=True)


def show_add_form(state):
    st.subheader("➕ Add a movie manually")

    if state.get("form_error"):
        st.warning(state.form_error)

    # bumping the version after a successful add gives every field a fresh key, clearing the form
    v = state.get("form_version", 0)
    with st.form("add_movie_form"):
        title = st.text_input("Title", placeholder="Movie title", key=f"new_title_{v}")
        poster_url = st.text_input("Poster URL (optional)", placeholder="https://example.com/poster.jpg",
                                   key=f"new_poster_{v}")
        status = st.selectbox(
            "Status",
            [PLAN_TO_WATCH, HAVE_WATCHED],
            format_func=STATUS_LABELS.get,
            key=f"new_status_{v}",
        )
        st.caption("Rating and review apply to watched movies only.")
        rating = st.selectbox(
            "Rating",
            [None, 1, 2, 3, 4, 5],
            format_func=lambda r: "Select rating" if r is None else f"{r} / 5",
            key=f"new_rating_{v}",
        )
        review = st.text_area("Review", placeholder="What did you think?", height=90, key=f"new_review_{v}")

        submitted = st.form_submit_button("Add to list")

    if submitted:
        form = NewMovieForm(title=title, status=status, rating=rating, review=review, poster_url=poster_url)
        if create_movie(db, session, state, form):
            state["form_version"] = v + 1
            state["account_notice"] = f"✅ Added {form.title.strip()}"
        st.rerun()


def show_stats(movies):
    stats = get_list_stats(movies)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        safe_metric("🎬 Movies", stats["total"])
    with col2:
        safe_metric("📌 Plan to Watch", stats["planned"])
    with col3:
        safe_metric("✅ Have Watched", stats["watched"])
    with col4:
        safe_metric("⭐ Average Rating", stats["avg_rating"])

    with st.expander("📊 Your list in charts"):
        chart_col1, chart_col2 = st.columns(2)
        with chart_col1:
            st.caption("How you rate what you've watched")
            safe_bar_chart(stats["rating_dist"], "rating", "count")
        with chart_col2:
            st.caption("Planned versus watched")
            safe_pie_chart(stats["status_dist"], "status", "count")


def show_list(state):
    movies = state.get("movies", [])

    header, refresh = st.columns([4, 1])
    header.subheader("🎞 Your movies")
    if refresh.button("🔄 Refresh"):
        load_movies(db, session, state)
        st.rerun()

    status_filter = st.radio(
        "Show",
        FILTER_OPTIONS,
        format_func=FILTER_LABELS.get,
        horizontal=True,
        key="status_filter",
    )
    query = st.text_input(
        "Search",
        placeholder="Search your movies by title, status, or review text",
        key="search_query",
    )

    visible = filter_movies(movies, status_filter, query)

    if query.strip():
        st.caption(f'Showing results for **"{query}"**')
    st.caption(f"Showing {len(visible)} of {len(movies)} movies")

    if not visible:
        st.info("No movies in this view yet. Add one on the left or from Discover.")

    for movie in visible:
        display_movie(movie, request_review, request_plan, request_delete)


def show():
    state = st.session_state

    st.title("📋 My movies")
    st.write("View and manage movies you've added from Discover or directly on this page. "
             "You can track what you want to watch and what you've already seen.")

    # one automatic read per session; after that only Refresh or a write reloads, even when it failed
    if not state.get("movies_requested"):
        state["movies_requested"] = True
        with st.spinner("Loading..."):
            load_movies(db, session, state)

    run_pending_actions(state)

    if state.get("account_notice"):
        st.success(state.pop("account_notice"))
    if state.get(ERROR_KEY):
        st.error(state[ERROR_KEY])

    show_stats(state.get("movies", []))

    form_col, list_col = st.columns([2, 3])
    with form_col:
        show_add_form(state)
    with list_col:
        show_list(state)

    target = find_movie(state.pop("review_target", None))
    if target:
        review_dialog(target.id, target.title, default_rating=target.rating, default_review=target.review or "")

    doomed = find_movie(state.pop("delete_target", None))
    if doomed:
        confirm_delete_dialog(doomed.id, doomed.title)


show()
