import html

import streamlit as st

from Modules.auth import guarded_call
from Modules.models import FILTER_ALL, HAVE_WATCHED, STATUS_LABELS
from Modules.theme_config import STATUS_COLORS
from Modules.validation import ValidationError, build_create_payload

ERROR_KEY = "movies_error"


def filter_movies(movies, status_filter=FILTER_ALL, query=""):
    """Status filter first, then a case-insensitive search over title, status and review."""
    if status_filter != FILTER_ALL:
        movies = [m for m in movies if m.status == status_filter]

    q = (query or "").strip().lower()
    if not q:
        return list(movies)

    return [
        m for m in movies
        if q in m.title.lower() or q in m.status.lower() or q in (m.review or "").lower()
    ]


def load_movies(db, session, state):
    """Replaces the cached list with a full read; the cache is never patched locally."""
    ok, movies = guarded_call(session, state, ERROR_KEY, "Failed to load movies", db.list_movies)
    if ok:
        state["movies"] = movies
    return ok


def _write_then_reload(db, session, state, fallback, call):
    ok, _ = guarded_call(session, state, ERROR_KEY, fallback, call)
    if not ok:
        return False
    load_movies(db, session, state)
    return True


def create_movie(db, session, state, form):
    """Validates the add form locally; nothing is sent when it fails."""
    if not session.is_authenticated:
        state[ERROR_KEY] = "Please log in first."
        return False

    try:
        payload = build_create_payload(form)
    except ValidationError as e:
        state["form_error"] = str(e)
        return False

    state["form_error"] = None
    return _write_then_reload(
        db, session, state, "Failed to add movie",
        lambda token: db.create_movie(token, payload),
    )


def update_movie_status(db, session, state, movie_id, new_status):
    return _write_then_reload(
        db, session, state, "Failed to update movie",
        lambda token: db.update_movie(token, movie_id, {"status": new_status}),
    )


def mark_watched(db, session, state, movie, review):
    # imageUrl stays out of the body so the server keeps the stored poster
    changes = {"status": HAVE_WATCHED, "rating": review.rating, "review": review.review}
    return _write_then_reload(
        db, session, state, "Failed to mark movie as watched",
        lambda token: db.update_movie(token, movie.id, changes),
    )


def delete_movie(db, session, state, movie_id, confirmed):
    if not confirmed:
        return False
    return _write_then_reload(
        db, session, state, "Failed to delete movie",
        lambda token: db.delete_movie(token, movie_id),
    )


def personal_stars(rating):
    if not rating or rating < 1:
        return ""
    r = min(5, rating)
    return "★" * r + "☆" * (5 - r)


def status_pill(status):
    # server-supplied status, escaped before it goes into raw HTML
    color = STATUS_COLORS.get(status, "#888888")
    label = html.escape(STATUS_LABELS.get(status, str(status)))
    return (f"<span style='background:{color}33; color:{color}; padding:2px 8px; "
            f"border-radius:8px; font-size:0.8em;'>{label}</span>")


def display_movie(movie, on_review, on_plan, on_delete):
    with st.container(border=True):
        poster, body, actions = st.columns([1, 4, 2])

        if movie.image_url:
            poster.image(movie.image_url, width="stretch")

        with body:
            st.markdown(f"**{movie.title}**")
            if movie.is_watched:
                rating_text = f"{movie.rating}/5" if movie.rating else "Not rated"
                st.markdown(
                    f"<span style='color:#ffd700;'>{personal_stars(movie.rating)}</span> "
                    f"<span style='font-size:0.8em; color:gray;'>{rating_text}</span>",
                    unsafe_allow_html=True,
                )
                st.caption(movie.review or "No written review yet.")
            else:
                st.caption("Planned watch. No review yet.")

            st.markdown(status_pill(movie.status), unsafe_allow_html=True)

        actions.button("Mark watched and review", key=f"review_{movie.id}", on_click=on_review, args=(movie,))
        actions.button("Mark plan to watch", key=f"plan_{movie.id}", on_click=on_plan, args=(movie,))
        actions.button("Delete", key=f"delete_{movie.id}", on_click=on_delete, args=(movie,))
