import streamlit as st

from Modules.validation import INVALID_RATING, parse_review_input

RESULT_KEY = "review_result"
CONFIRM_KEY = "delete_confirmed"


@st.dialog("Mark watched & review")
def review_dialog(target_id, title, default_rating=None, default_review="", invalid_message=INVALID_RATING):
    """
    Collects a rating and review for title.
    Save stores (target_id, ReviewInput) under RESULT_KEY and reruns the page; closing the dialog stores nothing.
    """
    with st.form(f"review_form_{target_id}"):
        raw_rating = st.text_input(
            f'Rate "{title}" (1–5). Leave blank to skip.',
            value="" if default_rating is None else str(default_rating),
        )
        raw_review = st.text_area(f'Leave a short review for "{title}" (optional):', value=default_review or "")
        saved = st.form_submit_button("💾 Save")

    if saved:
        st.session_state[RESULT_KEY] = (target_id, parse_review_input(raw_rating, raw_review, default_rating, invalid_message))
        st.rerun()


def pop_review_result(state):
    return state.pop(RESULT_KEY, None)


@st.dialog("Delete this movie?")
def confirm_delete_dialog(movie_id, title):
    st.write(f"**{title}** will be removed from your list.")
    confirm_col, cancel_col = st.columns(2)
    if confirm_col.button("🗑 Delete", type="primary"):
        st.session_state[CONFIRM_KEY] = movie_id
        st.rerun()
    if cancel_col.button("Cancel"):
        st.rerun()


def pop_confirmed_delete(state):
    return state.pop(CONFIRM_KEY, None)
