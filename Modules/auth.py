import logging

import streamlit as st

from Api.MoviePlanner_Connection import ApiError, Connect, UnauthorizedError
from Modules.config import AUTH_PAGE, DISCOVER_PAGE
from Modules.validation import ValidationError, require_credentials

logger = logging.getLogger(__name__)

TOKEN_SLOT = "mp_sessionToken"
USERNAME_SLOT = "mp_username"

LOGIN = "login"
REGISTER = "register"

# Per-user screen state dropped on logout, queued actions included so none fire for the next user
USER_STATE_KEYS = [
    "movies", "movies_requested", "movies_error", "form_error", "discover_error", "busy_id",
    "pending_add", "pending_plan", "review_target", "review_result", "delete_target", "delete_confirmed",
    "discover_notice", "discover_warning", "account_notice",
]


# ---------- Session slots ----------
class SessionStateStore:
    """
    Keeps the two session slots in one browser session's state.
    Streamlit gives every browser its own st.session_state, so a login never leaks to another visitor.
    """

    def __init__(self, state=None):
        self.state = {} if state is None else state

    def load(self):
        return {slot: self.state[slot] for slot in (TOKEN_SLOT, USERNAME_SLOT) if slot in self.state}

    def save(self, slots):
        for slot in (TOKEN_SLOT, USERNAME_SLOT):
            self.state[slot] = slots.get(slot)

    def clear(self):
        for slot in (TOKEN_SLOT, USERNAME_SLOT):
            self.state.pop(slot, None)


# ---------- Session context ----------
class SessionContext:
    """
    The one session shared by every screen.
    Reads go straight to the store; logout() is the only teardown and notifies all subscribers.
    """

    def __init__(self, store):
        self.store = store
        self._listeners = {}

    @property
    def token(self):
        return self.store.load().get(TOKEN_SLOT) or None

    @property
    def username(self):
        return self.store.load().get(USERNAME_SLOT) or None

    @property
    def is_authenticated(self):
        slots = self.store.load()
        return bool(slots.get(TOKEN_SLOT)) and bool(slots.get(USERNAME_SLOT))

    def login(self, token, username):
        self.store.save({TOKEN_SLOT: token, USERNAME_SLOT: username})
        logger.info("Session started for %s", username)

    def subscribe(self, key, callback):
        """Registers callback under key, replacing any earlier one so reruns don't stack listeners."""
        self._listeners[key] = callback

    def logout(self):
        logger.info("Session ended for %s", self.username)
        self.store.clear()
        for callback in list(self._listeners.values()):
            callback()


def forget_user_state(state):
    for key in USER_STATE_KEYS:
        state.pop(key, None)


def init_session_state():
    if "session" not in st.session_state:
        st.session_state.session = SessionContext(SessionStateStore(st.session_state))
    if "api" not in st.session_state:
        st.session_state.api = Connect()
    if "auth_mode" not in st.session_state:
        st.session_state.auth_mode = LOGIN

    session = st.session_state.session
    session.subscribe("forget", lambda: forget_user_state(st.session_state))
    session.subscribe("redirect", lambda: st.switch_page(AUTH_PAGE))
    return session, st.session_state.api


def login_blocker(session):
    """Sends the visitor to the Auth screen before any protected content renders."""
    if not session.is_authenticated:
        st.switch_page(AUTH_PAGE)
        st.stop()


def guarded_call(session, state, error_key, fallback, call):
    """
    Runs call(token) and returns (ok, result).
    A 401 logs the session out; any other failure lands in state[error_key].
    """
    token = session.token
    if not session.is_authenticated:
        state[error_key] = "Please log in first."
        return False, None

    state[error_key] = None
    try:
        return True, call(token)
    except UnauthorizedError:
        logger.info("Server rejected the session token, logging out")
        session.logout()
        return False, None
    except ApiError as e:
        logger.exception("Request failed: %s", e)
        state[error_key] = e.message or fallback
        return False, None


# ---------- Auth flow ----------
def toggle_auth_mode(state):
    state["auth_mode"] = REGISTER if state.get("auth_mode", LOGIN) == LOGIN else LOGIN
    state["auth_error"] = None
    state["auth_info"] = None


def submit_credentials(db, session, state, username, password):
    """Handles one Auth form submit. Returns True only when a session was started."""
    state["auth_error"] = None
    state["auth_info"] = None
    mode = state.get("auth_mode", LOGIN)

    try:
        username, password = require_credentials(username, password)
    except ValidationError as e:
        state["auth_error"] = str(e)
        return False

    try:
        if mode == REGISTER:
            db.register(username, password)
            logger.info("Registered account %s", username)
            state["auth_mode"] = LOGIN
            state["auth_info"] = "Account created. Please log in."
            return False

        token = db.login(username, password)
    except ApiError as e:
        logger.warning("%s failed for %s: %s", mode.capitalize(), username, e)
        state["auth_error"] = e.message or "Auth error"
        return False

    session.login(token, username)
    return True


def show_login(db, session):
    state = st.session_state
    is_login = state.auth_mode == LOGIN

    if state.get("auth_error"):
        st.error(state.auth_error)
    if state.get("auth_info"):
        st.success(state.auth_info)

    with st.form("auth_form"):
        st.subheader("🔐 Log in" if is_login else "🟣 Create an account")

        username = st.text_input("👤 Username", placeholder="myusername")
        password = st.text_input("🔑 Password", type="password")

        submitted = st.form_submit_button("🚪 Log in" if is_login else "🟣 Register")

    if submitted:
        with st.spinner("Logging in..." if is_login else "Registering..."):
            started = submit_credentials(db, session, state, username, password)
        if started:
            st.switch_page(DISCOVER_PAGE)
        st.rerun()

    st.button(
        "Need an account? Create one" if is_login else "Already have an account? Log in",
        on_click=toggle_auth_mode,
        args=(state,),
    )
