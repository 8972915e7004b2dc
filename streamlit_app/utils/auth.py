"""Authentication utilities for Streamlit"""
import streamlit as st
import json
import base64
from datetime import datetime, timezone
from pathlib import Path

# Session persistence file (so a browser refresh does not log out)
SESSION_FILE = Path.home() / ".aus_admin_session"
ENABLE_SESSION_PERSISTENCE = True

SESSION_KEYS = ("access_token", "admin_email", "superadmin")


def save_session():
    """Save session to file for persistence across browser refreshes"""
    if not ENABLE_SESSION_PERSISTENCE:
        return
    token = st.session_state.get("access_token")
    if token:
        session_data = {key: st.session_state.get(key) for key in SESSION_KEYS}
        try:
            with open(SESSION_FILE, 'w') as f:
                json.dump(session_data, f)
            print(f"Session saved: {session_data['admin_email']}")
        except OSError as e:
            print(f"Failed to save session: {e}")


def load_session():
    """Load session from file if exists"""
    if not ENABLE_SESSION_PERSISTENCE or not SESSION_FILE.exists():
        return
    if st.session_state.get("access_token"):
        return
    try:
        with open(SESSION_FILE, 'r') as f:
            session_data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Failed to load session: {e}")
        return
    for key in SESSION_KEYS:
        st.session_state[key] = session_data.get(key)


def set_session(token: str, email: str, superadmin: bool):
    """Store the login result and persist it"""
    st.session_state.access_token = token
    st.session_state.admin_email = email
    st.session_state.superadmin = bool(superadmin)
    save_session()


def _decode_jwt_payload(token: str) -> dict:
    """Decode JWT payload without verifying signature."""
    try:
        parts = token.split(".")
        if len(parts) != 3:
            return {}
        payload_segment = parts[1]
        padding = "=" * (-len(payload_segment) % 4)
        payload_segment += padding
        decoded = base64.urlsafe_b64decode(payload_segment.encode("utf-8"))
        return json.loads(decoded.decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return {}


def is_token_expired(token: str) -> bool:
    """Check if JWT token is expired based on exp claim."""
    exp = _decode_jwt_payload(token).get("exp")
    if not exp:
        return False
    try:
        expiry = datetime.fromtimestamp(exp, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return False
    return datetime.now(timezone.utc) >= expiry


def is_authenticated() -> bool:
    """Check if an admin is logged in with an unexpired token"""
    token = st.session_state.get("access_token")
    if not token:
        return False
    return not is_token_expired(token)


def is_superadmin() -> bool:
    return bool(st.session_state.get("superadmin"))


def logout():
    """Logout and clear saved session"""
    for key in SESSION_KEYS:
        if key in st.session_state:
            del st.session_state[key]

    if SESSION_FILE.exists():
        try:
            SESSION_FILE.unlink()
        except OSError as e:
            print(f"Failed to delete session file: {e}")


def require_login():
    """Stop the page unless an admin is logged in"""
    load_session()
    token = st.session_state.get("access_token")
    if token and is_token_expired(token):
        logout()
        st.error("Your session expired. Please log in again.")
        if st.button("Go to Login"):
            st.switch_page("pages/1_Login.py")
        st.stop()
    if not is_authenticated():
        st.warning("Please login first")
        if st.button("Go to Login"):
            st.switch_page("pages/1_Login.py")
        st.stop()
