"""Own profile, password change and (superadmin) admin management"""
import streamlit as st
import asyncio
from utils.api_client import api_client, APIError
from utils.auth import require_login, is_superadmin, set_session, logout
from utils.validation import validate_new_password

st.set_page_config(page_title="Profile - AUS Admin", page_icon="🛡️", layout="wide")

require_login()

st.title("🛡️ Profile")

try:
    me = asyncio.run(api_client.get_current_admin())
except APIError as e:
    if e.status_code == 401:
        logout()
        st.error(f"{e.message}. Please log in again.")
        st.stop()
    st.error(f"Failed to load profile: {e.message}")
    st.stop()

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Email", me["email"])
with col2:
    st.metric("Role", "Superadmin" if me["superadmin"] else "Admin")
with col3:
    st.metric("Member since", str(me["createdAt"])[:10])

st.divider()
st.subheader("Change password")
with st.form("change_password"):
    current_password = st.text_input("Current password", type="password")
    new_password = st.text_input("New password", type="password")
    confirm_password = st.text_input("Confirm new password", type="password")
    submitted = st.form_submit_button("Update password", type="primary")
if submitted:
    ok, message = validate_new_password(new_password, confirm_password)
    if not current_password:
        st.error("Current password is required")
    elif not ok:
        st.error(message)
    else:
        try:
            result = asyncio.run(api_client.change_password(current_password, new_password))
            # The old token is no longer accepted
            set_session(result["token"], me["email"], me["superadmin"])
            st.success(result["message"])
        except APIError as e:
            st.error(f"Password change failed: {e.message}")

if not is_superadmin():
    st.stop()

st.divider()
st.subheader("Admins")
try:
    admins = asyncio.run(api_client.list_admins())
    st.dataframe(admins, use_container_width=True)
except APIError as e:
    admins = []
    st.error(f"Failed to load admins: {e.message}")

tab_register, tab_reset = st.tabs(["Register admin", "Reset password"])

with tab_register:
    with st.form("register_admin"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted_register = st.form_submit_button("Create admin")
    if submitted_register:
        if not email or not password:
            st.error("Email and Password are required.")
        else:
            try:
                result = asyncio.run(api_client.register_admin(email, password))
                st.success(result["message"])
            except APIError as e:
                st.error(f"Create failed: {e.message}")

with tab_reset:
    choices = {a["email"]: a["id"] for a in admins if a["email"] != me["email"]}
    with st.form("reset_password"):
        target = st.selectbox("Admin", list(choices.keys()))
        reset_password = st.text_input("New password", type="password")
        reset_confirm = st.text_input("Confirm new password", type="password")
        submitted_reset = st.form_submit_button("Reset password")
    if submitted_reset:
        ok, message = validate_new_password(reset_password, reset_confirm)
        if not target:
            st.error("Select an admin")
        elif not ok:
            st.error(message)
        else:
            try:
                result = asyncio.run(api_client.reset_admin_password(choices[target], reset_password))
                st.success(result["message"])
            except APIError as e:
                st.error(f"Reset failed: {e.message}")
