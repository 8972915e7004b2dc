"""Admin login page"""
import streamlit as st
import asyncio
from utils.api_client import api_client, APIError
from utils.auth import is_authenticated, load_session, logout, set_session

st.set_page_config(page_title="Login - AUS Admin", page_icon="🔐")

load_session()

st.title("🔐 Admin Login")

if st.button("← Back to Home"):
    st.switch_page("main.py")

st.markdown("---")

if is_authenticated():
    st.info(f"Already logged in as **{st.session_state.admin_email}**")
    if st.button("Logout"):
        logout()
        st.rerun()
    st.stop()

with st.form("login_form"):
    email = st.text_input("Email", placeholder="admin@example.com")
    password = st.text_input("Password", type="password")
    submit = st.form_submit_button("Login", use_container_width=True, type="primary")

if submit:
    if not email or not password:
        st.error("Email and Password are required.")
    else:
        try:
            with st.spinner("Logging in..."):
                result = asyncio.run(api_client.login(email, password))
            set_session(result["token"], result["admin"]["email"], result["admin"]["superadmin"])
            st.success("Login successful! Redirecting...")
            st.switch_page("pages/2_Founder.py")
        except APIError as e:
            st.error(f"Login failed: {e.message}")
