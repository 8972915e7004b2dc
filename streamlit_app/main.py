"""Streamlit application main entry point"""
import streamlit as st
from utils.auth import is_authenticated, load_session

st.set_page_config(
    page_title="AUS Admin",
    page_icon="🛠️",
    layout="wide",
    initial_sidebar_state="collapsed"
)

if "access_token" not in st.session_state:
    st.session_state.access_token = None

# Load persisted session on startup
load_session()

st.title("🛠️ AUS Admin")
st.markdown("Manage the founder profile and admin accounts for the public site.")
st.markdown("---")

if is_authenticated():
    st.success(f"✅ Logged in as **{st.session_state.admin_email}**")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Founder Profile →", use_container_width=True, type="primary"):
            st.switch_page("pages/2_Founder.py")
    with col2:
        if st.button("Profile & Admins →", use_container_width=True):
            st.switch_page("pages/3_Profile.py")
else:
    if st.button("🔐 Login →", use_container_width=True, type="primary"):
        st.switch_page("pages/1_Login.py")
