"""Founder profile editor"""
import streamlit as st
import asyncio
from utils.api_client import api_client, APIError
from utils.auth import require_login
from utils.validation import validate_founder_form, validate_image_url, badges_to_text

st.set_page_config(page_title="Founder - AUS Admin", page_icon="👤", layout="wide")

require_login()

st.title("👤 Founder Profile")
st.caption("Shown on the public site. Upload the image to the asset store first and paste its URL here.")

try:
    founder = asyncio.run(api_client.get_founder())
except APIError as e:
    st.error(f"Failed to load founder: {e.message}")
    st.stop()

if founder is None:
    st.info("No founder profile yet. Create one below.")
    with st.form("create_founder"):
        name = st.text_input("Name")
        title = st.text_input("Title")
        bio = st.text_area("Bio", height=200)
        image = st.text_input("Image URL")
        badges = st.text_input("Badges (comma separated)")
        submitted = st.form_submit_button("Create", type="primary")
    if submitted:
        ok, message = validate_founder_form(name, title, bio, image)
        if not ok:
            st.error(message)
        else:
            try:
                asyncio.run(api_client.create_founder(
                    {"name": name, "title": title, "bio": bio, "image": image, "badges": badges}
                ))
                st.success("Founder created successfully!")
                st.rerun()
            except APIError as e:
                st.error(f"Failed to create founder: {e.message}")
    st.stop()

col_preview, col_edit = st.columns([1, 2])

with col_preview:
    if founder.get("image"):
        st.image(founder["image"], use_container_width=True)
    st.subheader(founder["name"])
    st.write(f"*{founder['title']}*")
    st.write(" · ".join(founder.get("badges") or []))
    st.caption(f"Last updated {founder.get('updatedAt')}")

with col_edit:
    with st.form("edit_founder"):
        name = st.text_input("Name", value=founder["name"])
        title = st.text_input("Title", value=founder["title"])
        bio = st.text_area("Bio", value=founder["bio"], height=200)
        image = st.text_input("Image URL", value=founder["image"])
        badges = st.text_input("Badges (comma separated)", value=badges_to_text(founder.get("badges")))
        submitted = st.form_submit_button("Save changes", type="primary")
    if submitted:
        ok, message = validate_image_url(image)
        if not (name.strip() and title.strip() and bio.strip()):
            st.error("Name, Title and Bio are required.")
        elif not ok:
            st.error(message)
        else:
            try:
                asyncio.run(api_client.update_founder(
                    {"name": name, "title": title, "bio": bio, "image": image, "badges": badges},
                    founder_id=founder.get("id"),
                ))
                st.success("Founder updated successfully!")
                st.rerun()
            except APIError as e:
                st.error(f"Failed to update founder: {e.message}")

    st.divider()
    confirm = st.checkbox("I understand the profile will be removed from the site")
    if st.button("Delete founder", disabled=not confirm):
        try:
            asyncio.run(api_client.delete_founder(founder.get("id")))
            st.success("Founder deleted.")
            st.rerun()
        except APIError as e:
            st.error(f"Failed to delete founder: {e.message}")
