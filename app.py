# app.py
import streamlit as st

from pages.config import PAGE_TITLE, PAGE_ICON

st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")
st.title(f"{PAGE_ICON} {PAGE_TITLE}")
st.write("Use **Scan submissions** in the sidebar to scan an assignment folder.")
