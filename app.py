import logging

import streamlit as st

from config import LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="AIS 60:1 Tools", page_icon="🛩️", layout="centered")

st.markdown("""
<style>
body {
    font-family: 'Segoe UI', sans-serif;
    background-color: #060B1A;
    color: #f2f4f8;
}
.block-container {
    padding-top: 1rem !important;
    text-align: center;
}
.stMarkdown p {
    color: #A7B5E4;
}
code {
    color: #FFD580 !important;
}
</style>
""", unsafe_allow_html=True)

st.title("🛩️ AIS 60:1 Tools")
st.markdown("This app is based on the 60:1 Formulas from AIS/202v3. (CAO:02 May 2025)")

st.page_link("pages/1_AIS_Tools.py", label="Go to AIS Tools", icon="🧮")

logger.debug("Rendered home page")
