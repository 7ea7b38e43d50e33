import streamlit as st

from askyou.ui.components import cta, footer, page_setup
from askyou.ui.demo import demo_app

page_setup("Demo")

demo_app()

st.divider()
st.subheader("Try Full Features")
cta("Contact")

footer()
