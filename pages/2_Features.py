import streamlit as st

from askyou.content.site import FEATURE_PREVIEWS, FEATURES, FEATURES_HERO
from askyou.ui.components import cta, footer, page_setup

page_setup("Features")

title, intro = FEATURES_HERO
st.title(title)
st.write(intro)

p1, p2 = st.columns(2)
for col, caption in zip((p1, p2), FEATURE_PREVIEWS):
    with col:
        st.info(caption)

st.header("Powerful Features for Effortless ESG Reporting")
st.caption("Discover how AskYou transforms complex ESG reporting into a simple, automated process.")

cols = st.columns(3)
for i, (icon, name, text) in enumerate(FEATURES):
    with cols[i % 3]:
        st.subheader(f"{icon} {name}")
        st.write(text)

st.divider()
cta("Demo", "Pricing")

footer()
