import streamlit as st

from askyou.content.site import ABOUT_BENEFITS, ABOUT_HERO
from askyou.ui.components import cta, footer, page_setup

page_setup("About")

title, intro = ABOUT_HERO
st.title(title)
st.write(intro)

st.header("Why Choose AskYou?")
left, right = st.columns(2)
for i, (name, text) in enumerate(ABOUT_BENEFITS):
    with (left if i % 2 == 0 else right):
        st.subheader(name)
        st.write(text)

st.divider()
st.header("Ready to Transform Your ESG Reporting?")
cta("Demo", "Contact")

footer()
