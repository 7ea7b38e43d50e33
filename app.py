from __future__ import annotations

import streamlit as st

from askyou.config import get_settings
from askyou.content.site import FEATURES
from askyou.engine.estimator import ESTIMATOR_VERSION
from askyou.engine.questions import SCENARIOS, SCENARIO_BUTTONS
from askyou.ui.components import cta, footer, page_setup

cfg = get_settings()
page_setup("Home")

st.title(f"{cfg.APP_NAME}: AI-Powered ESG Reporting")
st.write(cfg.TAGLINE)
st.caption(f"Estimator version: {ESTIMATOR_VERSION}")

cta("Demo", "Contact")

st.divider()
st.header("Estimate your footprint in seconds")
cols = st.columns(len(SCENARIO_BUTTONS))
for col, (sid, label) in zip(cols, SCENARIO_BUTTONS.items()):
    with col:
        with st.container(border=True):
            st.subheader(label)
            st.caption(SCENARIOS[sid].title)

st.divider()
st.header("Why teams pick AskYou")
cols = st.columns(len(FEATURES))
for col, (icon, name, _text) in zip(cols, FEATURES):
    with col:
        st.markdown(f"### {icon}")
        st.write(f"**{name}**")

cta("Features", "Pricing")

footer()
