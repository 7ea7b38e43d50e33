from __future__ import annotations

import streamlit as st

from askyou.config import get_settings
from askyou.content.site import NAV_LINKS, nav_link
from askyou.logs import configure_logging


def h2(title: str, caption: str | None = None):
    st.subheader(title)
    if caption:
        st.caption(caption)


def fmt_number(x: float | None, digits: int = 2) -> str:
    if x is None:
        return "Calculating..."
    return f"{float(x):,.{digits}f}"


def page_setup(title: str) -> None:
    """Shared page boilerplate: page config, logging, top navigation."""
    cfg = get_settings()
    st.set_page_config(page_title=f"{title} | {cfg.APP_NAME}", page_icon="🌿", layout="wide")
    configure_logging()
    header()


def header() -> None:
    cfg = get_settings()
    cols = st.columns([2] + [1] * len(NAV_LINKS))
    with cols[0]:
        st.page_link("app.py", label=f"**{cfg.APP_NAME}**", icon="🌿")
    for col, link in zip(cols[1:], NAV_LINKS):
        with col:
            st.page_link(link.page, label=link.label, icon=link.icon)
    st.divider()


def cta(*labels: str) -> None:
    cols = st.columns(len(labels))
    for col, label in zip(cols, labels):
        link = nav_link(label)
        with col:
            st.page_link(link.page, label=label, icon=link.icon)


def footer() -> None:
    cfg = get_settings()
    st.divider()
    st.caption(f"© {cfg.APP_NAME} · {cfg.CONTACT_EMAIL}")
