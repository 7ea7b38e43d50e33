import streamlit as st

from askyou.content.site import FAQS, PRICING_PLANS, nav_link, plan_comparison
from askyou.ui.components import footer, page_setup

page_setup("Pricing")

st.title("Affordable, Transparent, and Scalable Pricing")
st.write(
    "Choose the perfect plan for your business. From startups to enterprises, "
    "we've got you covered with flexible pricing options."
)

cols = st.columns(len(PRICING_PLANS))
for col, plan in zip(cols, PRICING_PLANS):
    with col:
        with st.container(border=True):
            if plan.popular:
                st.caption("⭐ Most Popular")
            st.subheader(plan.name)
            st.write(plan.description)
            st.markdown(f"### {plan.price_label} <small>{plan.period}</small>", unsafe_allow_html=True)
            for feat in plan.features:
                mark = "✅" if feat.included else "❌"
                st.write(f"{mark} {feat.text}")
            st.page_link(nav_link(plan.target).page, label=plan.cta, icon="➡️")

st.subheader("Compare plans")
st.dataframe(plan_comparison(), use_container_width=True)

st.header("Frequently Asked Questions")
for question, answer in FAQS:
    with st.expander(question):
        st.write(answer)

footer()
