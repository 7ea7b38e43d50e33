import logging

import streamlit as st
from pydantic import ValidationError

from askyou.config import get_settings
from askyou.services.contact import ContactMessage, mailto_url, send_contact_mail
from askyou.ui.components import footer, page_setup

page_setup("Contact")
log = logging.getLogger("askyou.pages.contact")
cfg = get_settings()

st.title("Get in Touch")
st.write("We'll get back to you as soon as possible.")

c1, c2 = st.columns(2)
c1.markdown(f"✉️ {cfg.CONTACT_EMAIL}")
c2.markdown(f"📞 {cfg.CONTACT_PHONE}")

with st.form("contact_form", clear_on_submit=True):
    name = st.text_input("Name")
    email = st.text_input("Email")
    company = st.text_input("Company")
    message = st.text_area("Message", height=120)
    submitted = st.form_submit_button("Send Message", type="primary")

if submitted:
    try:
        msg = ContactMessage(name=name, email=email, company=company, message=message)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        st.error(f"Please check the following fields: {fields}")
        st.stop()

    if send_contact_mail(msg):
        st.success("Your message has been sent successfully!")
    else:
        if cfg.smtp_enabled:
            st.error("There was an error sending your message. Please try again.")
        st.link_button("Open in your mail app", mailto_url(msg, cfg.CONTACT_EMAIL), type="primary")
        log.info("contact form handed off to mail client")

footer()
