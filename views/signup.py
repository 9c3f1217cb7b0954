"""
Sign-up page
"""
import streamlit as st

from auth.authentication import register_user, SIGNUP_SUCCESS_MESSAGE
from database.models import DUPLICATE_EMAIL_MESSAGE
from services.router import View, navigate
from views.components import flash


def render(state):
    st.markdown("### 📝 Create an Account")
    st.caption("Sign up to report issues and track progress.")

    with st.form("signup_form"):
        name = st.text_input("Name *", placeholder="Your full name")
        email = st.text_input("Email *", placeholder="you@example.com")
        password = st.text_input("Password *", type="password", placeholder="Create a password")

        submitted = st.form_submit_button("Create Account", use_container_width=True, type="primary")

    if not submitted:
        return

    try:
        success, error_msg = register_user(state.users, name=name, email=email, password=password)
    except Exception as e:
        st.error(f"Registration error: {str(e)}")
        return

    if success:
        flash(SIGNUP_SUCCESS_MESSAGE)
        navigate(View.HOME)
    elif error_msg == DUPLICATE_EMAIL_MESSAGE:
        flash(error_msg, 'error')
        navigate(View.HOME)
    else:
        st.error(error_msg)
