"""
Report form: residents describe a waste problem, optionally with a photo
"""
import time

import streamlit as st

from database.schemas import WasteType
from services.report_service import (
    SUBMIT_SUCCESS_MESSAGE,
    image_to_base64,
    start_submission,
    validate_report_input,
)
from services.scheduler import TaskCancelled
from views.components import flash

FORM_VERSION_KEY = 'report_form_version'
POLL_SECONDS = 0.1


def wait_for_submission(task):
    """
    Show progress until the task finishes

    Each progress update lets Streamlit stop this run if the user clicks
    elsewhere; the router then cancels the task on the next run.
    """
    progress = st.progress(0.0, text="Submitting...")
    elapsed = 0.0
    while not task.done:
        time.sleep(POLL_SECONDS)
        elapsed += POLL_SECONDS
        progress.progress(min(elapsed / max(task.delay, POLL_SECONDS), 1.0), text="Submitting...")
    progress.empty()
    return task.result()


def render(state):
    st.markdown("## Report a Waste Problem")
    st.caption("Help us maintain a clean environment by reporting waste issues in your area.")

    # Bumping the version gives every widget a fresh key, which clears the form
    version = st.session_state.setdefault(FORM_VERSION_KEY, 0)

    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Your Name *", placeholder="Enter your full name", key=f"report_name_{version}")
    with col2:
        contact = st.text_input("Contact Information *", placeholder="Phone number or email", key=f"report_contact_{version}")

    location = st.text_input("Location *", placeholder="Street address or landmark", key=f"report_location_{version}")
    waste_type = st.selectbox(
        "Type of Waste Issue *",
        list(WasteType),
        format_func=lambda waste_type: waste_type.option_label,
        key=f"report_type_{version}"
    )
    description = st.text_area(
        "Description *",
        placeholder="Please describe the waste issue in detail...",
        height=150,
        key=f"report_description_{version}"
    )
    uploaded_image = st.file_uploader(
        "Upload Photo (Optional)",
        type=['png', 'jpg', 'jpeg', 'gif', 'webp'],
        key=f"report_photo_{version}"
    )

    photo = None
    if uploaded_image is not None:
        try:
            photo = image_to_base64(uploaded_image)
            st.image(photo, caption="Preview", width=200)
        except Exception as e:
            st.error(f"Error processing image: {str(e)}")

    if st.button("📤 Submit Report", type="primary", key=f"report_submit_{version}"):
        data = {
            "name": name,
            "contact": contact,
            "location": location,
            "waste_type": waste_type,
            "description": description,
            "photo": photo,
        }
        error_msg = validate_report_input(data)
        if error_msg:
            st.error(error_msg)
            return

        try:
            wait_for_submission(start_submission(state, data))
        except TaskCancelled:
            st.warning("Submission was cancelled.")
            return
        except Exception as e:
            st.error(f"Error creating report: {str(e)}")
            return

        st.session_state[FORM_VERSION_KEY] = version + 1
        flash(SUBMIT_SUCCESS_MESSAGE)
        st.rerun()
