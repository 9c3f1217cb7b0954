"""
Report Service - Validation and Submission

Submission waits a short, simulated processing delay before the report is
stored. The wait runs as a task owned by the report page, so leaving the
page cancels a submission that has not been stored yet.
"""
import base64
import io
from typing import Dict, Optional

from PIL import Image

from config import SUBMIT_DELAY_SECONDS
from database.models import Report
from database.schemas import WasteType
from services.router import View
from services.scheduler import ScheduledTask

REQUIRED_REPORT_FIELDS = {
    "name": "Your Name",
    "contact": "Contact Information",
    "location": "Location",
    "waste_type": "Type of Waste Issue",
    "description": "Description",
}

SUBMIT_SUCCESS_MESSAGE = "Report submitted successfully! Thank you for helping keep our community clean."

MAX_PHOTO_WIDTH = 800


def validate_report_input(data: Dict) -> Optional[str]:
    """
    Check submitted form data

    Returns:
        Error message, or None when the report can be stored
    """
    missing = [label for field, label in REQUIRED_REPORT_FIELDS.items()
               if not str(data.get(field) or "").strip()]
    if missing:
        return f"Please fill in: {', '.join(missing)}"
    try:
        WasteType(data["waste_type"])
    except ValueError:
        return f"Unknown waste type '{data['waste_type']}'"
    return None


def image_to_base64(image_file) -> str:
    """Convert uploaded image to a base64 data URL (JPEG, at most 800px wide)"""
    image = Image.open(image_file)
    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    if image.width > MAX_PHOTO_WIDTH:
        ratio = MAX_PHOTO_WIDTH / image.width
        new_height = int(image.height * ratio)
        image = image.resize((MAX_PHOTO_WIDTH, new_height), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    image.save(buffer, format='JPEG', quality=85)
    img_str = base64.b64encode(buffer.getvalue()).decode()
    return f"data:image/jpeg;base64,{img_str}"


def start_submission(state, data: Dict, delay: float = SUBMIT_DELAY_SECONDS) -> ScheduledTask:
    """
    Validate a new report and schedule storing it after the processing delay

    Args:
        state: Session AppState
        data: Form fields (name, contact, location, waste_type, description, photo)
        delay: Seconds to wait before storing

    Returns:
        Task whose result is the stored report

    Raises:
        ValueError: the form data is incomplete
    """
    error_msg = validate_report_input(data)
    if error_msg:
        raise ValueError(error_msg)

    fields = {
        "name": data["name"].strip(),
        "contact": data["contact"].strip(),
        "location": data["location"].strip(),
        "waste_type": WasteType(data["waste_type"]),
        "description": data["description"].strip(),
        "photo": data.get("photo") or None,
    }
    return state.tasks.schedule(View.REPORT, delay, lambda: state.reports.add(fields))


def submit_report(state, data: Dict, delay: float = SUBMIT_DELAY_SECONDS) -> Report:
    """
    Validate and store a new report, waiting for the processing delay

    Raises:
        ValueError: the form data is incomplete
        TaskCancelled: the user left the report page before the report was stored
    """
    return start_submission(state, data, delay).result()
