import pytest

from database.schemas import Status, WasteType


@pytest.mark.parametrize("waste_type", list(WasteType))
def test_every_waste_type_has_icon_and_labels(waste_type):
    assert waste_type.icon
    assert waste_type.label
    assert waste_type.option_label


@pytest.mark.parametrize("status", list(Status))
def test_every_status_has_activity_text(status):
    assert status.icon
    assert status.activity_message


def test_status_advance_buttons():
    assert (Status.SUBMITTED.next_status, Status.SUBMITTED.action_label) == (Status.IN_PROGRESS, "Start")
    assert (Status.IN_PROGRESS.next_status, Status.IN_PROGRESS.action_label) == (Status.RESOLVED, "Resolve")
    assert Status.RESOLVED.next_status is None
    assert Status.RESOLVED.action_label is None
