"""
Record schemas and enumerations for CleanCity
Field names are the JSON keys used in storage
"""
from enum import Enum
from typing import Optional

from config import REPORTS_KEY, USERS_KEY


class Status(str, Enum):
    SUBMITTED = 'submitted'
    IN_PROGRESS = 'in-progress'
    RESOLVED = 'resolved'
    ADMIN_ONLY = 'admin-only'  # Never set by the app, hidden from residents

    @property
    def icon(self) -> str:
        return STATUS_ICONS[self]

    @property
    def activity_message(self) -> str:
        return STATUS_ACTIVITY_MESSAGES[self]

    @property
    def next_status(self) -> Optional['Status']:
        """Status reached by the admin action button, None when finished"""
        return STATUS_ADVANCE[self][0]

    @property
    def action_label(self) -> Optional[str]:
        return STATUS_ADVANCE[self][1]


class WasteType(str, Enum):
    OVERFLOWING_GARBAGE = 'overflowing-garbage'
    ILLEGAL_DUMPING = 'illegal-dumping'
    HAZARDOUS_WASTE = 'hazardous-waste'
    RECYCLING_ISSUE = 'recycling-issue'
    OTHER = 'other'

    @property
    def icon(self) -> str:
        return WASTE_TYPE_ICONS[self]

    @property
    def label(self) -> str:
        return WASTE_TYPE_LABELS[self]

    @property
    def option_label(self) -> str:
        """Text shown in the report form dropdown"""
        return WASTE_TYPE_OPTIONS[self]


class Priority(str, Enum):
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'


STATUS_ICONS = {
    Status.SUBMITTED: '📝',
    Status.IN_PROGRESS: '⚙️',
    Status.RESOLVED: '✅',
    Status.ADMIN_ONLY: '📝',
}

STATUS_ACTIVITY_MESSAGES = {
    Status.SUBMITTED: 'New report submitted',
    Status.IN_PROGRESS: 'Report is being processed',
    Status.RESOLVED: 'Report has been resolved',
    Status.ADMIN_ONLY: 'Report updated',
}

# status -> (next status, button label)
STATUS_ADVANCE = {
    Status.SUBMITTED: (Status.IN_PROGRESS, 'Start'),
    Status.IN_PROGRESS: (Status.RESOLVED, 'Resolve'),
    Status.RESOLVED: (None, None),
    Status.ADMIN_ONLY: (Status.RESOLVED, 'Resolve'),
}

WASTE_TYPE_ICONS = {
    WasteType.OVERFLOWING_GARBAGE: '🗑️',
    WasteType.ILLEGAL_DUMPING: '🚫',
    WasteType.HAZARDOUS_WASTE: '⚠️',
    WasteType.RECYCLING_ISSUE: '♻️',
    WasteType.OTHER: '❓',
}

WASTE_TYPE_LABELS = {
    WasteType.OVERFLOWING_GARBAGE: 'Overflowing Garbage',
    WasteType.ILLEGAL_DUMPING: 'Illegal Dumping',
    WasteType.HAZARDOUS_WASTE: 'Hazardous Waste',
    WasteType.RECYCLING_ISSUE: 'Recycling Issue',
    WasteType.OTHER: 'Other',
}

WASTE_TYPE_OPTIONS = {
    WasteType.OVERFLOWING_GARBAGE: '🗑️ Overflowing Garbage Bin',
    WasteType.ILLEGAL_DUMPING: '🚫 Illegal Dumping',
    WasteType.HAZARDOUS_WASTE: '⚠️ Hazardous Waste',
    WasteType.RECYCLING_ISSUE: '♻️ Recycling Problem',
    WasteType.OTHER: '❓ Other',
}

# Words in a description that make a report high priority
URGENT_WORDS = ('emergency', 'danger', 'overflow', 'block')

REPORT_STATUS_ENUM = [status.value for status in Status]
WASTE_TYPE_ENUM = [waste_type.value for waste_type in WasteType]

# 1. Report record
REPORT_SCHEMA = {
    "id": int,  # Milliseconds since epoch at creation
    "name": str,
    "contact": str,
    "location": str,
    "wasteType": str,  # enum: WASTE_TYPE_ENUM
    "description": str,
    "photo": str,  # Optional data URL (base64 JPEG)
    "status": str,  # enum: REPORT_STATUS_ENUM
    "date": str,  # ISO-8601 creation time
    "updatedAt": str,  # Optional ISO-8601 time of last status change
}

# 2. User record
USER_SCHEMA = {
    "name": str,
    "email": str,  # Unique, compared case-insensitively
    "password": str,  # Stored as entered
    "role": str,  # Always 'user'
}

# Storage keys
COLLECTIONS = {
    'Reports': REPORTS_KEY,
    'Users': USERS_KEY,
}
