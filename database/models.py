"""
Report and user records, and the repositories that keep them in storage
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Tuple

from .schemas import Status, WasteType
from .store import KeyValueStore
from config import REPORTS_KEY, USERS_KEY

DUPLICATE_EMAIL_MESSAGE = "An account with this email already exists. Please log in."
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a 'Z' suffix"""
    text = value.astimezone(timezone.utc).isoformat(timespec='milliseconds')
    return text.replace('+00:00', 'Z')


def parse_timestamp(text: str) -> datetime:
    value = datetime.fromisoformat(text.replace('Z', '+00:00'))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class Report:
    """One waste complaint filed by a resident"""
    id: int
    name: str
    contact: str
    location: str
    waste_type: WasteType
    description: str
    status: Status
    date: datetime
    photo: Optional[str] = None
    updated_at: Optional[datetime] = None

    @property
    def last_activity(self) -> datetime:
        """Time of the last status change, or creation time"""
        return self.updated_at or self.date

    def to_dict(self) -> Dict:
        data = {
            "id": self.id,
            "name": self.name,
            "contact": self.contact,
            "location": self.location,
            "wasteType": self.waste_type.value,
            "description": self.description,
            "photo": self.photo,
            "status": self.status.value,
            "date": format_timestamp(self.date),
        }
        if self.updated_at is not None:
            data["updatedAt"] = format_timestamp(self.updated_at)
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> 'Report':
        updated_at = data.get("updatedAt")
        return cls(
            id=int(data["id"]),
            name=data["name"],
            contact=data["contact"],
            location=data["location"],
            waste_type=WasteType(data["wasteType"]),
            description=data["description"],
            status=Status(data["status"]),
            date=parse_timestamp(data["date"]),
            photo=data.get("photo") or None,
            updated_at=parse_timestamp(updated_at) if updated_at else None,
        )


@dataclass
class User:
    """A registered resident account"""
    name: str
    email: str
    password: str  # Stored as entered
    role: str = 'user'

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "role": self.role,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'User':
        return cls(
            name=data.get("name", ""),
            email=data.get("email") or "",
            password=data.get("password", ""),
            role=data.get("role", "user"),
        )


def _parse_records(records: List, parser, kind: str) -> List:
    parsed = []
    for record in records:
        try:
            parsed.append(parser(record))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            print(f"⚠️ Skipping unreadable {kind} record: {e}")
    return parsed


class ReportRepository:
    """
    Newest-first list of reports mirrored to the store

    Every mutation writes the whole list back under REPORTS_KEY.
    """

    def __init__(self, store: KeyValueStore, clock: Optional[Callable[[], datetime]] = None,
                 key: str = REPORTS_KEY):
        self.store = store
        self.key = key
        self.clock = clock or utc_now
        self._reports: List[Report] = []
        self.revision = 0

    @property
    def reports(self) -> List[Report]:
        """Snapshot of the current list, newest first"""
        return list(self._reports)

    def __len__(self):
        return len(self._reports)

    def load(self) -> List[Report]:
        """Replace the in-memory list with what the store holds"""
        self._reports = _parse_records(self.store.get(self.key), Report.from_dict, "report")
        self.revision += 1
        return self.reports

    def flush(self):
        self.store.set(self.key, [report.to_dict() for report in self._reports])

    def find(self, report_id: int) -> Optional[Report]:
        for report in self._reports:
            if report.id == report_id:
                return report
        return None

    def _now(self) -> datetime:
        now = self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        # Stored timestamps keep milliseconds only
        return now.replace(microsecond=now.microsecond // 1000 * 1000)

    def add(self, data: Dict) -> Report:
        """
        Create a report from submitted form data and put it first in the list

        Args:
            data: name, contact, location, waste_type, description and optional photo

        Returns:
            The stored report (status 'submitted')
        """
        now = self._now()
        report = Report(
            id=(now - EPOCH) // timedelta(milliseconds=1),
            name=data.get("name", ""),
            contact=data.get("contact", ""),
            location=data.get("location", ""),
            waste_type=WasteType(data.get("waste_type", WasteType.OVERFLOWING_GARBAGE)),
            description=data.get("description", ""),
            photo=data.get("photo") or None,
            status=Status.SUBMITTED,
            date=now,
        )
        self._reports.insert(0, report)
        self.revision += 1
        self.flush()
        return report

    def update_status(self, report_id: int, status):
        """Set the status of a report; unknown ids are ignored"""
        status = Status(status)
        report = self.find(report_id)
        if report is not None:
            report.status = status
            report.updated_at = self._now()
        self.revision += 1
        self.flush()


class UserRepository:
    """Newest-first list of registered accounts mirrored to the store"""

    def __init__(self, store: KeyValueStore, key: str = USERS_KEY):
        self.store = store
        self.key = key
        self._users: List[User] = []

    @property
    def users(self) -> List[User]:
        return list(self._users)

    def load(self) -> List[User]:
        self._users = _parse_records(self.store.get(self.key), User.from_dict, "user")
        return self.users

    def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email, ignoring letter case"""
        wanted = (email or "").lower()
        for user in self._users:
            if user.email.lower() == wanted:
                return user
        return None

    def register(self, name: str, email: str, password: str) -> Tuple[bool, Optional[User], Optional[str]]:
        """
        Register a new account unless the email is already taken

        Returns:
            Tuple of (success: bool, user: User or None, error_message: str or None)
        """
        # Another session may have registered since we last looked
        self.load()
        if self.find_by_email(email):
            return False, None, DUPLICATE_EMAIL_MESSAGE

        user = User(name=name, email=email, password=password)
        self._users.insert(0, user)
        self.store.set(self.key, [u.to_dict() for u in self._users])
        return True, user, None
