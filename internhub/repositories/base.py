"""
Repository interface.

Each entity type is exposed as a ``Collection`` on the repository
(``repo.internships``, ``repo.applications``...). Route handlers and
services only talk to this interface, so the SQL and in-memory backends
are interchangeable.

Filter semantics (``find`` / ``first``):
- ``None`` values are ignored
- list values match when the stored list is a superset
- everything else must be equal
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from internhub.models import (
    Application, Course, Education, EmployerProfile, Enrollment, Experience,
    Internship, Job, Record, Skill, StudentProfile, User, UserSession,
)

R = TypeVar("R", bound=Record)


class DuplicateRecordError(Exception):
    """A create would violate a uniqueness rule; nothing was stored."""

    def __init__(self, collection: str, fields: Tuple[str, ...] = ()):
        self.collection = collection
        self.fields = fields
        detail = f" on {', '.join(fields)}" if fields else ""
        super().__init__(f"Duplicate {collection}{detail}")


def utcnow() -> datetime:
    """Naive UTC timestamp (what the SQL DateTime columns round-trip)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def plain(data: Dict[str, Any]) -> Dict[str, Any]:
    """Unwrap enum members so both backends store raw values."""
    return {key: (value.value if isinstance(value, Enum) else value) for key, value in data.items()}


def matches(record: Record, filters: Dict[str, Any]) -> bool:
    for key, value in filters.items():
        if value is None:
            continue
        stored = getattr(record, key)
        if isinstance(value, (list, tuple, set)):
            if not set(value) <= set(stored or []):
                return False
        elif stored != value:
            return False
    return True


@dataclass(frozen=True)
class CollectionSpec:
    name: str
    record_type: Type[Record]
    timestamp_field: Optional[str] = "created_at"
    unique: List[Tuple[str, ...]] = field(default_factory=list)


COLLECTION_SPECS = [
    CollectionSpec("users", User, unique=[("email",)]),
    CollectionSpec("student_profiles", StudentProfile, unique=[("user_id",)]),
    CollectionSpec("employer_profiles", EmployerProfile, unique=[("user_id",)]),
    CollectionSpec("skills", Skill),
    CollectionSpec("experiences", Experience),
    CollectionSpec("educations", Education),
    CollectionSpec("internships", Internship),
    CollectionSpec("jobs", Job),
    CollectionSpec(
        "applications", Application, "application_date",
        unique=[("student_id", "internship_id"), ("student_id", "job_id")],
    ),
    CollectionSpec("courses", Course),
    CollectionSpec("enrollments", Enrollment, "enrollment_date", unique=[("student_id", "course_id")]),
    CollectionSpec("sessions", UserSession),
]


class Collection(ABC, Generic[R]):
    """CRUD access to one entity type."""

    def __init__(self, spec: CollectionSpec):
        self.spec = spec

    @property
    def name(self) -> str:
        return self.spec.name

    def _stamp(self, data: Dict[str, Any]) -> Dict[str, Any]:
        values = plain(data)
        values.pop("id", None)
        if self.spec.timestamp_field and values.get(self.spec.timestamp_field) is None:
            values[self.spec.timestamp_field] = utcnow()
        return values

    @abstractmethod
    def get(self, record_id: int) -> Optional[R]:
        ...

    @abstractmethod
    def find(self, **filters: Any) -> List[R]:
        ...

    def first(self, **filters: Any) -> Optional[R]:
        found = self.find(**filters)
        return found[0] if found else None

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> R:
        """Insert with a fresh id; raises DuplicateRecordError on a unique clash."""

    @abstractmethod
    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[R]:
        """Apply changes; None when the id does not exist."""

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        ...


class Repository(ABC):
    users: Collection[User]
    student_profiles: Collection[StudentProfile]
    employer_profiles: Collection[EmployerProfile]
    skills: Collection[Skill]
    experiences: Collection[Experience]
    educations: Collection[Education]
    internships: Collection[Internship]
    jobs: Collection[Job]
    applications: Collection[Application]
    courses: Collection[Course]
    enrollments: Collection[Enrollment]
    sessions: Collection[UserSession]

    def __init__(self):
        for spec in COLLECTION_SPECS:
            setattr(self, spec.name, self._build_collection(spec))

    @abstractmethod
    def _build_collection(self, spec: CollectionSpec) -> Collection:
        ...

    def create_all(self) -> None:
        """Prepare the storage schema (no-op for schemaless backends)."""

    def ping(self) -> bool:
        return True
