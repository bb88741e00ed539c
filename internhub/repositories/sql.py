"""
SQLAlchemy-backed repository.

Scalar filters are pushed into the WHERE clause; list (JSON column)
filters are applied to the loaded records because JSON containment is not
portable between SQLite and PostgreSQL. Uniqueness is enforced by the
table constraints in ``internhub.db.tables``.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from internhub.db import tables
from internhub.db.database import build_session_factory, check_database_connection, session_scope
from internhub.repositories.base import (
    Collection, CollectionSpec, DuplicateRecordError, Repository, matches, plain,
)

logger = logging.getLogger(__name__)

ROW_TYPES = {
    "users": tables.UserRow,
    "student_profiles": tables.StudentProfileRow,
    "employer_profiles": tables.EmployerProfileRow,
    "skills": tables.SkillRow,
    "experiences": tables.ExperienceRow,
    "educations": tables.EducationRow,
    "internships": tables.InternshipRow,
    "jobs": tables.JobRow,
    "applications": tables.ApplicationRow,
    "courses": tables.CourseRow,
    "enrollments": tables.EnrollmentRow,
    "sessions": tables.SessionRow,
}

# SQLSTATE for unique_violation (psycopg2 exposes it as pgcode, psycopg 3 as sqlstate)
UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True for unique-constraint clashes; FK and NOT NULL failures are not duplicates."""
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == UNIQUE_VIOLATION
    return "UNIQUE constraint failed" in str(orig)


class SqlCollection(Collection):

    def __init__(self, spec: CollectionSpec, session_factory):
        super().__init__(spec)
        self.row_type = ROW_TYPES[spec.name]
        self._session_factory = session_factory

    def _to_record(self, row):
        return self.spec.record_type.model_validate(row)

    def get(self, record_id: int):
        with session_scope(self._session_factory) as db:
            row = db.get(self.row_type, record_id)
            return self._to_record(row) if row is not None else None

    def find(self, **filters: Any) -> List:
        values = plain(filters)
        scalar = {
            key: value for key, value in values.items()
            if value is not None and not isinstance(value, (list, tuple, set))
        }
        listed = {key: value for key, value in values.items() if isinstance(value, (list, tuple, set))}

        with session_scope(self._session_factory) as db:
            query = select(self.row_type).filter_by(**scalar).order_by(self.row_type.id)
            records = [self._to_record(row) for row in db.execute(query).scalars()]
        return [record for record in records if matches(record, listed)]

    def create(self, data: Dict[str, Any]):
        values = self._stamp(data)
        try:
            with session_scope(self._session_factory) as db:
                row = self.row_type(**values)
                db.add(row)
                db.flush()
                return self._to_record(row)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            logger.debug("Insert into %s rejected: %s", self.name, exc.orig)
            raise DuplicateRecordError(self.name) from exc

    def update(self, record_id: int, changes: Dict[str, Any]):
        with session_scope(self._session_factory) as db:
            row = db.get(self.row_type, record_id)
            if row is None:
                return None
            for key, value in plain(changes).items():
                setattr(row, key, value)
            db.flush()
            return self._to_record(row)

    def delete(self, record_id: int) -> bool:
        with session_scope(self._session_factory) as db:
            row = db.get(self.row_type, record_id)
            if row is None:
                return False
            db.delete(row)
            return True


class SqlRepository(Repository):

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = build_session_factory(engine)
        super().__init__()

    def _build_collection(self, spec: CollectionSpec) -> Collection:
        return SqlCollection(spec, self._session_factory)

    def create_all(self) -> None:
        tables.Base.metadata.create_all(bind=self.engine)

    def ping(self) -> bool:
        return check_database_connection(self.engine)
