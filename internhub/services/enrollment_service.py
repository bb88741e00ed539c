"""
Enrollment Service - students enrolling in courses and tracking progress.

Progress only moves forward. Values are clamped to 0..100 and the first
time an enrollment reaches 100 its completion date is stamped.
"""

import logging
from typing import List, Optional

from internhub.core.auth import StudentPrincipal
from internhub.core.errors import ConflictError, NotFoundError, ValidationFailed
from internhub.models import Enrollment, PaymentStatus
from internhub.repositories import DuplicateRecordError, Repository
from internhub.repositories.base import utcnow
from internhub.schemas.schemas import EnrollmentCreate, EnrollmentResponse, EnrollmentUpdate

COMPLETE = 100


def clamp_progress(value: int) -> int:
    return max(0, min(COMPLETE, value))


class EnrollmentService:

    def __init__(self, repo: Repository, logger: Optional[logging.Logger] = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    def _get_owned(self, student: StudentPrincipal, enrollment_id: int) -> Enrollment:
        enrollment = self.repo.enrollments.get(enrollment_id)
        if enrollment is None or enrollment.student_id != student.student_id:
            raise NotFoundError("Enrollment not found")
        return enrollment

    def enroll(self, student: StudentPrincipal, data: EnrollmentCreate) -> Enrollment:
        course = self.repo.courses.get(data.course_id)
        if course is None:
            raise ValidationFailed("Course not found")

        try:
            enrollment = self.repo.enrollments.create({
                "student_id": student.student_id,
                "course_id": course.id,
                "payment_id": data.payment_id,
                "payment_status": PaymentStatus.pending,
                "progress_percentage": 0,
            })
        except DuplicateRecordError:
            raise ConflictError("Already enrolled in this course")

        self.logger.info("Student %s enrolled in course %s (enrollment %s)",
                         student.student_id, course.id, enrollment.id)
        return enrollment

    def list_for_student(self, student: StudentPrincipal) -> List[EnrollmentResponse]:
        return [
            EnrollmentResponse(**dict(enrollment), course=self.repo.courses.get(enrollment.course_id))
            for enrollment in self.repo.enrollments.find(student_id=student.student_id)
        ]

    def update_progress(self, student: StudentPrincipal, enrollment_id: int, progress: int) -> Enrollment:
        enrollment = self._get_owned(student, enrollment_id)
        value = clamp_progress(progress)
        if value < enrollment.progress_percentage:
            raise ValidationFailed(
                f"Progress cannot decrease (currently {enrollment.progress_percentage}%)"
            )

        changes = {"progress_percentage": value}
        if value == COMPLETE and enrollment.completion_date is None:
            changes["completion_date"] = utcnow()
            self.logger.info("Enrollment %s completed", enrollment.id)

        updated = self.repo.enrollments.update(enrollment.id, changes)
        if updated is None:
            raise NotFoundError("Enrollment not found")
        return updated

    def update(self, student: StudentPrincipal, enrollment_id: int, data: EnrollmentUpdate) -> Enrollment:
        enrollment = self._get_owned(student, enrollment_id)
        changes = data.changes()
        if not changes:
            return enrollment
        updated = self.repo.enrollments.update(enrollment.id, changes)
        if updated is None:
            raise NotFoundError("Enrollment not found")
        return updated

    def cancel(self, student: StudentPrincipal, enrollment_id: int) -> None:
        enrollment = self._get_owned(student, enrollment_id)
        self.repo.enrollments.delete(enrollment.id)
        self.logger.info("Student %s cancelled enrollment %s", student.student_id, enrollment.id)
