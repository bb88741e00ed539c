"""
Application Service - student applications to internships and jobs.

Rules:
- An application targets exactly one listing (internship XOR job)
- A student applies to a listing at most once (unique constraint in storage)
- Only the owning student edits the cover letter
- Only the employer owning the listing moves the status

Status lifecycle:
    applied -> shortlisted | interview | rejected
    shortlisted -> interview | hired | rejected
    interview -> hired | rejected
    hired, rejected: terminal
"""

import logging
from typing import List, Optional, Tuple

from internhub.core.auth import EmployerPrincipal, Principal, StudentPrincipal
from internhub.core.errors import AuthorizationError, ConflictError, NotFoundError, ValidationFailed
from internhub.models import Application, ApplicationStatus
from internhub.repositories import DuplicateRecordError, Repository
from internhub.schemas.schemas import ApplicationCreate, ApplicationResponse, ApplicationUpdate, StudentSummary
from internhub.services.listing_service import employer_summary

TERMINAL_STATUSES = {ApplicationStatus.hired, ApplicationStatus.rejected}

ALLOWED_TRANSITIONS = {
    ApplicationStatus.applied: {
        ApplicationStatus.shortlisted, ApplicationStatus.interview, ApplicationStatus.rejected,
    },
    ApplicationStatus.shortlisted: {
        ApplicationStatus.interview, ApplicationStatus.hired, ApplicationStatus.rejected,
    },
    ApplicationStatus.interview: {ApplicationStatus.hired, ApplicationStatus.rejected},
    ApplicationStatus.hired: set(),
    ApplicationStatus.rejected: set(),
}


def check_transition(current: ApplicationStatus, new: ApplicationStatus) -> None:
    """Raise ValidationFailed unless current -> new is a legal move (same status is a no-op)."""
    if new == current:
        return
    if current in TERMINAL_STATUSES:
        raise ValidationFailed(f"Application is already {current.value}; its status can no longer change")
    if new not in ALLOWED_TRANSITIONS[current]:
        raise ValidationFailed(f"Cannot move application from '{current.value}' to '{new.value}'")


class ApplicationService:

    def __init__(self, repo: Repository, logger: Optional[logging.Logger] = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------

    def _listing_of(self, application: Application) -> Tuple[Optional[object], Optional[str]]:
        if application.internship_id:
            return self.repo.internships.get(application.internship_id), "internship"
        if application.job_id:
            return self.repo.jobs.get(application.job_id), "job"
        return None, None

    def _get_visible(self, principal: Principal, application_id: int) -> Application:
        """Application owned by the student, or made to one of the employer's listings."""
        application = self.repo.applications.get(application_id)
        if application is None:
            raise NotFoundError("Application not found")

        if isinstance(principal, StudentPrincipal):
            if application.student_id != principal.student_id:
                raise NotFoundError("Application not found")
        elif isinstance(principal, EmployerPrincipal):
            listing, _ = self._listing_of(application)
            if listing is None or listing.employer_id != principal.employer_id:
                raise NotFoundError("Application not found")
        else:
            raise AuthorizationError("Not authorized")
        return application

    # ------------------------------------------------------------
    # operations
    # ------------------------------------------------------------

    def apply(self, student: StudentPrincipal, data: ApplicationCreate) -> Application:
        if data.internship_id and data.job_id:
            raise ValidationFailed("Cannot apply to both internship and job in the same application")
        if not data.internship_id and not data.job_id:
            raise ValidationFailed("Must apply to either an internship or a job")

        if data.internship_id:
            listing, label = self.repo.internships.get(data.internship_id), "Internship"
        else:
            listing, label = self.repo.jobs.get(data.job_id), "Job"
        if listing is None:
            raise ValidationFailed(f"{label} not found")
        if not listing.is_active:
            raise ValidationFailed(f"This {label.lower()} is no longer accepting applications")

        try:
            application = self.repo.applications.create({
                "student_id": student.student_id,
                "internship_id": data.internship_id,
                "job_id": data.job_id,
                "cover_letter": data.cover_letter,
                "status": ApplicationStatus.applied,
            })
        except DuplicateRecordError:
            self.logger.info("Duplicate application by student %s to %s %s",
                             student.student_id, label.lower(), listing.id)
            raise ConflictError("You have already applied to this opportunity")

        self.logger.info("Student %s applied to %s %s (application %s)",
                         student.student_id, label.lower(), listing.id, application.id)
        return application

    def list_for_student(self, student: StudentPrincipal) -> List[ApplicationResponse]:
        results = []
        for application in self.repo.applications.find(student_id=student.student_id):
            listing, listing_type = self._listing_of(application)
            results.append(ApplicationResponse(
                **dict(application),
                listing=listing,
                listing_type=listing_type if listing else None,
                employer=employer_summary(self.repo, listing.employer_id) if listing else None,
            ))
        return results

    def list_for_employer(self, employer: EmployerPrincipal) -> List[ApplicationResponse]:
        results = []
        listings = [
            ("internship", "internship_id", self.repo.internships.find(employer_id=employer.employer_id)),
            ("job", "job_id", self.repo.jobs.find(employer_id=employer.employer_id)),
        ]
        for listing_type, key, owned in listings:
            for listing in owned:
                for application in self.repo.applications.find(**{key: listing.id}):
                    results.append(ApplicationResponse(
                        **dict(application),
                        listing=listing,
                        listing_type=listing_type,
                        student=self._student_summary(application.student_id),
                    ))
        return results

    def _student_summary(self, student_id: int) -> Optional[StudentSummary]:
        profile = self.repo.student_profiles.get(student_id)
        if profile is None:
            return None
        user = self.repo.users.get(profile.user_id)
        return StudentSummary(
            **dict(profile),
            first_name=user.first_name if user else None,
            last_name=user.last_name if user else None,
            email=user.email if user else None,
        )

    def update(self, principal: Principal, application_id: int, data: ApplicationUpdate) -> Application:
        application = self._get_visible(principal, application_id)
        sent = data.model_fields_set

        if isinstance(principal, StudentPrincipal):
            if "status" in sent:
                raise AuthorizationError("Students cannot change the application status")
            if "cover_letter" not in sent:
                return application
            changes = {"cover_letter": data.cover_letter}
        else:
            if "cover_letter" in sent:
                raise AuthorizationError("Employers cannot edit the cover letter")
            if data.status is None:
                raise ValidationFailed("Status is required")
            check_transition(application.status, data.status)
            changes = {"status": data.status}

        updated = self.repo.applications.update(application.id, changes)
        if updated is None:
            raise NotFoundError("Application not found")
        if "status" in changes and updated.status != application.status:
            self.logger.info("Application %s moved %s -> %s by employer %s", application.id,
                             application.status.value, updated.status.value, principal.employer_id)
        return updated

    def withdraw(self, student: StudentPrincipal, application_id: int) -> None:
        application = self._get_visible(student, application_id)
        self.repo.applications.delete(application.id)
        self.logger.info("Student %s withdrew application %s", student.student_id, application.id)
