"""
Account Service - registration, login and account deletion.

Registration writes the user and then its role profile. The two writes are
not atomic: if the profile insert fails the user row stays behind.
"""

import logging
from typing import Optional

from internhub.core.auth import CredentialStrategy, hash_password
from internhub.core.errors import AuthenticationError, ConflictError
from internhub.models import User, UserRole
from internhub.repositories import DuplicateRecordError, Repository
from internhub.schemas.schemas import RegisterRequest
from internhub.services.listing_service import delete_listing


def default_company_name(first_name: str) -> str:
    return f"{first_name}'s Company"


class AccountService:

    def __init__(self, repo: Repository, logger: Optional[logging.Logger] = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    def register(self, data: RegisterRequest) -> User:
        email = data.email.lower()
        if self.repo.users.first(email=email) is not None:
            self.logger.warning("Registration rejected, email already in use: %s", email)
            raise ConflictError("Email already in use")

        try:
            user = self.repo.users.create({
                "email": email,
                "password_hash": hash_password(data.password),
                "first_name": data.first_name,
                "last_name": data.last_name,
                "user_type": data.user_type,
                "languages": [],
            })
        except DuplicateRecordError:
            raise ConflictError("Email already in use")

        if user.user_type == UserRole.student:
            self.repo.student_profiles.create({"user_id": user.id, "interests": []})
        else:
            self.repo.employer_profiles.create({
                "user_id": user.id,
                "company_name": default_company_name(user.first_name),
            })

        self.logger.info("Registered %s user %s (%s)", user.user_type.value, user.id, email)
        return user

    def authenticate(self, strategy: CredentialStrategy, email: str, password: str) -> User:
        user = strategy.authenticate(self.repo, email.lower(), password)
        if user is None:
            self.logger.warning("Failed login for %s", email)
            raise AuthenticationError("Incorrect email or password")
        self.logger.info("User %s logged in", user.id)
        return user

    # ------------------------------------------------------------
    # deletion
    # ------------------------------------------------------------

    def delete_account(self, user: User) -> None:
        """
        Delete the user and everything hanging off it.

        Student: skills, experiences, educations, applications, enrollments.
        Employer: internships and jobs with their applications.
        Then the profile, every session and the user row.
        """
        student = self.repo.student_profiles.first(user_id=user.id)
        if student is not None:
            self._delete_student_data(student.id)
            self.repo.student_profiles.delete(student.id)

        employer = self.repo.employer_profiles.first(user_id=user.id)
        if employer is not None:
            for listings in (self.repo.internships, self.repo.jobs):
                for listing in listings.find(employer_id=employer.id):
                    delete_listing(self.repo, listings, listing.id)
            self.repo.employer_profiles.delete(employer.id)

        for session in self.repo.sessions.find(user_id=user.id):
            self.repo.sessions.delete(session.id)
        self.repo.users.delete(user.id)
        self.logger.info("Deleted account %s", user.id)

    def _delete_student_data(self, student_id: int) -> None:
        owned = (
            self.repo.skills,
            self.repo.experiences,
            self.repo.educations,
            self.repo.applications,
            self.repo.enrollments,
        )
        for collection in owned:
            for record in collection.find(student_id=student_id):
                collection.delete(record.id)
