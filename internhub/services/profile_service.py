"""
Profile Service - the caller's own user, role profile and profile children.
"""

import logging
from typing import Optional

from internhub.core.auth import Principal, StudentPrincipal
from internhub.core.errors import NotFoundError
from internhub.models import User
from internhub.repositories import Collection, Repository
from internhub.schemas.schemas import (
    CamelModel, EmployerProfileUpdate, ProfileResponse, StudentProfileUpdate,
    UserDetailResponse, UserUpdate,
)

# URL segment -> (collection attribute, label used in 404 messages)
CHILD_KINDS = {
    "skills": ("skills", "Skill"),
    "experiences": ("experiences", "Experience"),
    "educations": ("educations", "Education"),
}


class ProfileService:

    def __init__(self, repo: Repository, logger: Optional[logging.Logger] = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    def get_profile(self, principal: Principal) -> ProfileResponse:
        user = UserDetailResponse.model_validate(principal.user, from_attributes=True)
        if isinstance(principal, StudentPrincipal):
            student_id = principal.student_id
            return ProfileResponse(
                user=user,
                profile=self.repo.student_profiles.get(student_id),
                skills=self.repo.skills.find(student_id=student_id),
                experiences=self.repo.experiences.find(student_id=student_id),
                educations=self.repo.educations.find(student_id=student_id),
            )
        profile = self.repo.employer_profiles.first(user_id=principal.user.id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return ProfileResponse(user=user, profile=profile)

    def update_user(self, user: User, data: UserUpdate) -> User:
        changes = data.changes()
        if not changes:
            return user
        updated = self.repo.users.update(user.id, changes)
        if updated is None:
            raise NotFoundError("User not found")
        return updated

    def update_student_profile(self, student_id: int, data: StudentProfileUpdate):
        return self._update(self.repo.student_profiles, student_id, data, "Student profile")

    def update_employer_profile(self, employer_id: int, data: EmployerProfileUpdate):
        return self._update(self.repo.employer_profiles, employer_id, data, "Employer profile")

    def _update(self, collection: Collection, record_id: int, data: CamelModel, label: str):
        changes = data.changes()
        record = collection.update(record_id, changes) if changes else collection.get(record_id)
        if record is None:
            raise NotFoundError(f"{label} not found")
        return record

    # ------------------------------------------------------------
    # skills / experiences / educations
    # ------------------------------------------------------------

    def _children(self, kind: str):
        attribute, label = CHILD_KINDS[kind]
        return getattr(self.repo, attribute), label

    def _get_owned_child(self, kind: str, student_id: int, child_id: int):
        collection, label = self._children(kind)
        record = collection.get(child_id)
        if record is None or record.student_id != student_id:
            raise NotFoundError(f"{label} not found")
        return collection, record

    def add_child(self, kind: str, student_id: int, data: CamelModel):
        collection, label = self._children(kind)
        record = collection.create({**data.model_dump(), "student_id": student_id})
        self.logger.debug("Added %s %s for student %s", label.lower(), record.id, student_id)
        return record

    def update_child(self, kind: str, student_id: int, child_id: int, data: CamelModel):
        collection, record = self._get_owned_child(kind, student_id, child_id)
        changes = data.changes()
        if not changes:
            return record
        return collection.update(record.id, changes)

    def delete_child(self, kind: str, student_id: int, child_id: int) -> None:
        collection, record = self._get_owned_child(kind, student_id, child_id)
        collection.delete(record.id)
