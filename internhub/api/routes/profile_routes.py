"""
Profile Routes

GET /profile - User plus role profile (and skills, experiences, educations for students)
PUT /profile - Update basic user fields
DELETE /profile - Delete the account and everything it owns
GET/PUT /profile/student - Student profile
GET/PUT /profile/employer - Employer profile
POST /profile/{kind} - Add a skill, experience or education
PUT/DELETE /profile/{kind}/{item_id} - Edit or remove one
"""

from fastapi import APIRouter, Depends, Response

from internhub.core.auth import (
    EmployerPrincipal, Principal, StudentPrincipal, get_current_employer, get_current_principal,
    get_current_student, get_current_user, get_repository, settings,
)
from internhub.models import Education, EmployerProfile, Experience, Skill, StudentProfile, User
from internhub.repositories import Repository
from internhub.schemas.schemas import (
    EducationCreate, EducationUpdate, EmployerProfileUpdate, ExperienceCreate, ExperienceUpdate,
    MessageResponse, ProfileResponse, SkillCreate, SkillUpdate, StudentProfileUpdate,
    UserDetailResponse, UserUpdate,
)
from internhub.services.account_service import AccountService
from internhub.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(
    principal: Principal = Depends(get_current_principal),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).get_profile(principal)


@router.put("", response_model=UserDetailResponse)
async def update_user(
    data: UserUpdate,
    user: User = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
):
    """Update name, picture, contact details and languages. Email and role are fixed."""
    updated = ProfileService(repo).update_user(user, data)
    return UserDetailResponse.model_validate(updated, from_attributes=True)


@router.delete("", response_model=MessageResponse)
async def delete_account(
    response: Response,
    user: User = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
):
    AccountService(repo).delete_account(user)
    response.delete_cookie(settings.session_cookie_name, httponly=True, samesite="lax")
    return MessageResponse(message="Account deleted")


# ============================================================
# ROLE PROFILES
# ============================================================

@router.get("/student", response_model=StudentProfile)
async def get_student_profile(
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return repo.student_profiles.get(student.student_id)


@router.put("/student", response_model=StudentProfile)
async def update_student_profile(
    data: StudentProfileUpdate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).update_student_profile(student.student_id, data)


@router.get("/employer", response_model=EmployerProfile)
async def get_employer_profile(
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    return repo.employer_profiles.get(employer.employer_id)


@router.put("/employer", response_model=EmployerProfile)
async def update_employer_profile(
    data: EmployerProfileUpdate,
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).update_employer_profile(employer.employer_id, data)


# ============================================================
# SKILLS / EXPERIENCES / EDUCATIONS
# ============================================================

@router.post("/skills", response_model=Skill, status_code=201)
async def add_skill(
    data: SkillCreate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).add_child("skills", student.student_id, data)


@router.put("/skills/{item_id}", response_model=Skill)
async def update_skill(
    item_id: int,
    data: SkillUpdate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).update_child("skills", student.student_id, item_id, data)


@router.delete("/skills/{item_id}", response_model=MessageResponse)
async def delete_skill(
    item_id: int,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    ProfileService(repo).delete_child("skills", student.student_id, item_id)
    return MessageResponse(message="Skill deleted")


@router.post("/experiences", response_model=Experience, status_code=201)
async def add_experience(
    data: ExperienceCreate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).add_child("experiences", student.student_id, data)


@router.put("/experiences/{item_id}", response_model=Experience)
async def update_experience(
    item_id: int,
    data: ExperienceUpdate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).update_child("experiences", student.student_id, item_id, data)


@router.delete("/experiences/{item_id}", response_model=MessageResponse)
async def delete_experience(
    item_id: int,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    ProfileService(repo).delete_child("experiences", student.student_id, item_id)
    return MessageResponse(message="Experience deleted")


@router.post("/educations", response_model=Education, status_code=201)
async def add_education(
    data: EducationCreate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).add_child("educations", student.student_id, data)


@router.put("/educations/{item_id}", response_model=Education)
async def update_education(
    item_id: int,
    data: EducationUpdate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return ProfileService(repo).update_child("educations", student.student_id, item_id, data)


@router.delete("/educations/{item_id}", response_model=MessageResponse)
async def delete_education(
    item_id: int,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    ProfileService(repo).delete_child("educations", student.student_id, item_id)
    return MessageResponse(message="Education deleted")
