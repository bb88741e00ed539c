"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Wire names are camelCase; Python attributes stay snake_case.
"""

from datetime import date
from typing import ClassVar, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from internhub.models import (
    Application, ApplicationStatus, Course, CourseType, Education, EmployerProfile,
    Enrollment, Experience, Internship, Job, PaymentStatus, Skill, StudentProfile,
    UserRole,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self) -> dict:
        """Fields the client actually sent. An explicit null clears the field."""
        return self.model_dump(exclude_unset=True)


class PartialUpdate(CamelModel):
    """PUT body where omitted fields are left alone.

    Fields listed in ``not_nullable`` back non-optional record fields, so
    they may be omitted but never sent as null.
    """

    not_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        nulls = [
            to_camel(name) for name in self.not_nullable
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    user_type: UserRole

    @field_validator("user_type")
    @classmethod
    def no_self_service_admins(cls, value: UserRole) -> UserRole:
        if value == UserRole.admin:
            raise ValueError("userType must be 'student' or 'employer'")
        return value


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    user_type: UserRole


class UserDetailResponse(UserResponse):
    profile_picture: Optional[str] = None
    contact_number: Optional[str] = None
    current_city: Optional[str] = None
    gender: Optional[str] = None
    languages: List[str] = []


class UserUpdate(PartialUpdate):
    not_nullable = ("first_name", "last_name", "languages")

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    profile_picture: Optional[str] = None
    contact_number: Optional[str] = None
    current_city: Optional[str] = None
    gender: Optional[str] = None
    languages: Optional[List[str]] = None


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class StudentProfileUpdate(PartialUpdate):
    not_nullable = ("interests",)

    education_level: Optional[str] = None
    institution: Optional[str] = None
    graduation_year: Optional[int] = Field(None, ge=1950, le=2100)
    student_type: Optional[str] = None
    career_objective: Optional[str] = None
    resume_url: Optional[str] = None
    interests: Optional[List[str]] = None


class EmployerProfileUpdate(PartialUpdate):
    not_nullable = ("company_name",)

    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    company_logo: Optional[str] = None
    company_website: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None


class ProfileResponse(CamelModel):
    user: UserDetailResponse
    profile: Union[EmployerProfile, StudentProfile]
    skills: Optional[List[Skill]] = None
    experiences: Optional[List[Experience]] = None
    educations: Optional[List[Education]] = None


class SkillCreate(CamelModel):
    skill_name: str = Field(..., min_length=1, max_length=100)
    proficiency: Optional[Literal["beginner", "intermediate", "expert"]] = None


class SkillUpdate(PartialUpdate):
    not_nullable = ("skill_name",)

    skill_name: Optional[str] = Field(None, min_length=1, max_length=100)
    proficiency: Optional[Literal["beginner", "intermediate", "expert"]] = None


class ExperienceCreate(CamelModel):
    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    description: Optional[str] = None
    type: Optional[Literal["job", "internship", "project"]] = None


class ExperienceUpdate(PartialUpdate):
    not_nullable = ("title", "company", "is_current")

    title: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: Optional[bool] = None
    description: Optional[str] = None
    type: Optional[Literal["job", "internship", "project"]] = None


class EducationCreate(CamelModel):
    degree: str = Field(..., min_length=1)
    institution: str = Field(..., min_length=1)
    start_year: Optional[int] = Field(None, ge=1950, le=2100)
    end_year: Optional[int] = Field(None, ge=1950, le=2100)
    grade: Optional[str] = None
    description: Optional[str] = None


class EducationUpdate(PartialUpdate):
    not_nullable = ("degree", "institution")

    degree: Optional[str] = Field(None, min_length=1)
    institution: Optional[str] = Field(None, min_length=1)
    start_year: Optional[int] = Field(None, ge=1950, le=2100)
    end_year: Optional[int] = Field(None, ge=1950, le=2100)
    grade: Optional[str] = None
    description: Optional[str] = None


# ============================================================
# LISTING SCHEMAS
# ============================================================

class EmployerSummary(CamelModel):
    id: int
    company_name: str
    company_logo: Optional[str] = None


class InternshipCreate(CamelModel):
    title: str = Field(..., min_length=3, max_length=255)
    description: str = Field(..., min_length=1)
    location: Optional[str] = None
    is_remote: bool = False
    is_part_time: bool = False
    stipend_amount: Optional[int] = Field(None, ge=0)
    stipend_currency: str = "INR"
    duration_months: int = Field(..., ge=1)
    start_date: Optional[date] = None
    application_deadline: Optional[date] = None
    skills_required: List[str] = []
    responsibilities: List[str] = []
    perks: List[str] = []
    job_offer_possibility: bool = False
    is_active: bool = True


class InternshipUpdate(PartialUpdate):
    not_nullable = (
        "title", "description", "is_remote", "is_part_time", "stipend_currency", "duration_months",
        "skills_required", "responsibilities", "perks", "job_offer_possibility", "is_active",
    )

    title: Optional[str] = Field(None, min_length=3, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    is_remote: Optional[bool] = None
    is_part_time: Optional[bool] = None
    stipend_amount: Optional[int] = Field(None, ge=0)
    stipend_currency: Optional[str] = None
    duration_months: Optional[int] = Field(None, ge=1)
    start_date: Optional[date] = None
    application_deadline: Optional[date] = None
    skills_required: Optional[List[str]] = None
    responsibilities: Optional[List[str]] = None
    perks: Optional[List[str]] = None
    job_offer_possibility: Optional[bool] = None
    is_active: Optional[bool] = None


class InternshipResponse(Internship):
    employer: Optional[EmployerSummary] = None


class JobCreate(CamelModel):
    title: str = Field(..., min_length=3, max_length=255)
    description: str = Field(..., min_length=1)
    location: Optional[str] = None
    is_remote: bool = False
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: str = "INR"
    experience_required_years: Optional[int] = Field(None, ge=0)
    is_fresher_job: bool = False
    skills_required: List[str] = []
    responsibilities: List[str] = []
    application_deadline: Optional[date] = None
    is_active: bool = True


class JobUpdate(PartialUpdate):
    not_nullable = (
        "title", "description", "is_remote", "salary_currency", "is_fresher_job",
        "skills_required", "responsibilities", "is_active",
    )

    title: Optional[str] = Field(None, min_length=3, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    is_remote: Optional[bool] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: Optional[str] = None
    experience_required_years: Optional[int] = Field(None, ge=0)
    is_fresher_job: Optional[bool] = None
    skills_required: Optional[List[str]] = None
    responsibilities: Optional[List[str]] = None
    application_deadline: Optional[date] = None
    is_active: Optional[bool] = None


class JobResponse(Job):
    employer: Optional[EmployerSummary] = None


class EmployerListingsResponse(CamelModel):
    internships: List[Internship]
    jobs: List[Job]


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(CamelModel):
    internship_id: Optional[int] = None
    job_id: Optional[int] = None
    cover_letter: Optional[str] = None


class ApplicationUpdate(CamelModel):
    cover_letter: Optional[str] = None
    status: Optional[ApplicationStatus] = None


class StudentSummary(StudentProfile):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class ApplicationResponse(Application):
    listing: Optional[Union[Internship, Job]] = None
    listing_type: Optional[Literal["internship", "job"]] = None
    employer: Optional[EmployerSummary] = None
    student: Optional[StudentSummary] = None


# ============================================================
# COURSE & ENROLLMENT SCHEMAS
# ============================================================

class CourseCreate(CamelModel):
    title: str = Field(..., min_length=3, max_length=255)
    description: str = Field(..., min_length=1)
    course_type: CourseType
    duration_weeks: int = Field(..., ge=1)
    price: int = Field(..., ge=0)
    discount_percentage: int = Field(0, ge=0, le=100)
    rating: Optional[int] = Field(None, ge=1, le=5)
    learner_count: int = Field(0, ge=0)
    placement_guarantee: bool = False
    placement_salary_min: Optional[int] = Field(None, ge=0)
    placement_salary_max: Optional[int] = Field(None, ge=0)
    placement_type: Optional[Literal["job", "internship"]] = None
    placement_stipend: Optional[int] = Field(None, ge=0)
    category: str = Field(..., min_length=1)
    thumbnail: Optional[str] = None


class CourseUpdate(PartialUpdate):
    not_nullable = (
        "title", "description", "course_type", "duration_weeks", "price", "discount_percentage",
        "learner_count", "placement_guarantee", "category",
    )

    title: Optional[str] = Field(None, min_length=3, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    course_type: Optional[CourseType] = None
    duration_weeks: Optional[int] = Field(None, ge=1)
    price: Optional[int] = Field(None, ge=0)
    discount_percentage: Optional[int] = Field(None, ge=0, le=100)
    rating: Optional[int] = Field(None, ge=1, le=5)
    learner_count: Optional[int] = Field(None, ge=0)
    placement_guarantee: Optional[bool] = None
    placement_salary_min: Optional[int] = Field(None, ge=0)
    placement_salary_max: Optional[int] = Field(None, ge=0)
    placement_type: Optional[Literal["job", "internship"]] = None
    placement_stipend: Optional[int] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    thumbnail: Optional[str] = None


class EnrollmentCreate(CamelModel):
    course_id: int
    payment_id: Optional[str] = None


class EnrollmentUpdate(PartialUpdate):
    not_nullable = ("payment_status",)

    payment_id: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None


class ProgressUpdate(CamelModel):
    progress_percentage: int


class EnrollmentResponse(Enrollment):
    course: Optional[Course] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
