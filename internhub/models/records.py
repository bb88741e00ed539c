"""
Domain records returned by the repository.

Both storage backends hand back these pydantic models, so route handlers
never see ORM rows or backend-specific objects. Field names are snake_case
in Python and camelCase on the wire.
"""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    employer = "employer"
    admin = "admin"


class ApplicationStatus(str, Enum):
    applied = "applied"
    shortlisted = "shortlisted"
    interview = "interview"
    hired = "hired"
    rejected = "rejected"


class CourseType(str, Enum):
    certification = "certification"
    placement_guarantee = "placement_guarantee"


class PaymentStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    failed = "failed"
    refunded = "refunded"


class Record(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int


# ============================================================
# USERS & PROFILES
# ============================================================

class User(Record):
    email: str
    password_hash: str = Field(exclude=True)
    first_name: str
    last_name: str
    user_type: UserRole
    profile_picture: Optional[str] = None
    contact_number: Optional[str] = None
    current_city: Optional[str] = None
    gender: Optional[str] = None
    languages: List[str] = []
    created_at: Optional[datetime] = None


class StudentProfile(Record):
    user_id: int
    education_level: Optional[str] = None
    institution: Optional[str] = None
    graduation_year: Optional[int] = None
    student_type: Optional[str] = None
    career_objective: Optional[str] = None
    resume_url: Optional[str] = None
    interests: List[str] = []
    created_at: Optional[datetime] = None


class EmployerProfile(Record):
    user_id: int
    company_name: str
    company_logo: Optional[str] = None
    company_website: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    created_at: Optional[datetime] = None


class Skill(Record):
    student_id: int
    skill_name: str
    proficiency: Optional[str] = None
    created_at: Optional[datetime] = None


class Experience(Record):
    student_id: int
    title: str
    company: str
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    description: Optional[str] = None
    type: Optional[str] = None
    created_at: Optional[datetime] = None


class Education(Record):
    student_id: int
    degree: str
    institution: str
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    grade: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None


# ============================================================
# LISTINGS
# ============================================================

class Internship(Record):
    employer_id: int
    title: str
    description: str
    location: Optional[str] = None
    is_remote: bool = False
    is_part_time: bool = False
    stipend_amount: Optional[int] = None
    stipend_currency: str = "INR"
    duration_months: int
    start_date: Optional[date] = None
    application_deadline: Optional[date] = None
    skills_required: List[str] = []
    responsibilities: List[str] = []
    perks: List[str] = []
    job_offer_possibility: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None


class Job(Record):
    employer_id: int
    title: str
    description: str
    location: Optional[str] = None
    is_remote: bool = False
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: str = "INR"
    experience_required_years: Optional[int] = None
    is_fresher_job: bool = False
    skills_required: List[str] = []
    responsibilities: List[str] = []
    application_deadline: Optional[date] = None
    is_active: bool = True
    created_at: Optional[datetime] = None


class Application(Record):
    student_id: int
    internship_id: Optional[int] = None
    job_id: Optional[int] = None
    cover_letter: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.applied
    application_date: Optional[datetime] = None


# ============================================================
# COURSES
# ============================================================

class Course(Record):
    title: str
    description: str
    course_type: CourseType
    duration_weeks: int
    price: int
    discount_percentage: int = 0
    rating: Optional[int] = None
    learner_count: int = 0
    placement_guarantee: bool = False
    placement_salary_min: Optional[int] = None
    placement_salary_max: Optional[int] = None
    placement_type: Optional[str] = None
    placement_stipend: Optional[int] = None
    category: str
    thumbnail: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def effective_price(self) -> float:
        return self.price * (100 - (self.discount_percentage or 0)) / 100


class Enrollment(Record):
    student_id: int
    course_id: int
    payment_id: Optional[str] = None
    payment_status: PaymentStatus = PaymentStatus.pending
    enrollment_date: Optional[datetime] = None
    completion_date: Optional[datetime] = None
    certificate_url: Optional[str] = None
    progress_percentage: int = 0


# ============================================================
# SESSIONS
# ============================================================

class UserSession(Record):
    user_id: int
    expires_at: datetime
    created_at: Optional[datetime] = None
