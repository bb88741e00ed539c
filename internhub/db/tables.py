"""
Relational schema.

Unique constraints carry the marketplace invariants (one account per email,
one application per student and listing, one enrollment per student and
course) so duplicate protection is a single conditional insert.
"""

from sqlalchemy import (
    JSON, Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class UserRow(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    user_type = Column(String(20), nullable=False)
    profile_picture = Column(Text)
    contact_number = Column(String(32))
    current_city = Column(String(100))
    gender = Column(String(32))
    languages = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime)


class StudentProfileRow(Base):
    __tablename__ = "student_profiles"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    education_level = Column(String(100))
    institution = Column(String(255))
    graduation_year = Column(Integer)
    student_type = Column(String(100))
    career_objective = Column(Text)
    resume_url = Column(Text)
    interests = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime)


class EmployerProfileRow(Base):
    __tablename__ = "employer_profiles"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    company_name = Column(String(255), nullable=False)
    company_logo = Column(Text)
    company_website = Column(Text)
    industry = Column(String(100))
    company_size = Column(String(50))
    created_at = Column(DateTime)


class SkillRow(Base):
    __tablename__ = "skills"
    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("student_profiles.id"), nullable=False, index=True)
    skill_name = Column(String(100), nullable=False)
    proficiency = Column(String(50))
    created_at = Column(DateTime)


class ExperienceRow(Base):
    __tablename__ = "experiences"
    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("student_profiles.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    location = Column(String(255))
    start_date = Column(Date)
    end_date = Column(Date)
    is_current = Column(Boolean, nullable=False, default=False)
    description = Column(Text)
    type = Column(String(50))
    created_at = Column(DateTime)


class EducationRow(Base):
    __tablename__ = "educations"
    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("student_profiles.id"), nullable=False, index=True)
    degree = Column(String(255), nullable=False)
    institution = Column(String(255), nullable=False)
    start_year = Column(Integer)
    end_year = Column(Integer)
    grade = Column(String(50))
    description = Column(Text)
    created_at = Column(DateTime)


class InternshipRow(Base):
    __tablename__ = "internships"
    id = Column(Integer, primary_key=True)
    employer_id = Column(Integer, ForeignKey("employer_profiles.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255))
    is_remote = Column(Boolean, nullable=False, default=False)
    is_part_time = Column(Boolean, nullable=False, default=False)
    stipend_amount = Column(Integer)
    stipend_currency = Column(String(8), nullable=False, default="INR")
    duration_months = Column(Integer, nullable=False)
    start_date = Column(Date)
    application_deadline = Column(Date)
    skills_required = Column(JSON, nullable=False, default=list)
    responsibilities = Column(JSON, nullable=False, default=list)
    perks = Column(JSON, nullable=False, default=list)
    job_offer_possibility = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime)


class JobRow(Base):
    __tablename__ = "jobs"
    id = Column(Integer, primary_key=True)
    employer_id = Column(Integer, ForeignKey("employer_profiles.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255))
    is_remote = Column(Boolean, nullable=False, default=False)
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    salary_currency = Column(String(8), nullable=False, default="INR")
    experience_required_years = Column(Integer)
    is_fresher_job = Column(Boolean, nullable=False, default=False)
    skills_required = Column(JSON, nullable=False, default=list)
    responsibilities = Column(JSON, nullable=False, default=list)
    application_deadline = Column(Date)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime)


class ApplicationRow(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("student_id", "internship_id", name="uq_application_student_internship"),
        UniqueConstraint("student_id", "job_id", name="uq_application_student_job"),
    )
    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("student_profiles.id"), nullable=False, index=True)
    internship_id = Column(Integer, ForeignKey("internships.id"), index=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), index=True)
    cover_letter = Column(Text)
    status = Column(String(20), nullable=False, default="applied")
    application_date = Column(DateTime)


class CourseRow(Base):
    __tablename__ = "courses"
    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    course_type = Column(String(32), nullable=False, index=True)
    duration_weeks = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    discount_percentage = Column(Integer, nullable=False, default=0)
    rating = Column(Integer)
    learner_count = Column(Integer, nullable=False, default=0)
    placement_guarantee = Column(Boolean, nullable=False, default=False)
    placement_salary_min = Column(Integer)
    placement_salary_max = Column(Integer)
    placement_type = Column(String(32))
    placement_stipend = Column(Integer)
    category = Column(String(100), nullable=False)
    thumbnail = Column(Text)
    created_at = Column(DateTime)


class EnrollmentRow(Base):
    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("student_id", "course_id", name="uq_enrollment_student_course"),
    )
    id = Column(Integer, primary_key=True)
    student_id = Column(Integer, ForeignKey("student_profiles.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    payment_id = Column(String(255))
    payment_status = Column(String(20), nullable=False, default="pending")
    enrollment_date = Column(DateTime)
    completion_date = Column(DateTime)
    certificate_url = Column(Text)
    progress_percentage = Column(Integer, nullable=False, default=0)


class SessionRow(Base):
    __tablename__ = "sessions"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime)
