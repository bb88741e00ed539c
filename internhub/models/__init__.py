"""
Models module - domain records shared by both repository backends.

These models are used for:
- Repository return values
- Response serialization (camelCase aliases)
"""

from internhub.models.records import (
    ApplicationStatus,
    CourseType,
    PaymentStatus,
    UserRole,
    Application,
    Course,
    Education,
    EmployerProfile,
    Enrollment,
    Experience,
    Internship,
    Job,
    Record,
    Skill,
    StudentProfile,
    User,
    UserSession,
)

__all__ = [
    "ApplicationStatus",
    "CourseType",
    "PaymentStatus",
    "UserRole",
    "Application",
    "Course",
    "Education",
    "EmployerProfile",
    "Enrollment",
    "Experience",
    "Internship",
    "Job",
    "Record",
    "Skill",
    "StudentProfile",
    "User",
    "UserSession",
]
