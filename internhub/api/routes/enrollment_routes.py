"""
Enrollment Routes (student only)

POST /enrollments - Enroll in a course
GET /enrollments - Own enrollments with course details
PUT /enrollments/{enrollment_id} - Update payment reference / status
PUT /enrollments/{enrollment_id}/progress - Record course progress
DELETE /enrollments/{enrollment_id} - Cancel enrollment
"""

from typing import List

from fastapi import APIRouter, Depends

from internhub.core.auth import StudentPrincipal, get_current_student, get_repository
from internhub.models import Enrollment
from internhub.repositories import Repository
from internhub.schemas.schemas import (
    EnrollmentCreate, EnrollmentResponse, EnrollmentUpdate, MessageResponse, ProgressUpdate,
)
from internhub.services.enrollment_service import EnrollmentService

router = APIRouter(prefix="/enrollments", tags=["Enrollments"])


@router.post("", response_model=Enrollment, status_code=201)
async def enroll(
    data: EnrollmentCreate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return EnrollmentService(repo).enroll(student, data)


@router.get("", response_model=List[EnrollmentResponse])
async def list_enrollments(
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return EnrollmentService(repo).list_for_student(student)


@router.put("/{enrollment_id}", response_model=Enrollment)
async def update_enrollment(
    enrollment_id: int,
    data: EnrollmentUpdate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    return EnrollmentService(repo).update(student, enrollment_id, data)


@router.put("/{enrollment_id}/progress", response_model=Enrollment)
async def update_progress(
    enrollment_id: int,
    data: ProgressUpdate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    """Progress is clamped to 0-100 and can only go up."""
    return EnrollmentService(repo).update_progress(student, enrollment_id, data.progress_percentage)


@router.delete("/{enrollment_id}", response_model=MessageResponse)
async def cancel_enrollment(
    enrollment_id: int,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    EnrollmentService(repo).cancel(student, enrollment_id)
    return MessageResponse(message="Enrollment cancelled")
