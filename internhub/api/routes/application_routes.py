"""
Application Routes

POST /applications - Apply to an internship or job (student only)
GET /applications - Student: own applications. Employer: applications to own listings
PUT /applications/{application_id} - Student edits cover letter, employer moves status
DELETE /applications/{application_id} - Withdraw (owning student only)
"""

from typing import List

from fastapi import APIRouter, Depends

from internhub.core.auth import (
    EmployerPrincipal, Principal, StudentPrincipal, get_current_principal, get_current_student,
    get_repository,
)
from internhub.core.errors import AuthorizationError
from internhub.models import Application
from internhub.repositories import Repository
from internhub.schemas.schemas import (
    ApplicationCreate, ApplicationResponse, ApplicationUpdate, MessageResponse,
)
from internhub.services.application_service import ApplicationService

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.post("", response_model=Application, status_code=201)
async def apply(
    data: ApplicationCreate,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    """
    Apply to exactly one listing.

    Sending both internshipId and jobId, neither, an unknown id or an
    inactive listing is rejected with 400, as is a second application to
    the same listing.
    """
    return ApplicationService(repo).apply(student, data)


@router.get("", response_model=List[ApplicationResponse])
async def list_applications(
    principal: Principal = Depends(get_current_principal),
    repo: Repository = Depends(get_repository),
):
    service = ApplicationService(repo)
    if isinstance(principal, StudentPrincipal):
        return service.list_for_student(principal)
    if isinstance(principal, EmployerPrincipal):
        return service.list_for_employer(principal)
    raise AuthorizationError("Not authorized")


@router.put("/{application_id}", response_model=Application)
async def update_application(
    application_id: int,
    data: ApplicationUpdate,
    principal: Principal = Depends(get_current_principal),
    repo: Repository = Depends(get_repository),
):
    return ApplicationService(repo).update(principal, application_id, data)


@router.delete("/{application_id}", response_model=MessageResponse)
async def withdraw_application(
    application_id: int,
    student: StudentPrincipal = Depends(get_current_student),
    repo: Repository = Depends(get_repository),
):
    ApplicationService(repo).withdraw(student, application_id)
    return MessageResponse(message="Application withdrawn")
