"""
Employer Routes

GET /employer/listings - The caller's internships and jobs, inactive ones included
"""

from fastapi import APIRouter, Depends

from internhub.core.auth import EmployerPrincipal, get_current_employer, get_repository
from internhub.repositories import Repository
from internhub.schemas.schemas import EmployerListingsResponse

router = APIRouter(prefix="/employer", tags=["Employer"])


@router.get("/listings", response_model=EmployerListingsResponse)
async def get_my_listings(
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    return EmployerListingsResponse(
        internships=repo.internships.find(employer_id=employer.employer_id),
        jobs=repo.jobs.find(employer_id=employer.employer_id),
    )
