"""
Internship Routes

GET /internships - List active internships with filters
GET /internships/{internship_id} - Get internship details
POST /internships - Create internship (employer only)
PUT /internships/{internship_id} - Update internship (owning employer only)
DELETE /internships/{internship_id} - Delete internship and its applications (owning employer only)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from internhub.core.auth import EmployerPrincipal, get_current_employer, get_repository
from internhub.core.errors import NotFoundError
from internhub.repositories import Repository
from internhub.schemas.schemas import InternshipCreate, InternshipResponse, InternshipUpdate, MessageResponse
from internhub.services.listing_filter import InternshipFilters, filter_internships, parse_skills
from internhub.services.listing_service import delete_listing, get_owned_listing, with_employer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/internships", tags=["Internships"])


@router.get("", response_model=List[InternshipResponse])
async def list_internships(
    location: Optional[str] = Query(None),
    is_remote: Optional[bool] = Query(None, alias="isRemote"),
    is_part_time: Optional[bool] = Query(None, alias="isPartTime"),
    job_offer_possibility: Optional[bool] = Query(None, alias="jobOfferPossibility"),
    min_stipend: Optional[int] = Query(None, alias="minStipend", ge=0),
    duration_months: Optional[int] = Query(None, alias="durationMonths", ge=1),
    skills: Optional[str] = Query(None, description="Comma-separated skill names"),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    include_inactive: bool = Query(False, alias="includeInactive"),
    repo: Repository = Depends(get_repository),
):
    """List internships in creation order, narrowed by the given filters."""
    filters = InternshipFilters(
        location=location,
        is_remote=is_remote,
        is_part_time=is_part_time,
        job_offer_possibility=job_offer_possibility,
        min_stipend=min_stipend,
        duration_months=duration_months,
        skills=tuple(parse_skills(skills)),
        search_query=search_query,
    )
    listings = repo.internships.find(is_active=None if include_inactive else True)
    enriched = [with_employer(repo, internship, InternshipResponse) for internship in listings]
    return filter_internships(enriched, filters)


@router.get("/{internship_id}", response_model=InternshipResponse)
async def get_internship(internship_id: int, repo: Repository = Depends(get_repository)):
    internship = repo.internships.get(internship_id)
    if internship is None:
        raise NotFoundError("Internship not found")
    return with_employer(repo, internship, InternshipResponse)


@router.post("", response_model=InternshipResponse, status_code=201)
async def create_internship(
    data: InternshipCreate,
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    """Create an internship owned by the calling employer."""
    internship = repo.internships.create({**data.model_dump(), "employer_id": employer.employer_id})
    logger.info("Employer %s created internship %s", employer.employer_id, internship.id)
    return with_employer(repo, internship, InternshipResponse)


@router.put("/{internship_id}", response_model=InternshipResponse)
async def update_internship(
    internship_id: int,
    data: InternshipUpdate,
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    internship = get_owned_listing(repo.internships, internship_id, employer.employer_id, "Internship")
    changes = data.changes()
    if changes:
        internship = repo.internships.update(internship.id, changes)
    return with_employer(repo, internship, InternshipResponse)


@router.delete("/{internship_id}", response_model=MessageResponse)
async def delete_internship(
    internship_id: int,
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    get_owned_listing(repo.internships, internship_id, employer.employer_id, "Internship")
    delete_listing(repo, repo.internships, internship_id)
    return MessageResponse(message="Internship deleted")
