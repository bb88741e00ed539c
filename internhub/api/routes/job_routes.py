"""
Job Routes

GET /jobs - List active jobs with filters
GET /jobs/{job_id} - Get job details
POST /jobs - Create job posting (employer only)
PUT /jobs/{job_id} - Update job (owning employer only)
DELETE /jobs/{job_id} - Delete job and its applications (owning employer only)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from internhub.core.auth import EmployerPrincipal, get_current_employer, get_repository
from internhub.core.errors import NotFoundError, ValidationFailed
from internhub.repositories import Repository
from internhub.schemas.schemas import JobCreate, JobResponse, JobUpdate, MessageResponse
from internhub.services.listing_filter import JobFilters, filter_jobs, parse_skills
from internhub.services.listing_service import delete_listing, get_owned_listing, with_employer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def check_salary_band(salary_min: Optional[int], salary_max: Optional[int]) -> None:
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        raise ValidationFailed("salaryMin cannot exceed salaryMax")


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    location: Optional[str] = Query(None),
    is_remote: Optional[bool] = Query(None, alias="isRemote"),
    is_fresher_job: Optional[bool] = Query(None, alias="isFresherJob"),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    max_salary: Optional[int] = Query(None, alias="maxSalary", ge=0),
    experience_required_years: Optional[int] = Query(None, alias="experienceRequiredYears", ge=0),
    skills: Optional[str] = Query(None, description="Comma-separated skill names"),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    include_inactive: bool = Query(False, alias="includeInactive"),
    repo: Repository = Depends(get_repository),
):
    """List job postings with filters. Salary bounds are in whole currency units."""
    filters = JobFilters(
        location=location,
        is_remote=is_remote,
        is_fresher_job=is_fresher_job,
        min_salary=min_salary,
        max_salary=max_salary,
        experience_required_years=experience_required_years,
        skills=tuple(parse_skills(skills)),
        search_query=search_query,
    )
    listings = repo.jobs.find(is_active=None if include_inactive else True)
    return filter_jobs([with_employer(repo, job, JobResponse) for job in listings], filters)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, repo: Repository = Depends(get_repository)):
    job = repo.jobs.get(job_id)
    if job is None:
        raise NotFoundError("Job not found")
    return with_employer(repo, job, JobResponse)


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(
    data: JobCreate,
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    """Create a new job posting. Only employers can create jobs."""
    check_salary_band(data.salary_min, data.salary_max)
    job = repo.jobs.create({**data.model_dump(), "employer_id": employer.employer_id})
    logger.info("Employer %s created job %s", employer.employer_id, job.id)
    return with_employer(repo, job, JobResponse)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: int,
    data: JobUpdate,
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    job = get_owned_listing(repo.jobs, job_id, employer.employer_id, "Job")
    changes = data.changes()
    check_salary_band(changes.get("salary_min", job.salary_min), changes.get("salary_max", job.salary_max))
    if changes:
        job = repo.jobs.update(job.id, changes)
    return with_employer(repo, job, JobResponse)


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: int,
    employer: EmployerPrincipal = Depends(get_current_employer),
    repo: Repository = Depends(get_repository),
):
    get_owned_listing(repo.jobs, job_id, employer.employer_id, "Job")
    delete_listing(repo, repo.jobs, job_id)
    return MessageResponse(message="Job deleted")
