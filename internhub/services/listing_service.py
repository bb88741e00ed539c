"""
Listing helpers shared by the internship and job routes.
"""

import logging
from typing import Optional, Type, TypeVar

from pydantic import BaseModel

from internhub.core.errors import NotFoundError
from internhub.repositories import Collection, Repository
from internhub.schemas.schemas import EmployerSummary

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

LISTING_KEYS = {
    "internships": "internship_id",
    "jobs": "job_id",
}


def employer_summary(repo: Repository, employer_id: int) -> Optional[EmployerSummary]:
    employer = repo.employer_profiles.get(employer_id)
    if employer is None:
        return None
    return EmployerSummary(
        id=employer.id,
        company_name=employer.company_name,
        company_logo=employer.company_logo,
    )


def with_employer(repo: Repository, listing, response_type: Type[M]) -> M:
    """Wrap a listing record in its response type with the employer attached."""
    return response_type(**dict(listing), employer=employer_summary(repo, listing.employer_id))


def get_owned_listing(listings: Collection, listing_id: int, employer_id: int, label: str):
    """
    Fetch a listing the employer owns.

    Someone else's listing is reported exactly like a missing one.
    """
    listing = listings.get(listing_id)
    if listing is None or listing.employer_id != employer_id:
        raise NotFoundError(f"{label} not found")
    return listing


def delete_listing(repo: Repository, listings: Collection, listing_id: int) -> bool:
    """Delete a listing together with the applications made against it."""
    key = LISTING_KEYS[listings.name]
    for application in repo.applications.find(**{key: listing_id}):
        repo.applications.delete(application.id)
    deleted = listings.delete(listing_id)
    if deleted:
        logger.info("Deleted %s %s", listings.name, listing_id)
    return deleted
