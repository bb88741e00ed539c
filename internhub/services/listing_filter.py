"""
Listing filter - narrows internships, jobs and courses by field predicates.

All functions are pure: they never touch storage, keep the input order and
return the same list for the same inputs. A filter field left at None (or
an empty skill list) does not constrain the result.

Listings may be plain records or enriched responses carrying an
``employer`` summary; the company name is only used by ``search_query``.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, TypeVar

REMOTE_LOCATION = "Work from Home"

T = TypeVar("T")


@dataclass(frozen=True)
class InternshipFilters:
    location: Optional[str] = None
    is_remote: Optional[bool] = None
    is_part_time: Optional[bool] = None
    job_offer_possibility: Optional[bool] = None
    min_stipend: Optional[int] = None
    duration_months: Optional[int] = None
    skills: Sequence[str] = field(default_factory=tuple)
    search_query: Optional[str] = None


@dataclass(frozen=True)
class JobFilters:
    location: Optional[str] = None
    is_remote: Optional[bool] = None
    is_fresher_job: Optional[bool] = None
    min_salary: Optional[int] = None
    max_salary: Optional[int] = None
    experience_required_years: Optional[int] = None
    skills: Sequence[str] = field(default_factory=tuple)
    search_query: Optional[str] = None


@dataclass(frozen=True)
class CourseFilters:
    course_type: Optional[str] = None
    category: Optional[str] = None
    max_price: Optional[float] = None
    min_rating: Optional[int] = None
    placement_guarantee: Optional[bool] = None
    search_query: Optional[str] = None


# ============================================================
# PREDICATES
# ============================================================

def parse_skills(raw: Optional[str]) -> List[str]:
    """Split a comma-separated query value, dropping blanks."""
    if not raw:
        return []
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


def location_matches(listing, location: Optional[str]) -> bool:
    if not location:
        return True
    if listing.location == location:
        return True
    return location == REMOTE_LOCATION and bool(listing.is_remote)


def flag_matches(actual: Optional[bool], wanted: Optional[bool]) -> bool:
    """Flags only narrow when switched on, mirroring a ticked checkbox."""
    return not wanted or bool(actual)


def skills_match(listed: Optional[Sequence[str]], requested: Sequence[str]) -> bool:
    """Every requested skill must be a case-insensitive substring of some listed skill."""
    listed_lower = [skill.lower() for skill in (listed or [])]
    return all(
        any(wanted.lower() in skill for skill in listed_lower)
        for wanted in requested
    )


def text_matches(listing, query: Optional[str]) -> bool:
    if not query:
        return True
    needle = query.lower()
    employer = getattr(listing, "employer", None)
    haystacks = [
        listing.title,
        listing.description,
        getattr(employer, "company_name", None),
    ]
    return any(needle in text.lower() for text in haystacks if text)


# ============================================================
# FILTERS
# ============================================================

def internship_matches(internship, filters: InternshipFilters) -> bool:
    if not location_matches(internship, filters.location):
        return False
    if not flag_matches(internship.is_remote, filters.is_remote):
        return False
    if not flag_matches(internship.is_part_time, filters.is_part_time):
        return False
    if not flag_matches(internship.job_offer_possibility, filters.job_offer_possibility):
        return False
    if filters.min_stipend:
        if internship.stipend_amount is None or internship.stipend_amount < filters.min_stipend:
            return False
    if filters.duration_months is not None and internship.duration_months != filters.duration_months:
        return False
    if not skills_match(internship.skills_required, filters.skills):
        return False
    return text_matches(internship, filters.search_query)


def job_matches(job, filters: JobFilters) -> bool:
    if not location_matches(job, filters.location):
        return False
    if not flag_matches(job.is_remote, filters.is_remote):
        return False
    if not flag_matches(job.is_fresher_job, filters.is_fresher_job):
        return False
    # Salary band: lower bound inclusive, upper bound exclusive
    if filters.min_salary is not None:
        if job.salary_min is None or job.salary_min < filters.min_salary:
            return False
    if filters.max_salary is not None:
        if job.salary_max is None or job.salary_max >= filters.max_salary:
            return False
    if filters.experience_required_years is not None and job.experience_required_years is not None:
        if job.experience_required_years > filters.experience_required_years:
            return False
    if not skills_match(job.skills_required, filters.skills):
        return False
    return text_matches(job, filters.search_query)


def course_matches(course, filters: CourseFilters) -> bool:
    if filters.course_type and course.course_type != filters.course_type:
        return False
    if filters.category and course.category != filters.category:
        return False
    if filters.max_price is not None and course.effective_price > filters.max_price:
        return False
    if filters.min_rating is not None and (course.rating or 0) < filters.min_rating:
        return False
    if not flag_matches(course.placement_guarantee, filters.placement_guarantee):
        return False
    return text_matches(course, filters.search_query)


def filter_internships(internships: Iterable[T], filters: InternshipFilters) -> List[T]:
    return [internship for internship in internships if internship_matches(internship, filters)]


def filter_jobs(jobs: Iterable[T], filters: JobFilters) -> List[T]:
    return [job for job in jobs if job_matches(job, filters)]


def filter_courses(courses: Iterable[T], filters: CourseFilters) -> List[T]:
    return [course for course in courses if course_matches(course, filters)]
