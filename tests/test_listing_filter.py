import pytest

from internhub.models import Course, CourseType, Internship, Job
from internhub.schemas.schemas import EmployerSummary, InternshipResponse
from internhub.services.listing_filter import (
    REMOTE_LOCATION, CourseFilters, InternshipFilters, JobFilters, filter_courses,
    filter_internships, filter_jobs, parse_skills, skills_match,
)


def make_internship(id, **fields):
    values = {
        "employer_id": 1,
        "title": f"Internship {id}",
        "description": "An internship",
        "duration_months": 3,
    }
    values.update(fields)
    return Internship(id=id, **values)


def make_job(id, **fields):
    values = {"employer_id": 1, "title": f"Job {id}", "description": "A job"}
    values.update(fields)
    return Job(id=id, **values)


@pytest.fixture
def internships():
    return [
        make_internship(1, location="Bangalore", stipend_amount=20000, duration_months=6,
                        skills_required=["JavaScript", "React", "Node.js"]),
        make_internship(2, location="Mumbai", is_remote=True, is_part_time=True, stipend_amount=15000,
                        skills_required=["Python", "Machine Learning"], job_offer_possibility=True),
        make_internship(3, location=REMOTE_LOCATION, is_remote=True, stipend_amount=None,
                        skills_required=["React Native", "TypeScript"]),
        make_internship(4, location="Delhi", stipend_amount=10000, duration_months=4,
                        skills_required=["Content Writing"]),
    ]


def ids(listings):
    return [listing.id for listing in listings]


def test_empty_filters_return_everything_in_order(internships):
    assert ids(filter_internships(internships, InternshipFilters())) == [1, 2, 3, 4]


def test_remote_location_matches_any_remote_listing(internships):
    result = filter_internships(internships, InternshipFilters(location=REMOTE_LOCATION))

    assert ids(result) == [2, 3]


def test_exact_location(internships):
    assert ids(filter_internships(internships, InternshipFilters(location="Delhi"))) == [4]
    assert filter_internships(internships, InternshipFilters(location="delhi")) == []


def test_remote_and_skill_filter(internships):
    filters = InternshipFilters(location=REMOTE_LOCATION, skills=("React",))

    assert ids(filter_internships(internships, filters)) == [3]
    assert ids(filter_internships(internships, InternshipFilters(is_remote=True, skills=("React",)))) == [3]


def test_every_requested_skill_must_match(internships):
    assert ids(filter_internships(internships, InternshipFilters(skills=("react", "node")))) == [1]
    assert filter_internships(internships, InternshipFilters(skills=("react", "python"))) == []


def test_flags_only_narrow_when_true(internships):
    assert ids(filter_internships(internships, InternshipFilters(is_part_time=True))) == [2]
    assert ids(filter_internships(internships, InternshipFilters(is_part_time=False))) == [1, 2, 3, 4]
    assert ids(filter_internships(internships, InternshipFilters(job_offer_possibility=True))) == [2]


def test_min_stipend_excludes_unpaid(internships):
    assert ids(filter_internships(internships, InternshipFilters(min_stipend=15000))) == [1, 2]


def test_duration_is_exact(internships):
    assert ids(filter_internships(internships, InternshipFilters(duration_months=4))) == [4]


def test_search_covers_company_name():
    listing = InternshipResponse(
        **dict(make_internship(7, title="Analyst")),
        employer=EmployerSummary(id=1, company_name="Microsoft"),
    )

    assert ids(filter_internships([listing], InternshipFilters(search_query="micro"))) == [7]
    assert filter_internships([listing], InternshipFilters(search_query="google")) == []


def test_filter_is_idempotent(internships):
    filters = InternshipFilters(is_remote=True, skills=("react",))

    once = filter_internships(internships, filters)

    assert filter_internships(once, filters) == once
    assert filter_internships(internships, filters) == once


@pytest.fixture
def jobs():
    return [
        make_job(1, salary_min=600000, salary_max=1000000, experience_required_years=0, is_fresher_job=True),
        make_job(2, salary_min=400000, salary_max=700000, experience_required_years=2),
        make_job(3, salary_min=500000, salary_max=800000),
        make_job(4),
    ]


def test_salary_band_is_inclusive_exclusive(jobs):
    assert ids(filter_jobs(jobs, JobFilters(min_salary=500000))) == [1, 3]
    assert ids(filter_jobs(jobs, JobFilters(max_salary=800000))) == [2]
    assert ids(filter_jobs(jobs, JobFilters(min_salary=400000, max_salary=800001))) == [2, 3]


def test_experience_ceiling_keeps_unspecified(jobs):
    assert ids(filter_jobs(jobs, JobFilters(experience_required_years=1))) == [1, 3, 4]


def test_fresher_flag(jobs):
    assert ids(filter_jobs(jobs, JobFilters(is_fresher_job=True))) == [1]


def test_course_filters():
    courses = [
        Course(id=1, title="Web Development", description="Web", course_type=CourseType.certification,
               duration_weeks=8, price=9999, discount_percentage=80, rating=4, category="programming"),
        Course(id=2, title="Full Stack", description="Placement", course_type=CourseType.placement_guarantee,
               duration_weeks=16, price=49999, rating=5, placement_guarantee=True, category="programming"),
        Course(id=3, title="Marketing", description="Ads", course_type=CourseType.certification,
               duration_weeks=8, price=1500, category="marketing"),
    ]

    assert ids(filter_courses(courses, CourseFilters(max_price=2000))) == [1, 3]
    assert ids(filter_courses(courses, CourseFilters(min_rating=5))) == [2]
    assert ids(filter_courses(courses, CourseFilters(course_type="certification", category="marketing"))) == [3]
    assert ids(filter_courses(courses, CourseFilters(placement_guarantee=True))) == [2]


def test_parse_skills():
    assert parse_skills(" React, ,Node.js ") == ["React", "Node.js"]
    assert parse_skills(None) == []


def test_skills_match_without_listed_skills():
    assert skills_match(None, [])
    assert not skills_match(None, ["Python"])
