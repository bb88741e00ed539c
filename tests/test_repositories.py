import threading

import pytest
from sqlalchemy.exc import IntegrityError

from internhub.db.database import build_engine
from internhub.models import ApplicationStatus, UserRole
from internhub.repositories import DuplicateRecordError, MemoryRepository, SqlRepository
from internhub.services.seed_data import (
    DEMO_COURSES, DEMO_EMPLOYERS, DEMO_INTERNSHIPS, DEMO_JOBS, seed_demo_data,
)


def make_user(repo, email="someone@example.com", **fields):
    values = {
        "email": email,
        "password_hash": "x",
        "first_name": "Some",
        "last_name": "One",
        "user_type": UserRole.student,
    }
    values.update(fields)
    return repo.users.create(values)


def test_create_assigns_increasing_ids_and_timestamp(repo):
    first = make_user(repo, "a@example.com")
    second = make_user(repo, "b@example.com")

    assert second.id > first.id
    assert first.created_at is not None
    assert first.user_type == UserRole.student
    assert first.languages == []


def test_get_missing_returns_none(repo):
    assert repo.users.get(42) is None


def test_find_ignores_none_and_matches_equality(repo):
    make_user(repo, "a@example.com", current_city="Pune")
    make_user(repo, "b@example.com", current_city="Delhi")

    assert [user.email for user in repo.users.find(current_city="Pune")] == ["a@example.com"]
    assert len(repo.users.find(current_city=None)) == 2
    assert repo.users.first(email="b@example.com").current_city == "Delhi"
    assert repo.users.first(email="c@example.com") is None


def test_find_with_list_filter_requires_superset(repo):
    repo.internships.create({
        "employer_id": 1, "title": "One", "description": "d", "duration_months": 3,
        "skills_required": ["Python", "SQL"],
    })
    repo.internships.create({
        "employer_id": 1, "title": "Two", "description": "d", "duration_months": 3,
        "skills_required": ["Python"],
    })

    assert [item.title for item in repo.internships.find(skills_required=["Python", "SQL"])] == ["One"]
    assert len(repo.internships.find(skills_required=["Python"])) == 2


def test_find_by_enum_value(repo):
    make_user(repo, "a@example.com", user_type=UserRole.employer)

    assert len(repo.users.find(user_type=UserRole.employer)) == 1
    assert len(repo.users.find(user_type="employer")) == 1


def test_unique_email(repo):
    make_user(repo, "same@example.com")

    with pytest.raises(DuplicateRecordError):
        make_user(repo, "same@example.com")
    assert len(repo.users.find()) == 1


def test_application_uniqueness_per_listing(repo):
    repo.applications.create({"student_id": 1, "internship_id": 5})
    repo.applications.create({"student_id": 1, "job_id": 5})
    repo.applications.create({"student_id": 2, "internship_id": 5})

    with pytest.raises(DuplicateRecordError):
        repo.applications.create({"student_id": 1, "internship_id": 5})

    stored = repo.applications.find(student_id=1)
    assert len(stored) == 2
    assert stored[0].status == ApplicationStatus.applied
    assert stored[0].application_date is not None


def test_update_and_delete(repo):
    user = make_user(repo)

    updated = repo.users.update(user.id, {"current_city": "Chennai"})
    assert updated.current_city == "Chennai"
    assert updated.email == user.email
    assert repo.users.get(user.id).current_city == "Chennai"

    assert repo.users.update(999, {"current_city": "Nowhere"}) is None
    assert repo.users.delete(user.id) is True
    assert repo.users.delete(user.id) is False


def test_returned_records_are_copies(repo):
    user = make_user(repo)
    user.languages.append("Tamil")

    assert repo.users.get(user.id).languages == []


def test_memory_duplicate_protection_under_concurrency():
    repo = MemoryRepository()
    errors = []

    def enroll():
        try:
            repo.enrollments.create({"student_id": 1, "course_id": 1})
        except DuplicateRecordError as exc:
            errors.append(exc)

    threads = [threading.Thread(target=enroll) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(repo.enrollments.find()) == 1
    assert len(errors) == 9


def test_ping(repo):
    assert repo.ping() is True


def test_seed_demo_data_runs_once(repo):
    assert seed_demo_data(repo) is True
    assert seed_demo_data(repo) is False

    assert len(repo.employer_profiles.find()) == len(DEMO_EMPLOYERS)
    assert len(repo.courses.find()) == len(DEMO_COURSES)
    google = repo.employer_profiles.first(company_name="Google")
    assert repo.internships.first(employer_id=google.id).title == "Software Development Intern"


def test_seed_demo_data_refills_deleted_courses(repo):
    seed_demo_data(repo)
    for course in repo.courses.find():
        repo.courses.delete(course.id)

    assert seed_demo_data(repo) is True

    assert len(repo.courses.find()) == len(DEMO_COURSES)
    assert len(repo.users.find()) == len(DEMO_EMPLOYERS)
    assert len(repo.employer_profiles.find()) == len(DEMO_EMPLOYERS)
    assert len(repo.internships.find()) == len(DEMO_INTERNSHIPS)
    assert len(repo.jobs.find()) == len(DEMO_JOBS)


def test_sql_only_unique_clashes_become_duplicates():
    repo = SqlRepository(build_engine("sqlite://"))
    repo.create_all()
    make_user(repo, "same@example.com")

    with pytest.raises(DuplicateRecordError):
        make_user(repo, "same@example.com")
    # Missing NOT NULL column is a plain integrity failure
    with pytest.raises(IntegrityError):
        repo.internships.create({"employer_id": 1, "description": "d", "duration_months": 3})
