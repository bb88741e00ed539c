import os

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SESSION_SECRET_KEY", "test-secret")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from fastapi.testclient import TestClient

from internhub.core.auth import hash_password
from internhub.db.database import build_engine
from internhub.main import create_app
from internhub.models import UserRole
from internhub.repositories import MemoryRepository, SqlRepository

PASSWORD = "password123"


@pytest.fixture(params=["memory", "sql"])
def repo(request):
    if request.param == "memory":
        repository = MemoryRepository()
    else:
        repository = SqlRepository(build_engine("sqlite://"))
    repository.create_all()
    return repository


@pytest.fixture
def app(repo):
    return create_app(repository=repo)


@pytest.fixture
def make_client(app):
    """Factory for independent clients; each one keeps its own session cookie."""
    clients = []

    def factory():
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()


def register(client, email, user_type="student", first_name="Test", last_name="User", password=PASSWORD):
    response = client.post("/api/auth/register", json={
        "email": email,
        "password": password,
        "firstName": first_name,
        "lastName": last_name,
        "userType": user_type,
    })
    assert response.status_code == 201, response.text
    return response.json()


def login(client, email, password=PASSWORD):
    return client.post("/api/auth/login", json={"email": email, "password": password})


@pytest.fixture
def student(make_client):
    client = make_client()
    register(client, "student@example.com", "student", first_name="Asha", last_name="Rao")
    return client


@pytest.fixture
def other_student(make_client):
    client = make_client()
    register(client, "other.student@example.com", "student", first_name="Ravi")
    return client


@pytest.fixture
def employer(make_client):
    client = make_client()
    register(client, "employer@example.com", "employer", first_name="Priya")
    return client


@pytest.fixture
def other_employer(make_client):
    client = make_client()
    register(client, "other.employer@example.com", "employer", first_name="Karan")
    return client


@pytest.fixture
def admin(make_client, repo):
    repo.users.create({
        "email": "admin@example.com",
        "password_hash": hash_password(PASSWORD),
        "first_name": "Ada",
        "last_name": "Admin",
        "user_type": UserRole.admin,
        "languages": [],
    })
    client = make_client()
    assert login(client, "admin@example.com").status_code == 200
    return client


def internship_payload(**overrides):
    payload = {
        "title": "Software Development Intern",
        "description": "Build web applications with the product team.",
        "location": "Bangalore",
        "isRemote": False,
        "stipendAmount": 20000,
        "durationMonths": 6,
        "skillsRequired": ["JavaScript", "React", "Node.js"],
    }
    payload.update(overrides)
    return payload


def job_payload(**overrides):
    payload = {
        "title": "Data Analyst",
        "description": "Turn data into decisions.",
        "location": "Hyderabad",
        "salaryMin": 500000,
        "salaryMax": 800000,
        "experienceRequiredYears": 1,
        "skillsRequired": ["SQL", "Python"],
    }
    payload.update(overrides)
    return payload


def course_payload(**overrides):
    payload = {
        "title": "Web Development",
        "description": "HTML, CSS, JavaScript and React.",
        "courseType": "certification",
        "durationWeeks": 8,
        "price": 9999,
        "discountPercentage": 80,
        "rating": 4,
        "category": "programming",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def internship(employer):
    response = employer.post("/api/internships", json=internship_payload())
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def job(employer):
    response = employer.post("/api/jobs", json=job_payload())
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def course(admin):
    response = admin.post("/api/courses", json=course_payload())
    assert response.status_code == 201, response.text
    return response.json()
