from fastapi.testclient import TestClient

from conftest import PASSWORD, login, register
from internhub.main import create_app


def test_register_student_sets_session_and_creates_profile(client, repo):
    body = register(client, "new.student@example.com", "student", first_name="Meera", last_name="Iyer")

    assert body["email"] == "new.student@example.com"
    assert body["firstName"] == "Meera"
    assert body["userType"] == "student"
    assert "passwordHash" not in body
    assert "internhub_session" in client.cookies

    assert repo.student_profiles.first(user_id=body["id"]) is not None
    assert repo.employer_profiles.first(user_id=body["id"]) is None


def test_register_employer_gets_default_company_name(client, repo):
    body = register(client, "hr@example.com", "employer", first_name="Priya")

    profile = repo.employer_profiles.first(user_id=body["id"])
    assert profile.company_name == "Priya's Company"


def test_password_is_stored_hashed(client, repo):
    body = register(client, "hashed@example.com")

    user = repo.users.get(body["id"])
    assert user.password_hash != PASSWORD
    assert user.password_hash.startswith("$2")


def test_register_duplicate_email(make_client):
    register(make_client(), "dup@example.com")

    response = make_client().post("/api/auth/register", json={
        "email": "dup@example.com",
        "password": PASSWORD,
        "firstName": "Second",
        "lastName": "Try",
        "userType": "employer",
    })

    assert response.status_code == 400
    assert response.json()["message"] == "Email already in use"


def test_register_rejects_admin_user_type(client):
    response = client.post("/api/auth/register", json={
        "email": "boss@example.com",
        "password": PASSWORD,
        "firstName": "Boss",
        "lastName": "Person",
        "userType": "admin",
    })

    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"
    assert response.json()["errors"]


def test_register_validates_body(client):
    response = client.post("/api/auth/register", json={"email": "not-an-email", "password": "short"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation error"
    assert len(body["errors"]) >= 2


def test_login_and_me(make_client):
    register(make_client(), "login@example.com", first_name="Lena")

    client = make_client()
    response = login(client, "login@example.com")
    assert response.status_code == 200
    assert response.json()["firstName"] == "Lena"

    me = client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["email"] == "login@example.com"


def test_login_wrong_password(make_client):
    register(make_client(), "wrong@example.com")

    response = login(make_client(), "wrong@example.com", password="not-the-password")

    assert response.status_code == 401
    assert response.json() == {"message": "Incorrect email or password"}


def test_login_unknown_email(client):
    response = login(client, "nobody@example.com")

    assert response.status_code == 401
    assert response.json()["message"] == "Incorrect email or password"


def test_me_without_session(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["message"] == "Not authenticated"


def test_logout_revokes_session(client, repo):
    register(client, "bye@example.com")
    token = client.cookies.get("internhub_session")

    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert repo.sessions.find() == []

    # Replaying the old cookie no longer works
    client.cookies.set("internhub_session", token)
    assert client.get("/api/auth/me").status_code == 401


def test_forged_cookie_is_rejected(client):
    client.cookies.set("internhub_session", "not-a-jwt")

    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/profile").status_code == 401


def test_expired_session_is_rejected(client, repo):
    body = register(client, "expired@example.com")
    session = repo.sessions.first(user_id=body["id"])
    repo.sessions.update(session.id, {"expires_at": session.created_at})

    assert client.get("/api/auth/me").status_code == 401
    assert repo.sessions.get(session.id) is None


def test_health_reports_storage(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["storage"] == "connected"


class AcceptAnyPassword:
    """Login strategy that only checks the email exists."""

    def authenticate(self, repo, email, password):
        return repo.users.first(email=email)


def test_credential_strategy_is_pluggable(repo):
    app = create_app(repository=repo, credential_strategy=AcceptAnyPassword())
    with TestClient(app) as client:
        register(client, "plug@example.com")
        client.post("/api/auth/logout")

        response = login(client, "plug@example.com", password="anything-at-all")

        assert response.status_code == 200
        assert client.get("/api/auth/me").json()["email"] == "plug@example.com"


def test_login_purges_expired_sessions(make_client, repo):
    body = register(make_client(), "stale@example.com")
    stale = repo.sessions.first(user_id=body["id"])
    repo.sessions.update(stale.id, {"expires_at": stale.created_at})
    live = login(make_client(), "stale@example.com")
    assert live.status_code == 200

    login(make_client(), "stale@example.com")

    sessions = repo.sessions.find(user_id=body["id"])
    assert stale.id not in [session.id for session in sessions]
    assert len(sessions) == 2
