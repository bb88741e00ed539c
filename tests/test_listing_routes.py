from conftest import internship_payload, job_payload


def test_create_internship_requires_employer(client, student):
    assert client.post("/api/internships", json=internship_payload()).status_code == 401

    response = student.post("/api/internships", json=internship_payload())
    assert response.status_code == 403
    assert response.json()["message"] == "Not an employer profile"


def test_create_internship_returns_enriched_listing(employer):
    response = employer.post("/api/internships", json=internship_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Software Development Intern"
    assert body["isActive"] is True
    assert body["stipendCurrency"] == "INR"
    assert body["employer"]["companyName"] == "Priya's Company"
    assert body["createdAt"]


def test_create_internship_validation(employer):
    response = employer.post("/api/internships", json={"title": "Hi"})

    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


def test_public_listing_and_detail(client, internship, job):
    internships = client.get("/api/internships")
    assert internships.status_code == 200
    assert [item["id"] for item in internships.json()] == [internship["id"]]
    assert internships.json()[0]["employer"]["id"] == internship["employerId"]

    assert client.get(f"/api/internships/{internship['id']}").status_code == 200
    assert client.get(f"/api/jobs/{job['id']}").json()["title"] == "Data Analyst"
    assert client.get("/api/internships/999").status_code == 404
    assert client.get("/api/jobs/999").json()["message"] == "Job not found"


def test_inactive_listings_hidden_unless_requested(employer, client, internship):
    employer.put(f"/api/internships/{internship['id']}", json={"isActive": False})

    assert client.get("/api/internships").json() == []
    included = client.get("/api/internships", params={"includeInactive": "true"}).json()
    assert [item["id"] for item in included] == [internship["id"]]


def test_owner_can_update_listing(employer, internship):
    response = employer.put(f"/api/internships/{internship['id']}", json={"stipendAmount": 25000})

    assert response.status_code == 200
    assert response.json()["stipendAmount"] == 25000
    assert response.json()["title"] == internship["title"]


def test_other_employer_gets_404(other_employer, internship, job):
    response = other_employer.put(f"/api/internships/{internship['id']}", json={"title": "Hijacked title"})
    assert response.status_code == 404
    assert response.json()["message"] == "Internship not found"

    assert other_employer.delete(f"/api/internships/{internship['id']}").status_code == 404
    assert other_employer.put(f"/api/jobs/{job['id']}", json={"title": "Hijacked"}).status_code == 404
    assert other_employer.delete(f"/api/jobs/{job['id']}").status_code == 404


def test_delete_listing_removes_applications(employer, student, repo, internship):
    student.post("/api/applications", json={"internshipId": internship["id"]})
    assert len(repo.applications.find()) == 1

    response = employer.delete(f"/api/internships/{internship['id']}")

    assert response.status_code == 200
    assert repo.internships.get(internship["id"]) is None
    assert repo.applications.find() == []


def test_job_salary_band_must_be_ordered(employer, job):
    response = employer.post("/api/jobs", json=job_payload(salaryMin=900000, salaryMax=100000))
    assert response.status_code == 400

    response = employer.put(f"/api/jobs/{job['id']}", json={"salaryMin": 900000})
    assert response.status_code == 400


def test_employer_listings_include_inactive(employer, other_employer, internship, job):
    employer.put(f"/api/jobs/{job['id']}", json={"isActive": False})
    other_employer.post("/api/internships", json=internship_payload(title="Other company intern"))

    response = employer.get("/api/employer/listings")

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["internships"]] == [internship["id"]]
    assert [item["id"] for item in body["jobs"]] == [job["id"]]
    assert body["jobs"][0]["isActive"] is False


def test_internship_filters_over_http(employer, client):
    employer.post("/api/internships", json=internship_payload(
        title="Frontend Intern", location="Work from Home", isRemote=True,
        skillsRequired=["React", "CSS"],
    ))
    employer.post("/api/internships", json=internship_payload(
        title="Backend Intern", location="Mumbai", skillsRequired=["Django"],
    ))

    remote_react = client.get("/api/internships", params={"location": "Work from Home", "skills": "react"}).json()
    assert [item["title"] for item in remote_react] == ["Frontend Intern"]

    by_company = client.get("/api/internships", params={"searchQuery": "priya"}).json()
    assert len(by_company) == 2

    assert client.get("/api/internships", params={"minStipend": 50000}).json() == []


def test_job_filters_over_http(employer, client, job):
    employer.post("/api/jobs", json=job_payload(
        title="Junior Developer", isFresherJob=True, experienceRequiredYears=0,
        salaryMin=300000, salaryMax=450000,
    ))

    fresher = client.get("/api/jobs", params={"isFresherJob": "true"}).json()
    assert [item["title"] for item in fresher] == ["Junior Developer"]

    band = client.get("/api/jobs", params={"minSalary": 400000, "maxSalary": 900000}).json()
    assert [item["id"] for item in band] == [job["id"]]


def test_owner_can_clear_optional_fields(employer, internship, job):
    response = employer.put(f"/api/internships/{internship['id']}", json={"stipendAmount": None, "location": None})

    assert response.status_code == 200
    assert response.json()["stipendAmount"] is None
    assert response.json()["location"] is None
    assert response.json()["title"] == internship["title"]

    response = employer.put(f"/api/jobs/{job['id']}", json={"salaryMax": None})

    assert response.status_code == 200
    assert response.json()["salaryMax"] is None
    assert response.json()["salaryMin"] == job["salaryMin"]


def test_required_listing_fields_cannot_be_nulled(employer, internship, job):
    response = employer.put(f"/api/internships/{internship['id']}", json={"title": None, "durationMonths": None})
    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"

    assert employer.put(f"/api/jobs/{job['id']}", json={"isRemote": None}).status_code == 400
    assert employer.get(f"/api/internships/{internship['id']}").json()["title"] == internship["title"]
