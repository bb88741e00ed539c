def enroll(client, course_id, **extra):
    return client.post("/api/enrollments", json={"courseId": course_id, **extra})


def test_enroll(student, course):
    response = enroll(student, course["id"], paymentId="pay_123")

    assert response.status_code == 201
    body = response.json()
    assert body["progressPercentage"] == 0
    assert body["paymentStatus"] == "pending"
    assert body["paymentId"] == "pay_123"
    assert body["completionDate"] is None


def test_enroll_unknown_course(student):
    response = enroll(student, 999)

    assert response.status_code == 400
    assert response.json()["message"] == "Course not found"


def test_duplicate_enrollment(student, repo, course):
    enroll(student, course["id"])

    response = enroll(student, course["id"])

    assert response.status_code == 400
    assert response.json()["message"] == "Already enrolled in this course"
    assert len(repo.enrollments.find()) == 1


def test_only_students_enroll(employer, course):
    assert enroll(employer, course["id"]).status_code == 403


def test_list_enrollments_with_course(student, other_student, course):
    enroll(student, course["id"])

    enrollments = student.get("/api/enrollments").json()

    assert len(enrollments) == 1
    assert enrollments[0]["course"]["title"] == "Web Development"
    assert other_student.get("/api/enrollments").json() == []


def test_progress_is_clamped_and_completes(student, course):
    enrollment_id = enroll(student, course["id"]).json()["id"]

    response = student.put(f"/api/enrollments/{enrollment_id}/progress", json={"progressPercentage": 40})
    assert response.json()["progressPercentage"] == 40
    assert response.json()["completionDate"] is None

    response = student.put(f"/api/enrollments/{enrollment_id}/progress", json={"progressPercentage": 150})
    assert response.status_code == 200
    assert response.json()["progressPercentage"] == 100
    completed_at = response.json()["completionDate"]
    assert completed_at

    # Reporting 100 again keeps the first completion date
    response = student.put(f"/api/enrollments/{enrollment_id}/progress", json={"progressPercentage": 100})
    assert response.json()["completionDate"] == completed_at


def test_progress_cannot_go_backwards(student, course):
    enrollment_id = enroll(student, course["id"]).json()["id"]
    student.put(f"/api/enrollments/{enrollment_id}/progress", json={"progressPercentage": 60})

    response = student.put(f"/api/enrollments/{enrollment_id}/progress", json={"progressPercentage": 30})

    assert response.status_code == 400
    negative = student.put(f"/api/enrollments/{enrollment_id}/progress", json={"progressPercentage": -5})
    assert negative.status_code == 400


def test_negative_progress_on_fresh_enrollment_clamps_to_zero(student, course):
    enrollment_id = enroll(student, course["id"]).json()["id"]

    response = student.put(f"/api/enrollments/{enrollment_id}/progress", json={"progressPercentage": -5})

    assert response.status_code == 200
    assert response.json()["progressPercentage"] == 0


def test_update_payment(student, course):
    enrollment_id = enroll(student, course["id"]).json()["id"]

    response = student.put(f"/api/enrollments/{enrollment_id}", json={
        "paymentId": "pay_999",
        "paymentStatus": "completed",
    })

    assert response.status_code == 200
    assert response.json()["paymentStatus"] == "completed"
    assert response.json()["paymentId"] == "pay_999"


def test_other_students_enrollment_is_404(student, other_student, course):
    enrollment_id = enroll(student, course["id"]).json()["id"]

    response = other_student.put(f"/api/enrollments/{enrollment_id}/progress", json={"progressPercentage": 50})
    assert response.status_code == 404
    assert response.json()["message"] == "Enrollment not found"
    assert other_student.delete(f"/api/enrollments/{enrollment_id}").status_code == 404


def test_cancel_enrollment(student, repo, course):
    enrollment_id = enroll(student, course["id"]).json()["id"]

    assert student.delete(f"/api/enrollments/{enrollment_id}").status_code == 200
    assert repo.enrollments.get(enrollment_id) is None
    assert enroll(student, course["id"]).status_code == 201
