from fastapi.testclient import TestClient

from hostel_allocation.config.settings import Settings
from hostel_allocation.main import create_app

API = "/api/v1"

APPLICATION_FORM = {
    "name": "Asha Rao",
    "studentId": "STU042",
    "departmentName": "Computer Science",
    "year": "2nd",
    "cgpa": 3.4,
    "roomType": "Single",
    "preferredBlock": "Block A",
}


def _submit(client, headers, **overrides):
    response = client.post(f"{API}/applications", json={**APPLICATION_FORM, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _room_id(client, number):
    rooms = client.get(f"{API}/rooms", params={"search": number}).json()
    return next(room["id"] for room in rooms if room["number"] == number)


def test_health_and_request_id(client):
    response = client.get(f"{API}/health", headers={"X-Request-ID": "req-123"})

    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"] == "req-123"
    assert "X-Process-Time" in response.headers


def test_login_and_me(client, student_headers):
    response = client.get(f"{API}/auth/me", headers=student_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "student@example.com"
    assert response.json()["studentId"] == "STU001"


def test_bad_login(client):
    response = client.post(f"{API}/auth/login", json={"email": "admin@example.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_FAILED"


def test_logout_invalidates_token(client, student_headers):
    assert client.post(f"{API}/auth/logout", headers=student_headers).status_code == 204
    assert client.get(f"{API}/auth/me", headers=student_headers).status_code == 401


def test_register(client):
    response = client.post(
        f"{API}/auth/register",
        json={"name": "New", "email": "new@example.com", "password": "password", "studentId": "STU9"},
    )

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "student"
    duplicate = client.post(
        f"{API}/auth/register",
        json={"name": "New", "email": "new@example.com", "password": "password"},
    )
    assert duplicate.status_code == 409


def test_submit_requires_login(client):
    response = client.post(f"{API}/applications", json=APPLICATION_FORM)

    assert response.status_code == 401


def test_student_submits_and_sees_own_applications(client, student_headers):
    created = _submit(client, student_headers)

    assert created["status"] == "pending"
    assert created["roomNumber"] is None
    assert created["studentId"] == "2"
    assert created["studentName"] == "Asha Rao"

    mine = client.get(f"{API}/applications/me", headers=student_headers).json()
    assert created["id"] in [a["id"] for a in mine]
    assert client.get(f"{API}/applications/{created['id']}", headers=student_headers).status_code == 200


def test_submit_with_invalid_cgpa(client, student_headers):
    response = client.post(f"{API}/applications", json={**APPLICATION_FORM, "cgpa": 5}, headers=student_headers)

    assert response.status_code == 422


def test_student_cannot_review(client, student_headers):
    created = _submit(client, student_headers)

    assert client.get(f"{API}/applications", headers=student_headers).status_code == 403
    response = client.post(
        f"{API}/applications/{created['id']}/approve", json={"roomNumber": "A-102"}, headers=student_headers
    )
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AUTHORIZATION_FAILED"


def test_admin_approves_into_matching_room(client, student_headers, admin_headers):
    created = _submit(client, student_headers)

    candidates = client.get(f"{API}/applications/{created['id']}/available-rooms", headers=admin_headers).json()
    assert [room["number"] for room in candidates] == ["A-102", "A-103"]

    response = client.post(
        f"{API}/applications/{created['id']}/approve", json={"roomNumber": "A-103"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["status"] == "approved"
    assert response.json()["roomNumber"] == "A-103"


def test_approve_into_unavailable_room(client, student_headers, admin_headers):
    created = _submit(client, student_headers)

    response = client.post(
        f"{API}/applications/{created['id']}/approve", json={"roomNumber": "A-101"}, headers=admin_headers
    )

    assert response.status_code == 409
    body = response.json()["error"]
    assert body["code"] == "ROOM_UNAVAILABLE"
    assert body["details"]["available_rooms"] == ["A-102", "A-103"]


def test_approve_when_block_has_no_room_of_type(client, student_headers, admin_headers):
    created = _submit(client, student_headers, preferredBlock="Block C", roomType="Quad")

    response = client.post(
        f"{API}/applications/{created['id']}/approve", json={"roomNumber": "D-101"}, headers=admin_headers
    )

    assert response.status_code == 409


def test_admin_rejects(client, student_headers, admin_headers):
    created = _submit(client, student_headers)

    response = client.post(f"{API}/applications/{created['id']}/reject", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "rejected"
    assert response.json()["roomNumber"] is None


def test_unknown_application(client, admin_headers):
    response = client.post(f"{API}/applications/missing/reject", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "APPLICATION_NOT_FOUND"


def test_admin_lists_applications_with_filters(client, student_headers, admin_headers):
    _submit(client, student_headers)

    pending = client.get(f"{API}/applications", params={"status": "pending"}, headers=admin_headers).json()
    assert all(a["status"] == "pending" for a in pending)
    assert len(pending) == 2

    searched = client.get(f"{API}/applications", params={"search": "asha"}, headers=admin_headers).json()
    assert [a["studentName"] for a in searched] == ["Asha Rao"]


def test_rooms_are_public(client):
    rooms = client.get(f"{API}/rooms").json()

    assert len(rooms) == 16
    assert rooms[0]["number"] == "A-101"
    filtered = client.get(f"{API}/rooms", params={"block": "Block D", "status": "available"}).json()
    assert [room["number"] for room in filtered] == ["D-101"]


def test_availability_summary(client):
    summary = client.get(f"{API}/rooms/availability").json()

    assert summary[0] == {"block": "Block A", "roomType": "Single", "total": 5, "available": 2}
    assert len(summary) == 6


def test_room_lifecycle(client, admin_headers):
    response = client.post(
        f"{API}/rooms",
        json={"number": "D-201", "block": "Block D", "type": "Quad", "occupancy": 1},
        headers=admin_headers,
    )
    assert response.status_code == 201
    room = response.json()
    assert room["capacity"] == 4
    assert room["status"] == "available"

    patched = client.patch(
        f"{API}/rooms/{room['id']}/status", json={"status": "maintenance"}, headers=admin_headers
    )
    assert patched.status_code == 200
    assert patched.json()["status"] == "maintenance"
    assert patched.json()["occupancy"] == 1

    assert client.delete(f"{API}/rooms/{room['id']}", headers=admin_headers).status_code == 204
    assert client.get(f"{API}/rooms/{room['id']}").status_code == 404


def test_room_validation(client, admin_headers):
    too_full = client.post(
        f"{API}/rooms",
        json={"number": "A-999", "block": "Block A", "type": "Single", "occupancy": 2},
        headers=admin_headers,
    )
    assert too_full.status_code == 422

    duplicate = client.post(
        f"{API}/rooms", json={"number": "A-101", "block": "Block A", "type": "Single"}, headers=admin_headers
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "DUPLICATE_ENTRY"


def test_room_changes_require_admin(client, student_headers):
    room_id = _room_id(client, "A-102")

    assert client.delete(f"{API}/rooms/{room_id}", headers=student_headers).status_code == 403
    assert client.patch(
        f"{API}/rooms/{room_id}/status", json={"status": "occupied"}, headers=student_headers
    ).status_code == 403


def test_delete_unknown_room_leaves_inventory(client, admin_headers):
    response = client.delete(f"{API}/rooms/missing", headers=admin_headers)

    assert response.status_code == 404
    assert len(client.get(f"{API}/rooms").json()) == 16


def test_dashboard_stats(client, admin_headers):
    stats = client.get(f"{API}/dashboard/stats", headers=admin_headers).json()

    assert stats["totalApplications"] == 2
    assert stats["totalRooms"] == 16
    assert stats["maintenanceRooms"] == 1


def test_docs_hidden_in_production():
    production = Settings(ENVIRONMENT="production", SEED_DEMO_DATA=False, DATABASE_URL=None, LOG_FILE=None)

    with TestClient(create_app(production, configure_logging=False)) as client:
        assert client.get("/docs").status_code == 404
        assert client.get(f"{API}/health").status_code == 200
