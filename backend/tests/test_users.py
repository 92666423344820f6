"""Tests for User endpoints."""


class TestUserCRUD:
    """User create / get / list."""

    def test_create_user(self, client):
        resp = client.post("/api/users", json={
            "name": "Alice",
            "email": "alice@company.com",
            "role": "Support",
        })
        assert resp.status_code == 201
        body = resp.json()
        assert body["success"] is True
        data = body["data"]
        assert data["name"] == "Alice"
        assert data["email"] == "alice@company.com"
        assert data["role"] == "Support"
        assert data["id"] >= 1
        assert resp.headers["location"].endswith(f"/api/users/{data['id']}")

    def test_get_user(self, client, create_user):
        user = create_user()
        resp = client.get(f"/api/users/{user['id']}")
        assert resp.status_code == 200
        assert resp.json()["data"]["name"] == "Test User"

    def test_get_user_not_found(self, client):
        resp = client.get("/api/users/999")
        assert resp.status_code == 404
        assert resp.json() == {
            "success": False,
            "message": "User with ID 999 not found",
            "statusCode": 404,
        }

    def test_get_user_non_positive_id(self, client):
        resp = client.get("/api/users/0")
        assert resp.status_code == 400
        assert resp.json()["message"] == "User ID must be greater than 0"

    def test_list_users(self, client, create_user):
        create_user(name="Alice", email="alice@company.com")
        create_user(name="Bob", email="bob@company.com")
        resp = client.get("/api/users")
        assert resp.status_code == 200
        names = [u["name"] for u in resp.json()["data"]]
        assert names == ["Alice", "Bob"]

    def test_list_users_empty(self, client):
        resp = client.get("/api/users")
        assert resp.status_code == 200
        assert resp.json()["data"] == []


class TestUserRoleFilter:

    def test_filter_by_role(self, client, create_user):
        create_user(name="Ann", email="ann@company.com", role="Employee")
        create_user(name="Sam", email="sam@company.com", role="Support")
        create_user(name="Sue", email="sue@company.com", role="Support")
        resp = client.get("/api/users", params={"role": "Support"})
        assert resp.status_code == 200
        assert [u["name"] for u in resp.json()["data"]] == ["Sam", "Sue"]

    def test_empty_role_means_all(self, client, create_user):
        create_user(name="Ann", email="ann@company.com", role="Employee")
        create_user(name="Mia", email="mia@company.com", role="Manager")
        resp = client.get("/api/users", params={"role": ""})
        assert len(resp.json()["data"]) == 2

    def test_unknown_role(self, client):
        resp = client.get("/api/users", params={"role": "Admin"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid role value"


class TestUserValidation:

    def test_name_too_short(self, client):
        resp = client.post("/api/users", json={
            "name": "A",
            "email": "a@company.com",
            "role": "Employee",
        })
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Validation failed"
        assert any(e.startswith("name:") for e in body["errors"])

    def test_invalid_email(self, client):
        resp = client.post("/api/users", json={
            "name": "Alice",
            "email": "not-an-email",
            "role": "Employee",
        })
        assert resp.status_code == 400
        assert any(e.startswith("email:") for e in resp.json()["errors"])

    def test_unknown_role(self, client):
        resp = client.post("/api/users", json={
            "name": "Alice",
            "email": "alice@company.com",
            "role": "Admin",
        })
        assert resp.status_code == 400
        assert "role: Role must be 'Employee', 'Support', or 'Manager'" in resp.json()["errors"]

    def test_every_failure_reported(self, client):
        resp = client.post("/api/users", json={"name": "A", "email": "nope", "role": "Admin"})
        assert resp.status_code == 400
        fields = {e.split(":", 1)[0] for e in resp.json()["errors"]}
        assert fields == {"name", "email", "role"}

    def test_missing_fields(self, client):
        resp = client.post("/api/users", json={})
        assert resp.status_code == 400
        assert len(resp.json()["errors"]) == 3


class TestUserResponseShape:

    def test_oversized_id_is_bad_request(self, client):
        resp = client.get("/api/users/9223372036854775808")
        assert resp.status_code == 400
        assert resp.json()["message"] == "Validation failed"

    def test_success_without_message_omits_it(self, client, create_user):
        user = create_user()
        body = client.get(f"/api/users/{user['id']}").json()
        assert set(body) == {"success", "data"}
