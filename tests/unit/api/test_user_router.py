"""HTTP tests for the user routes."""

import pytest
from fastapi.testclient import TestClient
from loguru import logger


@pytest.fixture(params=["memory", "sql"])
def api_client(request) -> TestClient:
    """Run each test against both storage backends."""
    fixture = "client" if request.param == "memory" else "sql_client"
    return request.getfixturevalue(fixture)


def _create(client: TestClient, username: str = "ann", email: str = "ann@example.com"):
    response = client.post("/user/", json={"username": username, "email": email})
    assert response.status_code == 201
    return response.json()


class TestUserRoutes:
    def test_create_user(self, api_client: TestClient):
        body = _create(api_client)

        assert body["id"] is not None
        assert body["username"] == "ann"
        assert body["email"] == "ann@example.com"

    def test_get_user(self, api_client: TestClient):
        created = _create(api_client)

        response = api_client.get(f"/user/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_user_is_404(self, api_client: TestClient):
        response = api_client.get("/user/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_list_users_empty(self, api_client: TestClient):
        response = api_client.get("/user/")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_users(self, api_client: TestClient):
        ann = _create(api_client)
        bob = _create(api_client, "bob", "bob@example.com")

        response = api_client.get("/user/")

        assert response.json() == [ann, bob]

    def test_delete_user(self, api_client: TestClient):
        created = _create(api_client)

        response = api_client.delete(f"/user/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert api_client.get(f"/user/{created['id']}").status_code == 404

    def test_delete_unknown_user_succeeds(self, api_client: TestClient):
        assert api_client.delete("/user/999").status_code == 204

    def test_create_requires_username_and_email(self, api_client: TestClient):
        response = api_client.post("/user/", json={"username": "ann"})

        assert response.status_code == 422

    def test_non_integer_id_is_rejected(self, api_client: TestClient):
        assert api_client.get("/user/abc").status_code == 422

    @pytest.mark.parametrize("user_id", [0, -1, 2**63, 2**70])
    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_out_of_range_id_is_rejected(self, api_client: TestClient, method, user_id):
        """Ids outside the signed 64-bit range never reach storage."""
        response = api_client.request(method.upper(), f"/user/{user_id}")

        assert response.status_code == 422

    def test_largest_id_is_accepted(self, api_client: TestClient):
        largest = 2**63 - 1

        assert api_client.get(f"/user/{largest}").status_code == 404
        assert api_client.delete(f"/user/{largest}").status_code == 204


class TestAppSurface:
    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/user/", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client: TestClient):
        response = client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_readiness_memory(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "storage": "memory"}

    def test_readiness_database(self, sql_client: TestClient):
        response = sql_client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "storage": "database"}

    def test_not_found_is_not_a_failed_transaction(self, sql_client: TestClient):
        errors: list[str] = []
        logger.add(lambda message: errors.append(message.record["message"]), level="ERROR")

        assert sql_client.get("/user/999").status_code == 404
        assert errors == []
