"""Tests for the /api/v1/users endpoints and /health."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from tests.shared.fixtures.factories import TestUserFactory
from userhub.domain.user import UserNotFoundError
from userhub.presentation.api.dependencies import get_repository_factory


def _register(client: TestClient, url: str, **overrides) -> dict:
    response = client.post(url, json=TestUserFactory.payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestCreateUser:
    """POST /api/v1/users"""

    def test_create_returns_201_and_user_without_password(self, test_client, users_url):
        response = test_client.post(
            users_url,
            json={"email": "a@example.com", "name": "A", "password": "longpassword"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["email"] == "a@example.com"
        assert body["name"] == "A"
        assert body["created_at"] == body["updated_at"]
        assert "password" not in body

    def test_duplicate_email_returns_409(self, test_client, users_url):
        _register(test_client, users_url, email="dup@example.com")

        response = test_client.post(
            users_url,
            json=TestUserFactory.payload(email="dup@example.com", name="Other"),
        )

        assert response.status_code == 409
        assert response.json() == {
            "error": "email already exists",
            "code": "DUPLICATE_EMAIL",
        }
        assert len(test_client.get(users_url).json()) == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "not-an-email", "name": "A", "password": "longpassword"},
            {"email": "a@example.com", "name": "A", "password": "short"},
            {"email": "a@example.com", "password": "longpassword"},
            {"email": "a@example.com", "name": "", "password": "longpassword"},
            {},
        ],
    )
    def test_malformed_body_returns_400(self, test_client, users_url, payload):
        response = test_client.post(users_url, json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["error"].startswith("invalid request body")

    def test_non_json_body_returns_400(self, test_client, users_url):
        response = test_client.post(
            users_url,
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400


class TestGetUser:
    """GET /api/v1/users/{id}"""

    def test_get_existing_user(self, test_client, users_url):
        created = _register(test_client, users_url)

        response = test_client.get(f"{users_url}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_user_returns_404(self, test_client, users_url):
        response = test_client.get(f"{users_url}/999")

        assert response.status_code == 404
        assert response.json() == {"error": "user not found", "code": "USER_NOT_FOUND"}

    def test_malformed_id_returns_400(self, test_client, users_url):
        response = test_client.get(f"{users_url}/abc")

        assert response.status_code == 400
        assert response.json()["error"] == "invalid user id"


class TestUpdateUser:
    """PUT /api/v1/users/{id}"""

    def test_update_existing_user(self, test_client, users_url):
        created = _register(test_client, users_url)

        response = test_client.put(
            f"{users_url}/{created['id']}",
            json={"email": "new@example.com", "name": "New", "password": "newpassword"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["email"] == "new@example.com"
        assert body["name"] == "New"
        assert body["created_at"] == created["created_at"]
        assert "password" not in body

        fetched = test_client.get(f"{users_url}/{created['id']}").json()
        assert fetched["email"] == "new@example.com"

    def test_update_missing_user_is_not_an_error(self, test_client, users_url):
        response = test_client.put(
            f"{users_url}/999",
            json=TestUserFactory.payload(),
        )

        assert response.status_code == 200
        assert response.json()["id"] == 999
        assert test_client.get(f"{users_url}/999").status_code == 404

    def test_update_to_taken_email_returns_409(self, test_client, users_url):
        _register(test_client, users_url, email="first@example.com")
        second = _register(test_client, users_url, email="second@example.com")

        response = test_client.put(
            f"{users_url}/{second['id']}",
            json=TestUserFactory.payload(email="first@example.com"),
        )

        assert response.status_code == 409
        fetched = test_client.get(f"{users_url}/{second['id']}").json()
        assert fetched["email"] == "second@example.com"

    def test_malformed_body_returns_400(self, test_client, users_url):
        created = _register(test_client, users_url)

        response = test_client.put(
            f"{users_url}/{created['id']}",
            json={"email": "new@example.com", "name": "New", "password": "short"},
        )

        assert response.status_code == 400

    def test_malformed_id_returns_400(self, test_client, users_url):
        response = test_client.put(f"{users_url}/abc", json=TestUserFactory.payload())

        assert response.status_code == 400


class TestDeleteUser:
    """DELETE /api/v1/users/{id}"""

    def test_delete_existing_user(self, test_client, users_url):
        created = _register(test_client, users_url)

        response = test_client.delete(f"{users_url}/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert test_client.get(f"{users_url}/{created['id']}").status_code == 404

    def test_delete_missing_user_returns_204(self, test_client, users_url):
        response = test_client.delete(f"{users_url}/999")

        assert response.status_code == 204

    def test_malformed_id_returns_400(self, test_client, users_url):
        response = test_client.delete(f"{users_url}/abc")

        assert response.status_code == 400


class TestUserIdRange:
    """Path ids must fit the 64-bit id column."""

    OVERSIZED_ID = "99999999999999999999"
    MAX_ID = 2**63 - 1

    @pytest.mark.parametrize(
        ("method", "payload"),
        [
            ("get", None),
            ("put", TestUserFactory.payload()),
            ("delete", None),
        ],
    )
    def test_oversized_id_returns_400(self, test_client, users_url, method, payload):
        kwargs = {"json": payload} if payload is not None else {}
        response = getattr(test_client, method)(
            f"{users_url}/{self.OVERSIZED_ID}",
            **kwargs,
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "invalid user id",
            "code": "VALIDATION_ERROR",
        }

    def test_below_int64_range_returns_400(self, test_client, users_url):
        response = test_client.get(f"{users_url}/-{self.OVERSIZED_ID}")

        assert response.status_code == 400

    def test_largest_id_reaches_storage(self, test_client, users_url):
        assert test_client.get(f"{users_url}/{self.MAX_ID}").status_code == 404
        assert test_client.delete(f"{users_url}/{self.MAX_ID}").status_code == 204


class TestListUsers:
    """GET /api/v1/users"""

    @pytest.fixture
    def twelve_users(self, test_client, users_url):
        for i in range(1, 13):
            _register(test_client, users_url, email=f"user{i}@example.com")

    def test_empty_list(self, test_client, users_url):
        response = test_client.get(users_url)

        assert response.status_code == 200
        assert response.json() == []

    def test_defaults_to_ten_newest_first(self, test_client, users_url, twelve_users):
        response = test_client.get(users_url)

        body = response.json()
        assert len(body) == 10
        assert body[0]["email"] == "user12@example.com"
        assert body[-1]["email"] == "user3@example.com"
        assert all("password" not in u for u in body)

    def test_limit_and_offset(self, test_client, users_url, twelve_users):
        response = test_client.get(users_url, params={"limit": 3, "offset": 2})

        assert [u["email"] for u in response.json()] == [
            "user10@example.com",
            "user9@example.com",
            "user8@example.com",
        ]

    @pytest.mark.parametrize(
        "params",
        [
            {"limit": "abc", "offset": "xyz"},
            {"limit": "", "offset": ""},
            {"limit": "0", "offset": "-4"},
        ],
    )
    def test_unparsable_paging_falls_back_to_defaults(
        self,
        test_client,
        users_url,
        twelve_users,
        params,
    ):
        response = test_client.get(users_url, params=params)

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 10
        assert body[0]["email"] == "user12@example.com"


class TestInternalErrors:
    """Opaque storage failures become 500 without leaking details."""

    @pytest.fixture
    def failing_client(self, app):
        repo = AsyncMock()
        repo.get_by_id.side_effect = RuntimeError(
            'relation "users" does not exist: SELECT id FROM users'
        )
        repo.list.side_effect = RuntimeError("connection reset by peer")
        repo.get_by_email.side_effect = UserNotFoundError(email="test@example.com")
        repo.create.side_effect = RuntimeError("INSERT INTO users failed")

        factory = AsyncMock()
        factory.user_repository = lambda: repo

        async def override_factory():
            return factory

        app.dependency_overrides[get_repository_factory] = override_factory
        with TestClient(app, raise_server_exceptions=False) as client:
            yield client
        app.dependency_overrides.clear()

    @pytest.mark.parametrize(
        ("method", "path", "payload"),
        [
            ("get", "/1", None),
            ("get", "", None),
            ("post", "", TestUserFactory.payload()),
        ],
    )
    def test_storage_failure_returns_generic_500(
        self,
        failing_client,
        users_url,
        method,
        path,
        payload,
    ):
        kwargs = {"json": payload} if payload is not None else {}
        response = getattr(failing_client, method)(f"{users_url}{path}", **kwargs)

        assert response.status_code == 500
        assert response.json() == {
            "error": "An internal error occurred",
            "code": "INTERNAL_ERROR",
        }
        assert "SELECT" not in response.text
        assert "INSERT" not in response.text
