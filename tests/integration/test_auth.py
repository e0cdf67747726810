"""JWT authentication on the order endpoints (SimpleJWT)."""

import pytest
from django.contrib.auth import get_user_model

pytestmark = pytest.mark.integration

URL = "/api/v1/orders/"


@pytest.fixture()
def user():
    return get_user_model().objects.create_user(
        username="jwt-user", password="jwt-pass-123"
    )


def _obtain(api_client, username, password):
    return api_client.post(
        "/api/v1/auth/token/", {"username": username, "password": password}, format="json"
    )


class TestJwtAuthentication:
    def test_obtain_token_pair(self, api_client, user):
        response = _obtain(api_client, "jwt-user", "jwt-pass-123")
        assert response.status_code == 200
        assert {"access", "refresh"} <= set(response.data)

    def test_bad_credentials_rejected(self, api_client, user):
        response = _obtain(api_client, "jwt-user", "wrong")
        assert response.status_code == 401

    def test_bearer_token_grants_access(self, api_client, user):
        access = _obtain(api_client, "jwt-user", "jwt-pass-123").data["access"]
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        assert api_client.get(URL).status_code == 200

    def test_refresh_returns_new_access(self, api_client, user):
        refresh = _obtain(api_client, "jwt-user", "jwt-pass-123").data["refresh"]
        response = api_client.post(
            "/api/v1/auth/token/refresh/", {"refresh": refresh}, format="json"
        )
        assert response.status_code == 200
        assert "access" in response.data

    def test_garbage_token_rejected(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not.a.token")
        assert api_client.get(URL).status_code == 401

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", URL),
            ("post", URL),
            ("get", f"{URL}0191f5d2-7c1a-7000-8000-000000000001/"),
        ],
    )
    def test_anonymous_rejected(self, api_client, method, path):
        response = getattr(api_client, method)(path)
        assert response.status_code == 401
