"""End-to-end tests for the portal HTTP API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from portal.config import AuthSettings
from portal.domain.service import JWTService
from portal.interface.api.app import create_app
from portal.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def auth_token():
    """Token for an account that is not in the (empty) in-memory store."""
    return JWTService(AuthSettings()).create_token(str(uuid4()), "ADM-0001")


class TestPublicEndpoints:
    """Endpoints that need no authentication.

    Note: in-memory repositories are request-scoped, so state does not
    survive between HTTP requests here; behaviour across requests is
    covered by unit tests.
    """

    def test_health(self, client):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["award_policy"] in ("flat", "by_type")

    def test_list_ranks(self, client):
        response = client.get("/ranks")

        assert response.status_code == 200
        ranks = response.json()["ranks"]
        assert ranks[0]["title"] == "Celestial Champion"
        assert ranks[-1]["title"] == "Novice"

    def test_resolve_rank(self, client):
        response = client.get("/ranks/resolve", params={"points": "150"})

        assert response.status_code == 200
        body = response.json()
        assert body["rank"] == "Eternal Guardian"
        assert body["next_rank"] == "Phoenix Prodigy"

    def test_resolve_rank_requires_points(self, client):
        response = client.get("/ranks/resolve")

        assert response.status_code == 422

    def test_leaderboard_of_empty_class(self, client):
        response = client.get(f"/class-instances/{uuid4()}/leaderboard")

        assert response.status_code == 200
        assert response.json()["entries"] == []

    def test_leaderboard_rejects_malformed_id(self, client):
        response = client.get("/class-instances/not-a-uuid/leaderboard")

        assert response.status_code == 400

    def test_comments_for_unknown_content(self, client):
        response = client.get(f"/content/{uuid4()}/comments")

        assert response.status_code == 404


class TestAuthenticatedEndpoints:
    """Endpoints that require an auth_token cookie."""

    @pytest.mark.parametrize(
        "method, path, body",
        [
            ("post", "/content/{id}/reactions", {"kind": "like"}),
            ("post", "/content/{id}/comments", {"text": "Nice"}),
            ("post", "/content/{id}/upload-award", None),
            ("get", "/content/{id}/reactions/me", None),
            ("delete", "/comments/{id}", None),
            ("get", "/accounts/me/standing", None),
        ],
    )
    def test_requires_authentication(self, client, method, path, body):
        # Act
        kwargs = {"json": body} if body is not None else {}
        response = client.request(method, path.format(id=uuid4()), **kwargs)

        # Assert
        assert response.status_code == 401
        assert "Authentication required" in response.json()["detail"]

    def test_invalid_token_rejected(self, client):
        client.cookies.set("auth_token", "invalid-token")

        response = client.post(f"/content/{uuid4()}/reactions", json={"kind": "like"})

        assert response.status_code == 401

    def test_reaction_on_unknown_content(self, client, auth_token):
        client.cookies.set("auth_token", auth_token)

        response = client.post(f"/content/{uuid4()}/reactions", json={"kind": "like"})

        assert response.status_code == 404

    def test_unknown_reaction_kind(self, client, auth_token):
        client.cookies.set("auth_token", auth_token)

        response = client.post(f"/content/{uuid4()}/reactions", json={"kind": "love"})

        assert response.status_code == 422

    def test_my_reaction_defaults_to_none(self, client, auth_token):
        client.cookies.set("auth_token", auth_token)
        content_id = str(uuid4())

        response = client.get(f"/content/{content_id}/reactions/me")

        assert response.status_code == 200
        assert response.json() == {"content_id": content_id, "state": "none"}

    def test_standing_for_unknown_account(self, client, auth_token):
        client.cookies.set("auth_token", auth_token)

        response = client.get("/accounts/me/standing")

        assert response.status_code == 404
