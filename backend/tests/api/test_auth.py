"""
Tests for the bearer token gate.
"""

import pytest
from unittest.mock import AsyncMock

from starlette.requests import Request

from api.middleware.auth import bearer_scheme, extract_bearer_token, get_current_user
from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidCredentialError,
    MissingCredentialError,
)
from shared.models import AuthenticatedUser


async def call_gate(authorization, auth):
    """Run the gate the way FastAPI would for a request with this header."""
    headers = [] if authorization is None else [(b"authorization", authorization.encode())]
    request = Request({"type": "http", "method": "GET", "path": "/", "headers": headers})
    credentials = await bearer_scheme(request)
    return await get_current_user(request=request, credentials=credentials, auth=auth)


class TestExtractBearerToken:
    def test_valid_header(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize(
        "header",
        [
            None,
            "",
            "abc.def.ghi",          # bare token
            "Bearer",               # no token
            "Bearer ",              # empty token
            "bearer abc.def.ghi",   # wrong case
            "Basic dXNlcjpwYXNz",   # other scheme
            "Bearer  abc.def.ghi",  # extra space
        ],
    )
    def test_rejected_headers(self, header):
        with pytest.raises(MissingCredentialError):
            extract_bearer_token(header)


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_resolves_identity(self):
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        auth = AsyncMock()
        auth.validate_token.return_value = user

        result = await call_gate("Bearer good-token", auth)

        assert result == user
        auth.validate_token.assert_awaited_once_with("good-token")

    @pytest.mark.asyncio
    async def test_missing_header_never_reaches_verifier(self):
        auth = AsyncMock()
        with pytest.raises(MissingCredentialError):
            await call_gate(None, auth)
        auth.validate_token.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_verifier_failure_becomes_invalid_credential(self):
        auth = AsyncMock()
        auth.validate_token.side_effect = ExpiredTokenError()
        with pytest.raises(InvalidCredentialError) as exc_info:
            await call_gate("Bearer old-token", auth)
        assert isinstance(exc_info.value.__cause__, ExpiredTokenError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", ["bearer good-token", "BEARER good-token", "Bearer  good-token"])
    async def test_loose_scheme_forms_rejected(self, header):
        """HTTPBearer would accept these; the gate does not."""
        auth = AsyncMock()
        with pytest.raises(MissingCredentialError):
            await call_gate(header, auth)
        auth.validate_token.assert_not_awaited()


class TestMeEndpoint:
    def test_valid_token(self, client, auth_headers):
        response = client.get("/api/users/me", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["id"]
        assert data["email"] == "test@example.com"
        assert data["phoneNumber"] == "1234567890"
        assert data["address"]["zipCode"] == "70000"
        assert "password" not in data
        assert "passwordHash" not in data

    def test_missing_auth_header(self, client):
        response = client.get("/api/users/me")
        assert response.status_code == 401
        assert "error" in response.json()
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client):
        response = client.get("/api/users/me", headers={"Authorization": "Bearer invalid_token_here"})
        assert response.status_code == 401
        assert "error" in response.json()

    def test_without_bearer_prefix(self, client, auth_token):
        response = client.get("/api/users/me", headers={"Authorization": auth_token})
        assert response.status_code == 401

    def test_expired_token_same_as_missing(self, client, make_token):
        """Callers cannot tell an expired token from no token."""
        expired = client.get(
            "/api/users/me", headers={"Authorization": f"Bearer {make_token(expired=True)}"}
        )
        missing = client.get("/api/users/me")
        assert expired.status_code == missing.status_code == 401
        assert expired.json() == missing.json()

    def test_wrong_secret(self, client, make_token):
        token = make_token(secret="this-is-not-the-real-secret")
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_for_unknown_user(self, client, make_token):
        """A well-signed token whose account does not exist is rejected."""
        token = make_token(user_id="ghost-user")
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    @pytest.mark.parametrize("scheme", ["bearer", "BEARER"])
    def test_scheme_is_case_sensitive(self, client, auth_token, scheme):
        response = client.get("/api/users/me", headers={"Authorization": f"{scheme} {auth_token}"})
        assert response.status_code == 401

    def test_double_space_rejected(self, client, auth_token):
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer  {auth_token}"})
        assert response.status_code == 401


class TestOpenApiSecurity:
    def test_bearer_scheme_declared(self, app):
        schema = app.openapi()
        assert schema["components"]["securitySchemes"]["HTTPBearer"] == {
            "type": "http",
            "scheme": "bearer",
        }

    def test_gated_routes_require_bearer(self, app):
        paths = app.openapi()["paths"]
        assert paths["/api/users/me"]["get"]["security"] == [{"HTTPBearer": []}]
        assert paths["/api/properties"]["post"]["security"] == [{"HTTPBearer": []}]
        assert "security" not in paths["/api/properties"]["get"]
