"""Unit tests for the auth service client"""

import httpx
import pytest
from socia_finance.infrastructure.clients.auth import AuthClient
from socia_finance.domain.exceptions import AuthServiceError, InvalidSessionError


def make_client(handler) -> AuthClient:
    return AuthClient(
        base_url="http://auth.test",
        api_key="anon-key",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


async def test_get_user_success():
    """Test token resolves to the user id and email"""
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/auth/v1/user"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["Authorization"] == "Bearer token-123"
        return httpx.Response(200, json={"id": "0b6c4b52-user", "email": "socia@example.com"})

    user = await make_client(handler).get_user("token-123")

    assert user.user_id == "0b6c4b52-user"
    assert user.email == "socia@example.com"


@pytest.mark.parametrize("status", [401, 403])
async def test_get_user_rejected_token(status):
    client = make_client(lambda request: httpx.Response(status, json={"msg": "invalid JWT"}))

    with pytest.raises(InvalidSessionError):
        await client.get_user("expired")


async def test_get_user_server_error():
    client = make_client(lambda request: httpx.Response(500))

    with pytest.raises(AuthServiceError):
        await client.get_user("token")


async def test_get_user_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(AuthServiceError):
        await make_client(handler).get_user("token")


async def test_get_user_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(AuthServiceError):
        await make_client(handler).get_user("token")


async def test_get_user_payload_without_id():
    client = make_client(lambda request: httpx.Response(200, json={"email": "x@example.com"}))

    with pytest.raises(AuthServiceError):
        await client.get_user("token")


async def test_get_user_html_page_is_service_error():
    """Test a non-JSON 200 (e.g. a proxy error page) is not treated as a bad session"""
    client = make_client(lambda request: httpx.Response(200, text="<html>gateway</html>"))

    with pytest.raises(AuthServiceError):
        await client.get_user("token")
