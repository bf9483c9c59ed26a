"""Auth service HTTP client for resolving access tokens to users"""

import httpx
from dataclasses import dataclass
from typing import Optional
from socia_finance.domain.exceptions import AuthServiceError, InvalidSessionError
from socia_finance.config import settings


@dataclass
class AuthUser:
    """Authenticated socia as reported by the auth service"""

    user_id: str
    email: Optional[str] = None


class AuthClient:
    """Client for the hosted backend's auth service"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.auth_api_base
        self.api_key = api_key if api_key is not None else settings.auth_api_key
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_user(self, access_token: str) -> AuthUser:
        """
        Resolve an access token to the user it belongs to.

        Raises:
            InvalidSessionError: Token rejected (401/403)
            AuthServiceError: On timeout, other HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/auth/v1/user",
                    headers={
                        "apikey": self.api_key,
                        "Authorization": f"Bearer {access_token}",
                    },
                )
                if response.status_code in (401, 403):
                    raise InvalidSessionError("Access token rejected by auth service")
                response.raise_for_status()
                data = response.json()

                return AuthUser(user_id=str(data["id"]), email=data.get("email"))

            except httpx.TimeoutException as e:
                raise AuthServiceError(f"Auth service timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise AuthServiceError(f"Auth service error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise AuthServiceError(f"Auth service unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise AuthServiceError(f"Invalid user payload from auth service: {e}") from e
