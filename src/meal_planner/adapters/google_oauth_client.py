"""Google OAuth 2.0 client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"


class GoogleOAuthClient(Protocol):
    """Interface for the Google OAuth endpoints."""

    async def exchange_code(self, code: str, redirect_uri: str) -> dict[str, object]:
        """Exchange an authorization code for tokens."""

    async def get_user_info(self, access_token: str) -> dict[str, object]:
        """Fetch the profile of the token's owner."""


@dataclass
class HttpxGoogleOAuthClient(GoogleOAuthClient):
    """HTTPX-backed Google OAuth client."""

    client_id: str
    client_secret: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, client_id: str, client_secret: str) -> "HttpxGoogleOAuthClient":
        """Create an OAuth client with a managed httpx session."""
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            http_client=httpx.AsyncClient(),
        )

    async def exchange_code(self, code: str, redirect_uri: str) -> dict[str, object]:
        """Exchange an authorization code at Google's token endpoint."""
        response = await self.http_client.post(
            GOOGLE_TOKEN_URL,
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
                "grant_type": "authorization_code",
                "redirect_uri": redirect_uri,
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def get_user_info(self, access_token: str) -> dict[str, object]:
        """Fetch the Google user profile."""
        response = await self.http_client.get(
            GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
