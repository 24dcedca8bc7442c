"""Google sign-in and session tokens."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from urllib.parse import urlencode

import jwt

from meal_planner.adapters.google_oauth_client import GOOGLE_AUTH_URL, GoogleOAuthClient
from meal_planner.domain.models import GoogleUserInfo, UserRecord
from meal_planner.services.errors import AuthenticationError
from meal_planner.services.users import UserService

_ALGORITHM = "HS256"
_SCOPE = "email profile"

_logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Runs the OAuth code flow and issues signed session tokens."""

    oauth_client: GoogleOAuthClient
    user_service: UserService
    client_id: str | None
    jwt_secret: str
    token_ttl_days: int = 7

    @property
    def token_max_age_seconds(self) -> int:
        return int(timedelta(days=self.token_ttl_days).total_seconds())

    def authorization_url(self, redirect_uri: str) -> str:
        """Return the Google consent screen URL."""
        if not self.client_id:
            raise RuntimeError("GOOGLE_CLIENT_ID is not set")
        query = urlencode(
            {
                "client_id": self.client_id,
                "redirect_uri": redirect_uri,
                "response_type": "code",
                "scope": _SCOPE,
                "access_type": "offline",
            }
        )
        return f"{GOOGLE_AUTH_URL}?{query}"

    async def login(self, code: str, redirect_uri: str) -> tuple[UserRecord, str]:
        """Exchange the code, sync the user and return it with a session token."""
        token_data = await self.oauth_client.exchange_code(code, redirect_uri)
        access_token = token_data.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise AuthenticationError("Failed to exchange code for token")
        payload = await self.oauth_client.get_user_info(access_token)
        info = GoogleUserInfo(
            id=str(payload["id"]),
            email=str(payload["email"]),
            name=payload.get("name"),
            picture=payload.get("picture"),
        )
        user = self.user_service.ensure_google_user(info)
        _logger.info("User signed in: user_id=%s", user.id)
        return user, self.issue_token(user)

    def issue_token(self, user: UserRecord) -> str:
        now = datetime.now(tz=UTC)
        payload = {
            "userId": user.id,
            "email": user.email,
            "googleId": user.google_id,
            "iat": now,
            "exp": now + timedelta(days=self.token_ttl_days),
        }
        return jwt.encode(payload, self.jwt_secret, algorithm=_ALGORITHM)

    def verify_token(self, token: str) -> dict[str, object] | None:
        """Return token claims, or None when the token is invalid or expired."""
        try:
            return jwt.decode(token, self.jwt_secret, algorithms=[_ALGORITHM])
        except jwt.PyJWTError:
            return None

    def authenticate(self, token: str | None) -> UserRecord:
        """Resolve the user behind a session token."""
        if not token:
            raise AuthenticationError("Unauthorized: No token provided")
        claims = self.verify_token(token)
        user_id = claims.get("userId") if claims else None
        user = self.user_service.get_user(user_id) if isinstance(user_id, int) else None
        if user is None:
            raise AuthenticationError("Unauthorized: Invalid token")
        return user
