"""Bearer-token verification against the external identity provider."""

from __future__ import annotations

import logging
from typing import Optional

from google.auth import exceptions as google_auth_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class AuthUser(BaseModel):
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None


class InvalidTokenError(Exception):
    """Token missing, malformed, expired, or not issued to an administrator."""


class TokenVerifier:
    """Interface: turn a bearer token into an ``AuthUser``."""

    def verify(self, token: str) -> AuthUser:
        raise NotImplementedError


class FirebaseTokenVerifier(TokenVerifier):
    """Verify Firebase ID tokens with google-auth.

    When ``admin_emails`` is non-empty, only those accounts are accepted.
    """

    def __init__(self, project_id: str | None, admin_emails: list[str] | None = None) -> None:
        self.project_id = project_id
        self.admin_emails = {e.lower() for e in (admin_emails or [])}
        self._request = google_requests.Request()

    def verify(self, token: str) -> AuthUser:
        if not self.project_id:
            raise InvalidTokenError("FIREBASE_PROJECT_ID is not configured.")
        try:
            claims = id_token.verify_firebase_token(
                token, self._request, audience=self.project_id
            )
        except (ValueError, google_auth_exceptions.GoogleAuthError) as exc:
            raise InvalidTokenError(str(exc)) from exc
        if not claims:
            raise InvalidTokenError("Token could not be decoded.")

        user = AuthUser(
            uid=claims.get("user_id") or claims["sub"],
            email=claims.get("email"),
            name=claims.get("name"),
        )
        if self.admin_emails and (user.email or "").lower() not in self.admin_emails:
            logger.warning("Rejected token for non-admin account %s", user.email)
            raise InvalidTokenError("Account is not an administrator.")
        return user
