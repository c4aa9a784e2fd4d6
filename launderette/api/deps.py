"""Request-scoped dependencies.

Long-lived handles (store, token verifier, geocoder) are built once in
``create_app`` and kept on ``app.state``; handlers receive them through
``Depends`` so tests can swap any of them.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from launderette.core.errors import AuthError
from launderette.core.security import AuthUser, InvalidTokenError, TokenVerifier
from launderette.db.store import RecordStore
from launderette.services.geocoding import Geocoder

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier


def get_geocoder(request: Request) -> Geocoder:
    return request.app.state.geocoder


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> AuthUser:
    """Gate for admin mutations: a valid bearer token or 401."""
    if credentials is None or not credentials.credentials:
        logger.info("Auth failed: no token provided")
        raise AuthError("Unauthorized - No token provided")
    try:
        return verifier.verify(credentials.credentials)
    except InvalidTokenError as exc:
        logger.warning("Token verification error: %s", exc)
        raise AuthError("Unauthorized - Invalid or expired token") from exc
