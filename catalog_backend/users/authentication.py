"""
PATH: users/authentication.py

BEARER TOKEN GATE (SimpleJWT)

Issuing:
- issue_token(user) -> signed HS256 access token, 24h lifetime (SIMPLE_JWT settings)
- claims: id, username (+ SimpleJWT's token_type / exp / iat / jti)

Verifying (CatalogJWTAuthentication):
- no "Authorization: Bearer ..." header, or "Bearer" with an empty token
                                          -> unauthenticated (401 via IsAuthenticated)
- malformed / bad signature / expired     -> 403 Forbidden
- token for an account that no longer exists -> 403 Forbidden
"""

from __future__ import annotations

import logging

from rest_framework.exceptions import AuthenticationFailed, PermissionDenied
from rest_framework_simplejwt.authentication import AUTH_HEADER_TYPE_BYTES, JWTAuthentication
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


def issue_token(user) -> str:
    token = AccessToken.for_user(user)
    token["username"] = user.username
    return str(token)


class CatalogJWTAuthentication(JWTAuthentication):
    def get_raw_token(self, header):
        # "Bearer" with no token part counts as no credentials (401), not a bad token
        parts = header.split()
        if len(parts) == 1 and parts[0] in AUTH_HEADER_TYPE_BYTES:
            return None
        return super().get_raw_token(header)

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except AuthenticationFailed as exc:
            logger.info(
                "Rejected bearer token",
                extra={"path": request.path, "reason": str(exc.detail)},
            )
            raise PermissionDenied("Invalid or expired token") from exc
