"""
Session token utilities.

Tokens are stateless HS256 JWTs carrying the identity id (``sub``), the
username, the issuance time and, unless disabled in the settings, an
expiry. Verification trusts the signed payload alone: it never looks the
user up again.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

from diary_backend.domain import CallerIdentity, Identity
from diary_backend.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

RevocationCheck = Callable[[dict], bool]


def never_revoked(claims: dict) -> bool:
    return False


class TokenService:
    """
    Issue and verify signed session tokens.

    Args:
        secret: Signing key.
        algorithm: JWT algorithm, ``HS256`` by default.
        expire_minutes: Lifetime of issued tokens. ``None`` issues tokens
            without an ``exp`` claim.
        is_revoked: Called with the decoded claims of an otherwise valid
            token. Returning True rejects the token.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int | None = None,
                 is_revoked: RevocationCheck = never_revoked):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes
        self.is_revoked = is_revoked

    def issue(self, identity: Identity) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(identity.id),
            "username": identity.username,
            "iat": int(now.timestamp()),
        }
        if self.expire_minutes is not None:
            claims["exp"] = int((now + timedelta(minutes=self.expire_minutes)).timestamp())
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> CallerIdentity:
        """
        Decode ``token`` and return the identity it was issued for.

        Raises:
            InvalidTokenError: If the token is empty, malformed, badly
                signed, expired, lacks the identity claims or was revoked.
        """
        if not token:
            raise InvalidTokenError("Invalid token")
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "username", "iat"]},
            )
            identity_id = uuid.UUID(claims["sub"])
        except (jwt.InvalidTokenError, ValueError, TypeError) as e:
            logger.debug("Token rejected: %s", e)
            raise InvalidTokenError("Invalid token") from e
        if not isinstance(claims["username"], str):
            raise InvalidTokenError("Invalid token")
        if self.is_revoked(claims):
            logger.debug("Token for %s has been revoked", claims["username"])
            raise InvalidTokenError("Invalid token")
        return CallerIdentity(identity_id=identity_id, username=claims["username"])
