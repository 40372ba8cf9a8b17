import logging

from fastapi import Header, Request

from diary_backend.api.utils import TokenService
from diary_backend.domain import CallerIdentity
from diary_backend.exceptions import InvalidTokenError, MissingTokenError

logger = logging.getLogger(__name__)


class SessionGuard:
    """Resolve the `Authorization: Bearer <token>` header to a caller identity.

    Missing credentials and bad credentials are distinct exceptions, but both
    render as 401.
    """

    def __init__(self, tokens: TokenService):
        self.tokens = tokens

    def resolve(self, authorization: str | None) -> CallerIdentity:
        if not authorization or not authorization.strip():
            logger.debug("resolve() Failed, no Authorization header")
            raise MissingTokenError("Missing token")

        parts = authorization.split()
        if parts[0].lower() != "bearer":
            logger.debug("resolve() Failed, lacked bearer")
            raise InvalidTokenError("Invalid token")
        if len(parts) == 1:
            logger.debug("resolve() Failed, bearer without a token")
            raise MissingTokenError("Missing token")
        if len(parts) != 2:
            logger.debug("resolve() Failed, not 2 parts")
            raise InvalidTokenError("Invalid token")
        return self.tokens.verify(parts[1])


def current_caller(request: Request, authorization: str | None = Header(None)) -> CallerIdentity:
    """FastAPI dependency: resolve the caller and attach it to ``request.state.caller``."""
    guard: SessionGuard = request.app.state.context.guard
    caller = guard.resolve(authorization)
    request.state.caller = caller
    return caller
