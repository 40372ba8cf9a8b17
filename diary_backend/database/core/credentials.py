"""
Credential store: registration, login verification and the personalization prompt.

Passwords are hashed with bcrypt. Login failures are collapsed into a
single :class:`~diary_backend.exceptions.CredentialError` whatever the
cause, and an unknown username still pays for one bcrypt comparison so the
two paths cannot be told apart by timing either.
"""

import logging
import uuid

import bcrypt
from sqlalchemy.exc import IntegrityError

from diary_backend.database.daos import UserDao
from diary_backend.domain import Identity
from diary_backend.exceptions import ConflictError, CredentialError, ValidationError

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 12) -> str:
    """Return a salted bcrypt hash of ``password``."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def check_password(password: str, hashed: str | bytes) -> bool:
    """Compare ``password`` with a bcrypt hash. Unusable input never matches."""
    encoded = password.encode("utf-8")
    if len(encoded) > 72:
        # older bcrypt releases silently truncate instead of raising
        return False
    if isinstance(hashed, str):
        hashed = hashed.encode("ascii")
    try:
        return bcrypt.checkpw(encoded, hashed)
    except ValueError:
        # malformed hash
        return False


class CredentialStore:
    """Identities keyed by username, backed by :class:`UserDao`."""

    def __init__(self, users: UserDao, bcrypt_rounds: int = 12):
        self.users = users
        self.bcrypt_rounds = bcrypt_rounds
        self._dummy_hash = hash_password("dummy-password", bcrypt_rounds)

    def register(self, username: str | None, password: str | None) -> Identity:
        """
        Create a new identity with an empty prompt.

        Raises
        ------
        ValidationError
            If the username or password is missing, or the password is too
            long for bcrypt (72 bytes).
        ConflictError
            If the username is already taken (exact, case-sensitive match).
        """
        if not username or not password:
            raise ValidationError("Missing credentials")
        if len(password.encode("utf-8")) > 72:
            raise ValidationError("Password too long")
        if self.users.get_by_username(username) is not None:
            raise ConflictError("User exists")
        try:
            user = self.users.create_user(username, hash_password(password, self.bcrypt_rounds))
        except IntegrityError as e:
            # lost a race with a concurrent signup for the same name
            raise ConflictError("User exists") from e
        logger.info("Registered user %s", username)
        return Identity(id=user.id, username=user.username, prompt=user.prompt)

    def verify(self, username: str | None, password: str | None) -> Identity:
        """
        Check a username/password pair.

        Raises
        ------
        CredentialError
            For an unknown username and a wrong password alike.
        """
        user = self.users.get_by_username(username) if username else None
        if user is None:
            check_password(password or "", self._dummy_hash)
            logger.info("Rejected login attempt")
            raise CredentialError("Invalid credentials")
        if not check_password(password or "", user.password):
            logger.info("Rejected login attempt")
            raise CredentialError("Invalid credentials")
        return Identity(id=user.id, username=user.username, prompt=user.prompt)

    def set_prompt(self, identity_id: uuid.UUID, prompt: str | None) -> None:
        if not self.users.update_prompt(identity_id, prompt or ""):
            logger.debug("set_prompt: no identity %s", identity_id)

    def get_prompt(self, identity_id: uuid.UUID) -> str:
        user = self.users.get_by_id(identity_id)
        return user.prompt if user else ""
