"""Tests for :class:`diary_backend.api.auth.SessionGuard`."""
import uuid

import pytest

from diary_backend.api.auth import SessionGuard
from diary_backend.api.utils import TokenService
from diary_backend.domain import Identity
from diary_backend.exceptions import AuthenticationError, InvalidTokenError, MissingTokenError


@pytest.fixture
def tokens():
    return TokenService("guard-secret")


@pytest.fixture
def guard(tokens):
    return SessionGuard(tokens)


@pytest.mark.parametrize("header", [None, "", "   ", "Bearer", "bearer "])
def test_missing_token(guard, header):
    with pytest.raises(MissingTokenError):
        guard.resolve(header)


@pytest.mark.parametrize("header", ["Bearer BOGUS", "Bearer BOGUS BOGUS", "Token abc", "abc"])
def test_invalid_token(guard, header):
    with pytest.raises(InvalidTokenError):
        guard.resolve(header)


def test_missing_and_invalid_share_status(guard):
    with pytest.raises(AuthenticationError) as missing:
        guard.resolve(None)
    with pytest.raises(AuthenticationError) as invalid:
        guard.resolve("Bearer BOGUS")
    assert missing.value.status_code == invalid.value.status_code == 401


def test_valid_token(guard, tokens):
    identity = Identity(id=uuid.uuid4(), username="alice")
    caller = guard.resolve("Bearer " + tokens.issue(identity))
    assert caller.identity_id == identity.id
    assert caller.username == "alice"


def test_scheme_is_case_insensitive(guard, tokens):
    identity = Identity(id=uuid.uuid4(), username="alice")
    assert guard.resolve("bearer " + tokens.issue(identity)).username == "alice"


def test_does_not_consult_credential_store(guard, tokens):
    # the identity was never registered anywhere: the signed payload is authoritative
    identity = Identity(id=uuid.uuid4(), username="ghost")
    assert guard.resolve("Bearer " + tokens.issue(identity)).identity_id == identity.id
