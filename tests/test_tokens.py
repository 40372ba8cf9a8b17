"""Tests for :class:`diary_backend.api.utils.TokenService`."""
import base64
import json
import time
import uuid

import jwt
import pytest

from diary_backend.api.utils import TokenService
from diary_backend.domain import Identity
from diary_backend.exceptions import InvalidTokenError

SECRET = "token-secret"


@pytest.fixture
def identity():
    return Identity(id=uuid.uuid4(), username="alice")


@pytest.fixture
def tokens():
    return TokenService(SECRET, expire_minutes=60)


def test_issue_then_verify(tokens, identity):
    caller = tokens.verify(tokens.issue(identity))
    assert caller.identity_id == identity.id
    assert caller.username == identity.username


def test_claims(tokens, identity):
    claims = jwt.decode(tokens.issue(identity), SECRET, algorithms=["HS256"])
    assert claims["sub"] == str(identity.id)
    assert claims["username"] == "alice"
    assert claims["exp"] > claims["iat"]


def test_no_exp_claim_when_expiry_disabled(identity):
    tokens = TokenService(SECRET, expire_minutes=None)
    token = tokens.issue(identity)
    assert "exp" not in jwt.decode(token, SECRET, algorithms=["HS256"])
    assert tokens.verify(token).identity_id == identity.id


def test_tampered_signature(tokens, identity):
    header, payload, signature = tokens.issue(identity).split(".")
    replacement = "A" if signature[0] != "A" else "B"
    with pytest.raises(InvalidTokenError):
        tokens.verify(".".join([header, payload, replacement + signature[1:]]))


def test_tampered_payload(tokens, identity):
    header, payload, signature = tokens.issue(identity).split(".")
    claims = json.loads(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
    claims["username"] = "mallory"
    forged = base64.urlsafe_b64encode(json.dumps(claims).encode()).rstrip(b"=").decode()
    with pytest.raises(InvalidTokenError):
        tokens.verify(".".join([header, forged, signature]))


def test_wrong_secret(identity):
    token = TokenService("other-secret").issue(identity)
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


@pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c", "Bearer x"])
def test_malformed(tokens, token):
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_expired(identity):
    token = TokenService(SECRET, expire_minutes=-1).issue(identity)
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).verify(token)


def test_missing_username_claim(tokens):
    token = jwt.encode({"sub": str(uuid.uuid4()), "iat": int(time.time())}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_subject_must_be_an_identity_id(tokens):
    token = jwt.encode({"sub": "42", "username": "alice", "iat": int(time.time())}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_revocation_hook(identity):
    revoked = set()
    tokens = TokenService(SECRET, is_revoked=lambda claims: claims["sub"] in revoked)
    token = tokens.issue(identity)
    assert tokens.verify(token).username == "alice"
    revoked.add(str(identity.id))
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)
