"""Shared pytest fixtures.

Every test gets its own in-memory SQLite database, a cheap bcrypt cost and
deterministic generators, so nothing touches the network or the real
`videos/` directory.
"""
import pytest
from fastapi.testclient import TestClient

from diary_backend.context import build_context
from diary_backend.database.config.config import Settings
from diary_backend.main import create_app
from diary_backend.services import EchoSummarizer

SECRET = "test-secret"


class FakeSynthesizer:
    """Returns predictable video references, or fails when told to."""

    def __init__(self):
        self.calls = []
        self.fail = False

    async def synthesize(self, summary):
        self.calls.append(summary)
        if self.fail:
            raise RuntimeError("video service unavailable")
        return f"videos/fake-{len(self.calls)}.mp4"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        SECRET_KEY=SECRET,
        DB_URL="sqlite://",
        BCRYPT_ROUNDS=4,
        VIDEO_DIR=str(tmp_path / "videos"),
        SUMMARIZER_BACKEND="stub",
    )


@pytest.fixture
def synthesizer():
    return FakeSynthesizer()


@pytest.fixture
def context(settings, synthesizer):
    return build_context(settings, summarizer=EchoSummarizer(), synthesizer=synthesizer)


@pytest.fixture
def alice(context):
    return context.credentials.register("alice", "pw1")


@pytest.fixture
def bob(context):
    return context.credentials.register("bob", "pw2")


@pytest.fixture
def app(settings, synthesizer):
    return create_app(settings, summarizer=EchoSummarizer(), synthesizer=synthesizer)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def login(client):
    """Sign up (if needed) and log in, returning the auth headers."""

    def _login(username, password):
        client.post("/signup", json={"username": username, "password": password})
        res = client.post("/login", json={"username": username, "password": password})
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}

    return _login
