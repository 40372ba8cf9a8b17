"""
Pydantic request models.

Fields are optional at the schema level so that a missing field reaches the
core and produces the same `{"error": ...}` body as any other validation
failure, instead of FastAPI's default 422 payload.
"""

from pydantic import BaseModel


class UserCredentials(BaseModel):
    username: str | None = None
    password: str | None = None


class PromptData(BaseModel):
    prompt: str | None = None


class ConversationData(BaseModel):
    conversation: str | None = None


class TitleData(BaseModel):
    title: str | None = None


class ThumbnailData(BaseModel):
    thumbnail: str | None = None
    """Opaque reference to an already-produced image (e.g. a frame path)."""
