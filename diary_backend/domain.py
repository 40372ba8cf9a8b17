"""Domain objects passed between the core components and the API layer."""

import uuid
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Identity:
    """A registered user. The password hash never leaves the credential store."""

    id: uuid.UUID
    username: str
    prompt: str = ""


@dataclass(frozen=True)
class CallerIdentity:
    """The identity resolved from a verified session token."""

    identity_id: uuid.UUID
    username: str


@dataclass(frozen=True)
class DiaryEntry:
    id: uuid.UUID
    owner: uuid.UUID
    conversation: str
    summary: str
    video: str
    date: datetime
    title: str
    thumbnail: str

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "owner": str(self.owner),
            "conversation": self.conversation,
            "summary": self.summary,
            "video": self.video,
            "date": self.date.isoformat(),
            "title": self.title,
            "thumbnail": self.thumbnail,
        }


@dataclass(frozen=True)
class DiarySummary:
    """The listing view of a diary entry."""

    id: uuid.UUID
    title: str
    date: datetime
    thumbnail: str

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "date": self.date.isoformat(),
            "thumbnail": self.thumbnail,
        }


@dataclass(frozen=True)
class CreatedDiary:
    id: uuid.UUID
    summary: str
