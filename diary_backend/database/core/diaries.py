"""
Diary store: owned diary records.

Lookups and updates take the caller's identity and fail with
:class:`~diary_backend.exceptions.NotFoundError` whenever the caller does
not own a matching entry. A malformed id, a missing entry and somebody
else's entry all produce the same error.
"""

import logging
import uuid

from diary_backend.database.daos import DiaryDao
from diary_backend.database.daos.diary_dao import as_utc
from diary_backend.database.entities import Diary
from diary_backend.domain import DiaryEntry, DiarySummary
from diary_backend.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def _parse_id(entry_id: uuid.UUID | str) -> uuid.UUID:
    if isinstance(entry_id, uuid.UUID):
        return entry_id
    try:
        return uuid.UUID(str(entry_id))
    except ValueError:
        raise NotFoundError("Not found") from None


def _to_entry(diary: Diary) -> DiaryEntry:
    return DiaryEntry(
        id=diary.id,
        owner=diary.user_id,
        conversation=diary.conversation,
        summary=diary.summary,
        video=diary.video,
        date=as_utc(diary.date),
        title=diary.title,
        thumbnail=diary.thumbnail,
    )


class DiaryStore:

    def __init__(self, diaries: DiaryDao):
        self.diaries = diaries

    def create(self, owner_id: uuid.UUID, conversation: str, summary: str, title: str,
               video: str, thumbnail: str = "") -> uuid.UUID:
        diary = self.diaries.create(
            user_id=owner_id,
            conversation=conversation,
            summary=summary,
            video=video,
            title=title,
            thumbnail=thumbnail,
        )
        logger.info("Created diary %s for %s", diary.id, owner_id)
        return diary.id

    def list_by_owner(self, owner_id: uuid.UUID) -> list[DiarySummary]:
        return [
            DiarySummary(id=d.id, title=d.title, date=as_utc(d.date), thumbnail=d.thumbnail)
            for d in self.diaries.list_by_owner(owner_id)
        ]

    def get(self, entry_id: uuid.UUID | str, caller_id: uuid.UUID) -> DiaryEntry:
        diary = self.diaries.get_owned(_parse_id(entry_id), caller_id)
        if diary is None:
            logger.debug("Diary %s not visible to %s", entry_id, caller_id)
            raise NotFoundError("Not found")
        return _to_entry(diary)

    def update_title(self, entry_id: uuid.UUID | str, caller_id: uuid.UUID, title: str) -> None:
        self._update(entry_id, caller_id, title=title)

    def update_thumbnail(self, entry_id: uuid.UUID | str, caller_id: uuid.UUID, thumbnail: str) -> None:
        """Store an opaque reference to an already-produced image. The reference is not inspected."""
        self._update(entry_id, caller_id, thumbnail=thumbnail)

    def count(self) -> int:
        return self.diaries.count()

    def _update(self, entry_id, caller_id, **values) -> None:
        if not self.diaries.update_owned(_parse_id(entry_id), caller_id, **values):
            logger.debug("Diary %s not visible to %s", entry_id, caller_id)
            raise NotFoundError("Not found")
