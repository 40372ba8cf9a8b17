import threading
import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session, sessionmaker

from diary_backend.database.entities import Diary


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from backends that drop the offset (SQLite)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class DiaryDao:
    """
    Data access for `Diary` rows.

    Every read or write that targets a single entry filters on the entry id
    *and* the owner id together, so an entry owned by someone else is simply
    not matched.

    Creation dates are made strictly increasing per owner under a
    process-local lock. Several worker processes writing for the same owner,
    or a backend that stores DATETIME at second precision, can still produce
    equal dates; entries sharing a date have no defined relative order in
    :meth:`list_by_owner`.
    """

    _date_lock = threading.Lock()

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def create(self, user_id: uuid.UUID, conversation: str, summary: str, video: str,
               title: str, thumbnail: str = "") -> Diary:
        """
        Insert a new entry and assign its creation date.

        The date is strictly greater than the date of every earlier entry of
        the same owner, so listing by date reflects insertion order even
        when two entries are created within the clock's resolution.
        """
        with self._date_lock, self.session_factory() as session:
            now = datetime.now(timezone.utc)
            last = session.scalar(select(func.max(Diary.date)).where(Diary.user_id == user_id))
            if last is not None and now <= as_utc(last):
                now = as_utc(last) + timedelta(microseconds=1)
            diary = Diary(
                user_id=user_id,
                conversation=conversation,
                summary=summary,
                video=video,
                date=now,
                title=title,
                thumbnail=thumbnail,
            )
            session.add(diary)
            session.commit()
            return diary

    def list_by_owner(self, user_id: uuid.UUID) -> list[Diary]:
        """Entries of ``user_id``, most recent first."""
        with self.session_factory() as session:
            stmt = select(Diary).where(Diary.user_id == user_id).order_by(Diary.date.desc())
            return list(session.scalars(stmt))

    def get_owned(self, diary_id: uuid.UUID, user_id: uuid.UUID) -> Diary | None:
        with self.session_factory() as session:
            stmt = select(Diary).where(Diary.id == diary_id, Diary.user_id == user_id)
            return session.scalars(stmt).first()

    def update_owned(self, diary_id: uuid.UUID, user_id: uuid.UUID, **values) -> bool:
        """Update mutable fields of an owned entry. Returns False when nothing matched."""
        with self.session_factory() as session:
            stmt = update(Diary).where(Diary.id == diary_id, Diary.user_id == user_id).values(**values)
            result = session.execute(stmt)
            session.commit()
            return result.rowcount > 0

    def count(self) -> int:
        with self.session_factory() as session:
            return session.scalar(select(func.count()).select_from(Diary))
