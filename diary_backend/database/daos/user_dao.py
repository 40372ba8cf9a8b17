import uuid

from sqlalchemy import select, update
from sqlalchemy.orm import Session, sessionmaker

from diary_backend.database.entities import User


class UserDao:
    """
    Data access for `User` rows.

    Uniqueness of `username` is left to the database constraint: a
    concurrent duplicate insert surfaces as `sqlalchemy.exc.IntegrityError`
    from :meth:`create_user`.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def create_user(self, username: str, password_hash: str) -> User:
        with self.session_factory() as session:
            user = User(username=username, password=password_hash, prompt="")
            session.add(user)
            session.commit()
            return user

    def get_by_username(self, username: str) -> User | None:
        with self.session_factory() as session:
            return session.scalars(select(User).where(User.username == username)).first()

    def get_by_id(self, user_id: uuid.UUID) -> User | None:
        with self.session_factory() as session:
            return session.get(User, user_id)

    def update_prompt(self, user_id: uuid.UUID, prompt: str) -> bool:
        """Overwrite the prompt. Returns False when no such user exists."""
        with self.session_factory() as session:
            result = session.execute(update(User).where(User.id == user_id).values(prompt=prompt))
            session.commit()
            return result.rowcount > 0
