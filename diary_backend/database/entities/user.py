import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from diary_backend.database.entities.base import Base


class User(Base):
    """
    A registered identity.

    Attributes
    ----------
    id : uuid.UUID
        Primary key.
    username : str
        Unique, case-sensitive login name.
    password : str
        bcrypt hash of the password. The plaintext is never stored.
    prompt : str
        Personalization prompt forwarded to the summarizer. Defaults to "".
    """

    __tablename__ = "app_user"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    prompt: Mapped[str] = mapped_column(Text, nullable=False, default="")
