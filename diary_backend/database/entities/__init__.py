"""
The `entities` package defines the ORM models of the application,
representing the database tables as Python classes via SQLAlchemy.

These entity classes are the foundation of the persistence layer,
used by DAOs (`daos` package) to perform CRUD operations.

Tech Stack & Conventions
------------------------
- SQLAlchemy 2.0 style `Mapped[...]` + `mapped_column(...)`
- Portable `Uuid` primary keys
- Timezone-aware timestamps (UTC)

Contents
--------
- User
    Represents a registered identity in the system.
    * Stores the unique username and the bcrypt password hash
    * Holds the personalization prompt used for summarization

- Diary
    Represents a diary entry belonging to a user.
    * Stores the raw conversation, generated summary and video reference
    * Tracks creation date (UTC), title and thumbnail reference
    * Owner (`user_id`) is fixed at creation
"""
from diary_backend.database.entities.base import Base
from diary_backend.database.entities.user import User
from diary_backend.database.entities.diary import Diary

__all__ = ["Base", "User", "Diary"]
