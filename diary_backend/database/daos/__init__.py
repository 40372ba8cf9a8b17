"""
The `daos` package provides the Data Access Layer for the application.

It is responsible for all interactions with the database entities,
encapsulating CRUD operations that support the core functionality
of the system. Each DAO operates on a specific entity and abstracts
away the direct SQLAlchemy queries, offering a cleaner API to the
core stores.

Contents
--------
- UserDao
    Handles user persistence:
    * Creates users from an already-hashed password
    * Fetches users by username or id
    * Overwrites the personalization prompt

- DiaryDao
    Manages diary records:
    * Creates entries with a per-owner monotonic creation date
    * Lists entries by owner (most recent first)
    * Fetches and updates entries filtered by id and owner together
"""
from diary_backend.database.daos.user_dao import UserDao
from diary_backend.database.daos.diary_dao import DiaryDao

__all__ = ["UserDao", "DiaryDao"]
