"""
The `core` package holds the business-facing stores built on the DAOs.

Contents
--------
- engine
    Engine, session factory and schema creation.
- credentials
    `CredentialStore`: signup, login verification (bcrypt), prompt access.
- diaries
    `DiaryStore`: owned diary records with not-found masking.
"""
