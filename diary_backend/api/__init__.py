"""
The `api` package defines the backend's HTTP interface,
along with supporting utilities and data models.

It integrates FastAPI routing, JWT authentication, and the diary
generation pipeline. The package ensures clean request/response
validation, secure access control, and orchestration of the pipeline
workflow.

Contents
--------
- fast_api
    Defines the FastAPI router with endpoints for:
        * User signup and login
        * Personalization prompt read/update
        * Diary generation, listing, retrieval and editing

- models
    Pydantic schemas for request validation

- utils
    JWT utilities:
        * `TokenService.issue`: issues signed JWTs with expiration
        * `TokenService.verify`: validates JWTs and extracts user identity

- auth
    `SessionGuard` and the `current_caller` dependency guarding every
    protected route

- diary_pipeline
    Orchestration of the diary workflow:
        * Summarizes the conversation with the caller's prompt
        * Derives the title and requests the video artifact
        * Persists the entry only when every step succeeded
"""
