"""
Domain exceptions raised by the diary backend.

Every error carries the HTTP status it maps to and a short, user-facing
message. The core never builds HTTP responses itself: the handler
registered in :func:`diary_backend.main.create_app` renders any
:class:`DiaryBackendError` as ``{"error": message}``.

Some causes are masked on purpose before they reach this layer:

- an entry that does not exist and an entry owned by someone else both
  surface as :class:`NotFoundError`
- an unknown username and a wrong password both surface as
  :class:`CredentialError`
"""


class DiaryBackendError(Exception):
    """Base class for all errors surfaced to API callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationError(DiaryBackendError):
    status_code = 401
    default_message = "Unauthorized"


class MissingTokenError(AuthenticationError):
    default_message = "Missing token"


class InvalidTokenError(AuthenticationError):
    default_message = "Invalid token"


class ValidationError(DiaryBackendError):
    status_code = 400
    default_message = "Invalid request"


class ConflictError(DiaryBackendError):
    status_code = 400
    default_message = "User exists"


class CredentialError(DiaryBackendError):
    status_code = 400
    default_message = "Invalid credentials"


class NotFoundError(DiaryBackendError):
    status_code = 404
    default_message = "Not found"


class PipelineFailure(DiaryBackendError):
    """An external generator (summarizer or video synthesizer) failed.

    Attributes
    ----------
    stage : str
        ``"summarize"`` or ``"synthesize"``.
    """

    status_code = 502

    def __init__(self, stage: str, message: str | None = None):
        self.stage = stage
        super().__init__(message or f"Diary generation failed at stage '{stage}'")
