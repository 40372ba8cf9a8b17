"""
Application factory and entry point.

`create_app` builds the `AppContext` (stores, token service, pipeline) from
the settings, attaches it to `app.state.context`, mounts the router and
registers the error handlers that turn domain exceptions into
`{"error": message}` responses.

Run with ``diary-backend`` or ``uvicorn diary_backend.main:create_app --factory``.
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from diary_backend.api.fast_api import router
from diary_backend.api.utils import RevocationCheck, never_revoked
from diary_backend.context import build_context
from diary_backend.database.config.config import Settings, settings as default_settings
from diary_backend.exceptions import DiaryBackendError
from diary_backend.services import Summarizer, VideoSynthesizer

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def handle_domain_error(request: Request, exc: DiaryBackendError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app(
    settings: Settings | None = None,
    summarizer: Summarizer | None = None,
    synthesizer: VideoSynthesizer | None = None,
    is_revoked: RevocationCheck = never_revoked,
) -> FastAPI:
    """Build the FastAPI application.

    Parameters
    ----------
    settings : Settings, optional
        Defaults to the settings loaded from the environment / `.env`.
    summarizer, synthesizer : optional
        Replace the generators selected by the settings.
    is_revoked : callable, optional
        Revocation hook consulted for every verified token.
    """
    settings = settings or default_settings
    app = FastAPI(title="Diary Backend")
    app.state.context = build_context(settings, summarizer, synthesizer, is_revoked)

    if settings.FRONTEND_URL:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[settings.FRONTEND_URL],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(DiaryBackendError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.include_router(router)
    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    configure_logging(default_settings.LOG_LEVEL)
    uvicorn.run(create_app(), host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
