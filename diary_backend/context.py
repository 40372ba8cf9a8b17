import logging
from dataclasses import dataclass

from diary_backend.api.auth import SessionGuard
from diary_backend.api.diary_pipeline import DiaryPipeline
from diary_backend.api.utils import TokenService, RevocationCheck, never_revoked
from diary_backend.database.config.config import Settings
from diary_backend.database.core.credentials import CredentialStore
from diary_backend.database.core.diaries import DiaryStore
from diary_backend.database.core.engine import build_engine, build_session_factory, init_db
from diary_backend.database.daos import DiaryDao, UserDao
from diary_backend.services import FileVideoSynthesizer, Summarizer, VideoSynthesizer, build_summarizer

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything a request handler needs, built once at startup."""

    settings: Settings
    credentials: CredentialStore
    diaries: DiaryStore
    tokens: TokenService
    guard: SessionGuard
    pipeline: DiaryPipeline


def build_context(
    settings: Settings,
    summarizer: Summarizer | None = None,
    synthesizer: VideoSynthesizer | None = None,
    is_revoked: RevocationCheck = never_revoked,
) -> AppContext:
    """Wire the stores, token service and pipeline from ``settings``.

    ``summarizer`` and ``synthesizer`` override the configured generators.
    """
    engine = build_engine(settings.DB_URL)
    init_db(engine)
    session_factory = build_session_factory(engine)

    credentials = CredentialStore(UserDao(session_factory), bcrypt_rounds=settings.BCRYPT_ROUNDS)
    diaries = DiaryStore(DiaryDao(session_factory))
    tokens = TokenService(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        is_revoked=is_revoked,
    )
    pipeline = DiaryPipeline(
        credentials,
        diaries,
        summarizer or build_summarizer(settings),
        synthesizer or FileVideoSynthesizer(settings.VIDEO_DIR),
    )
    if settings.SECRET_KEY == Settings.model_fields["SECRET_KEY"].default:
        logger.warning("SECRET_KEY is the built-in default, set it in the environment")
    return AppContext(
        settings=settings,
        credentials=credentials,
        diaries=diaries,
        tokens=tokens,
        guard=SessionGuard(tokens),
        pipeline=pipeline,
    )
