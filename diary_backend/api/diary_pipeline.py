"""diary_pipeline
=================

Turns a raw conversation into a persisted, owned diary entry.

The pipeline runs four steps for the calling identity:

1. **Prompt lookup**: the caller's personalization prompt ("" if none).
2. **Summarization**: the injected :class:`~diary_backend.services.Summarizer`.
3. **Title derivation**: the first 20 characters of the summary.
4. **Video synthesis**: the injected
   :class:`~diary_backend.services.VideoSynthesizer`.

Only when all of them succeed is the entry written to the
:class:`~diary_backend.database.core.diaries.DiaryStore`. A failure in
either generator raises :class:`~diary_backend.exceptions.PipelineFailure`
naming the stage and leaves the store untouched. Nothing is retried.

Store access is synchronous SQLAlchemy, so it is pushed to the thread pool
and the event loop only ever waits on the generators.
"""

import logging

from fastapi.concurrency import run_in_threadpool

from diary_backend.database.core.credentials import CredentialStore
from diary_backend.database.core.diaries import DiaryStore
from diary_backend.domain import CallerIdentity, CreatedDiary
from diary_backend.exceptions import PipelineFailure, ValidationError
from diary_backend.services import Summarizer, VideoSynthesizer

logger = logging.getLogger(__name__)

TITLE_LENGTH = 20


def derive_title(summary: str) -> str:
    """Plain character truncation, not word-boundary aware."""
    return summary[:TITLE_LENGTH]


class DiaryPipeline:
    """Summarize, title, synthesize, persist.

    Args:
        credentials: Source of the caller's personalization prompt.
        diaries: Destination of the finished entry.
        summarizer: Conversation → summary text.
        synthesizer: Summary → opaque video reference.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        diaries: DiaryStore,
        summarizer: Summarizer,
        synthesizer: VideoSynthesizer,
    ):
        self.credentials = credentials
        self.diaries = diaries
        self.summarizer = summarizer
        self.synthesizer = synthesizer

    async def summarize(self, conversation: str, prompt: str) -> str:
        try:
            summary = await self.summarizer.summarize(conversation, prompt)
        except Exception as e:
            logger.exception("Summarizer failed")
            raise PipelineFailure("summarize") from e
        if not isinstance(summary, str):
            logger.error("Summarizer returned %s instead of str", type(summary).__name__)
            raise PipelineFailure("summarize")
        return summary

    async def synthesize(self, summary: str) -> str:
        try:
            video = await self.synthesizer.synthesize(summary)
        except Exception as e:
            logger.exception("Video synthesizer failed")
            raise PipelineFailure("synthesize") from e
        return str(video)

    async def run_full_pipeline(self, caller: CallerIdentity, conversation: str | None) -> CreatedDiary:
        """Run every step for ``caller`` and return the new entry id and summary.

        Raises:
            ValidationError: If ``conversation`` is missing or empty.
            PipelineFailure: If a generator fails. No entry is stored.
        """
        if not conversation:
            raise ValidationError("Missing conversation")

        prompt = await run_in_threadpool(self.credentials.get_prompt, caller.identity_id)
        summary = await self.summarize(conversation, prompt)
        title = derive_title(summary)
        video = await self.synthesize(summary)

        entry_id = await run_in_threadpool(
            self.diaries.create,
            owner_id=caller.identity_id,
            conversation=conversation,
            summary=summary,
            title=title,
            video=video,
            thumbnail="",
        )
        logger.info("Diary %s generated for %s", entry_id, caller.username)
        return CreatedDiary(id=entry_id, summary=summary)
