"""
Summarizers turn a raw conversation into the text of a diary entry.

A summarizer is any object with an async ``summarize(conversation, prompt)``
method returning a string. Two implementations ship with the backend:

- :class:`EchoSummarizer` is deterministic and offline: it prefixes the
  personalization prompt and truncates. It is the default.
- :class:`OpenAISummarizer` asks an OpenAI chat model (through
  ``langchain-openai``) to write the entry in the user's voice.
"""

import logging
from typing import Protocol

from langchain_core.prompts import PromptTemplate
from langchain_openai import ChatOpenAI

logger = logging.getLogger(__name__)


class Summarizer(Protocol):
    async def summarize(self, conversation: str, prompt: str) -> str:
        ...


class EchoSummarizer:
    """``"[<prompt>] <conversation>"`` (prefix omitted for an empty prompt), cut to ``max_length``."""

    def __init__(self, max_length: int = 100):
        self.max_length = max_length

    async def summarize(self, conversation: str, prompt: str) -> str:
        prefix = f"[{prompt}] " if prompt else ""
        return f"{prefix}{conversation}"[:self.max_length]


DIARY_PROMPT = """
    You are writing a short personal diary entry on behalf of the user.

    Read the conversation below and summarize what happened, how the user felt,
    and anything worth remembering. Write in the first person, in the same
    language as the conversation, as plain prose with no headings or lists.

    The user asked for the following personal style (may be empty):
        {prompt}

    Conversation:
        {conversation}

    Keep the entry under {max_length} characters.

    Diary entry:
"""


class OpenAISummarizer:
    """Summarize with an OpenAI chat model.

    Args:
        model_name: OpenAI model name, e.g. ``gpt-4o-mini``.
        api_key: OpenAI API key.
        max_length: Hard cap applied to the model output.
        model: Optional pre-built chat model, mainly for tests.
    """

    def __init__(self, model_name: str, api_key: str | None, max_length: int = 100, model=None):
        self.max_length = max_length
        self.template = PromptTemplate.from_template(DIARY_PROMPT)
        self.model = model or ChatOpenAI(model=model_name, api_key=api_key, temperature=0.7)

    async def summarize(self, conversation: str, prompt: str) -> str:
        message = self.template.format(conversation=conversation, prompt=prompt, max_length=self.max_length)
        response = await self.model.ainvoke(message)
        content = response.content if hasattr(response, "content") else response
        return str(content).strip()[:self.max_length]


def build_summarizer(settings) -> Summarizer:
    """Pick the summarizer configured by ``settings.SUMMARIZER_BACKEND``."""
    backend = settings.SUMMARIZER_BACKEND.lower()
    if backend == "openai":
        if not settings.API_KEY:
            raise RuntimeError("API_KEY must be set to use the openai summarizer")
        logger.info("Using OpenAI summarizer with model %s", settings.OPEN_AI_MODEL)
        return OpenAISummarizer(settings.OPEN_AI_MODEL, settings.API_KEY, settings.SUMMARY_MAX_LENGTH)
    if backend == "stub":
        return EchoSummarizer(settings.SUMMARY_MAX_LENGTH)
    raise RuntimeError(f"Unknown SUMMARIZER_BACKEND {settings.SUMMARIZER_BACKEND!r}")
