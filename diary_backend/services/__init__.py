"""
External generators used by the diary pipeline.

Contents
--------
- summarizers
    `Summarizer` interface, `EchoSummarizer`, `OpenAISummarizer` (langchain-openai)
- video
    `VideoSynthesizer` interface, `FileVideoSynthesizer`
"""
from diary_backend.services.summarizers import (
    EchoSummarizer,
    OpenAISummarizer,
    Summarizer,
    build_summarizer,
)
from diary_backend.services.video import FileVideoSynthesizer, VideoSynthesizer

__all__ = [
    "Summarizer",
    "EchoSummarizer",
    "OpenAISummarizer",
    "build_summarizer",
    "VideoSynthesizer",
    "FileVideoSynthesizer",
]
