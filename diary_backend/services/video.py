"""
Video synthesizers produce the video artifact attached to a diary entry.

The backend only keeps the returned reference; it never opens the file.
"""

import asyncio
import logging
import time
import uuid
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class VideoSynthesizer(Protocol):
    async def synthesize(self, summary: str) -> str:
        ...


class FileVideoSynthesizer:
    """Write an empty placeholder ``.mp4`` under ``video_dir`` and return its path.

    Stands in for a real video generation service until one is wired in.
    """

    def __init__(self, video_dir: str | Path = "videos"):
        self.video_dir = Path(video_dir)

    async def synthesize(self, summary: str) -> str:
        return await asyncio.to_thread(self._write_placeholder)

    def _write_placeholder(self) -> str:
        self.video_dir.mkdir(parents=True, exist_ok=True)
        path = self.video_dir / f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}.mp4"
        path.write_bytes(b"")
        logger.debug("Wrote placeholder video %s", path)
        return path.as_posix()
