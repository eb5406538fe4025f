"""Letter source backed by a local letter library folder.

WHY: The letter library is usually a folder of DST files shipped with
the tool (letters1/ … letters10/, letters1112/). Reading it directly is the
simplest deployment.

HOW: Resolves letter_path() under the root folder and reads the file in a
worker thread via asyncio.to_thread, so a slow disk never stalls the
event loop the API serves requests on.

RULES:
- Missing or unreadable file → MissingLetterResource naming the letter
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dst_merger.core.errors import MissingLetterResource
from dst_merger.core.letters import letter_path
from dst_merger.sources.base import BaseLetterSource

logger = logging.getLogger(__name__)


class LocalLetterSource(BaseLetterSource):
    """Reads letter designs from a folder on disk."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    @property
    def name(self) -> str:
        return "local folder {}".format(self.root)

    async def fetch(self, letter: str, word_length: int) -> bytes:
        path = self.root / letter_path(letter, word_length)
        if not path.is_file():
            raise MissingLetterResource(
                letter,
                str(path),
                reason="not found for size {}".format(word_length),
            )
        try:
            data = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise MissingLetterResource(letter, str(path), reason=str(exc)) from exc

        logger.debug("Read %s (%d bytes)", path, len(data))
        return data
