"""Abstract base letter source and the fetch-then-merge helper.

WHY: Letter designs live either in a local folder or behind a static web
server. The CLI and the HTTP API should not care which, and both need the
same guarantee: letters come back in word order, and one missing letter
fails the whole word.

HOW: BaseLetterSource is an ABC with two requirements: a ``name``
property and an async ``fetch()`` for one letter. ``fetch_word()`` runs one
task per letter and gathers them, which returns results in argument order
regardless of completion order. On the first failure the remaining tasks
are cancelled and awaited before the error propagates, so no fetch outlives
the word (or the source client it is using). build_word() ties validation,
fetching, and merging together.

RULES:
- fetch() raises MissingLetterResource, never returns partial data
- fetch_word() preserves word order; the first failure aborts the word
- No fetch task is left running once fetch_word() returns or raises
- Sources are async context managers; enter them before fetching

To add a new source:
1. Create a new file in sources/
2. Subclass BaseLetterSource
3. Implement name and fetch()
4. Register in SOURCES dict in sources/__init__.py
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List

from dst_merger.core.ir import MergedDesign
from dst_merger.core.letters import normalize_word
from dst_merger.core.merger import merge_designs

logger = logging.getLogger(__name__)


class BaseLetterSource(ABC):
    """Abstract base for all letter design sources."""

    async def __aenter__(self) -> BaseLetterSource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        return None

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source description, e.g. 'local folder ./letters'."""

    @abstractmethod
    async def fetch(self, letter: str, word_length: int) -> bytes:
        """Return the raw DST bytes for one letter at one word length.

        Args:
            letter: Uppercase A–Z letter.
            word_length: Length of the whole word; selects the size folder.

        Raises:
            MissingLetterResource: If the design cannot be retrieved.
        """

    async def fetch_word(self, word: str) -> List[bytes]:
        """Fetch every letter of a normalized word, in word order."""
        logger.info("Fetching %d letter(s) for %s from %s", len(word), word, self.name)
        tasks = [
            asyncio.create_task(self.fetch(letter, len(word))) for letter in word
        ]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise


async def build_word(raw_word: str, source: BaseLetterSource) -> MergedDesign:
    """Validate a word, fetch its letters, and merge them into one design.

    WHY: This is the complete request flow shared by the CLI and the API.
    Validation happens before any fetch, and every fetch completes before
    the synchronous core runs.

    RULES:
    - source must already be entered (async with)
    - InvalidWordError before any fetch; MissingLetterResource before any merge
    """
    word = normalize_word(raw_word)
    buffers = await source.fetch_word(word)
    return merge_designs(buffers, word=word)
