"""Letter source registry: where letter designs come from.

WHY: The CLI and the API pick a letter source by name or by configuration.
A central dict makes adding a new source one import and one line.

HOW: SOURCES maps string keys to source *classes* (not instances).
Callers instantiate with their own location argument.

RULES:
- Keys are lowercase identifiers
- Values are BaseLetterSource subclasses
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dst_merger.sources.base import build_word
from dst_merger.sources.http import HttpLetterSource
from dst_merger.sources.local import LocalLetterSource

if TYPE_CHECKING:
    from dst_merger.sources.base import BaseLetterSource

SOURCES: dict[str, type[BaseLetterSource]] = {
    "local": LocalLetterSource,
    "http": HttpLetterSource,
}

__all__ = ["SOURCES", "HttpLetterSource", "LocalLetterSource", "build_word"]
