"""Configuration constants, DST format constants, and .env loading.

WHY: Centralizes every configurable value so it is easy to find, update,
and override. The fixed DST format constants are defined in the core and
re-exported here, so the outer surfaces still read everything from one
place while the core never imports this module.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values. load_letter_source() turns the settings into a
ready-to-use letter source.

RULES:
- HEADER_SIZE is fixed at 512 bytes (Tajima DST header block)
- MAX_WORD_LENGTH is 12 letters; the letter library has no larger sizes
- DST_LETTER_BASE_URL set → letters come over HTTP, else from DST_LETTER_ROOT
- All deployment defaults can be overridden via environment variables
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

# DST format constants live in the core, which must not load .env
from dst_merger.core.letters import DST_EXTENSION, MAX_WORD_LENGTH  # noqa: F401
from dst_merger.core.records import HEADER_SIZE  # noqa: F401

if TYPE_CHECKING:
    from dst_merger.sources.base import BaseLetterSource

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Letter library location
# ---------------------------------------------------------------------------

DST_LETTER_ROOT = os.getenv("DST_LETTER_ROOT", "letters")
DST_LETTER_BASE_URL = os.getenv("DST_LETTER_BASE_URL", "").strip()
DST_HTTP_TIMEOUT = float(os.getenv("DST_HTTP_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

DST_API_HOST = os.getenv("DST_API_HOST", "0.0.0.0")
DST_API_PORT = int(os.getenv("DST_API_PORT", "8000"))


def load_letter_source(
    letters_dir: str | None = None,
    base_url: str | None = None,
) -> BaseLetterSource:
    """Build the letter source described by arguments or the environment.

    WHY: The CLI and the HTTP API both need a letter source, and both let
    the environment decide where the letter library lives.

    HOW: An explicit base_url wins, then an explicit letters_dir, then
    DST_LETTER_BASE_URL, then DST_LETTER_ROOT.

    RULES:
    - Never touches the network or the filesystem; sources are lazy
    """
    from dst_merger.sources import SOURCES

    if base_url:
        return SOURCES["http"](base_url)
    if letters_dir:
        return SOURCES["local"](letters_dir)
    if DST_LETTER_BASE_URL:
        return SOURCES["http"](DST_LETTER_BASE_URL)
    return SOURCES["local"](DST_LETTER_ROOT)
