"""Word validation and letter library layout.

WHY: The letter library holds one DST file per letter per word length;
longer words use smaller letters so the whole word fits the hoop. Both the
CLI and the HTTP API must accept the same words and resolve the same files.

HOW: normalize_word() cleans user input down to A–Z and enforces the
length limit. size_folder() and letter_path() map (letter, word length) to
a path relative to the library root.

RULES:
- Input is trimmed and uppercased; non A–Z characters are dropped
- 1 to MAX_WORD_LENGTH (12) letters after cleaning
- Word lengths 1–10 have their own folder: letters{n}/{L}{n}.dst
- Word lengths 11 and 12 share one folder: letters1112/{L}.dst
"""

from __future__ import annotations

import re

from dst_merger.core.errors import InvalidWordError

DST_EXTENSION = ".dst"

MAX_WORD_LENGTH = 12

_LETTER_RE = re.compile(r"[A-Z]")

_SHARED_SIZE_FOLDER = "1112"
_LARGEST_OWN_FOLDER = 10


def normalize_word(raw: str) -> str:
    """Reduce user input to the uppercase A–Z letters that will be stitched.

    Raises:
        InvalidWordError: If no letters remain or there are more than 12.
    """
    letters = _LETTER_RE.findall(raw.strip().upper())
    if not letters:
        raise InvalidWordError("Please enter at least one valid letter (A-Z)")
    if len(letters) > MAX_WORD_LENGTH:
        raise InvalidWordError(
            "Maximum {} letters allowed".format(MAX_WORD_LENGTH)
        )
    return "".join(letters)


def size_folder(word_length: int) -> str:
    """Return the size key of the library folder for a word length."""
    if 11 <= word_length <= 12:
        return _SHARED_SIZE_FOLDER
    return str(min(max(word_length, 1), _LARGEST_OWN_FOLDER))


def letter_path(letter: str, word_length: int) -> str:
    """Return the library-relative POSIX path of one letter's design.

    Example:
        letter_path("A", 3)  → "letters3/A3.dst"
        letter_path("A", 11) → "letters1112/A.dst"
    """
    size = size_folder(word_length)
    if size == _SHARED_SIZE_FOLDER:
        return "letters{}/{}{}".format(size, letter, DST_EXTENSION)
    return "letters{}/{}{}{}".format(size, letter, size, DST_EXTENSION)


def output_filename(word: str) -> str:
    """Return the download filename for a merged word."""
    return "{}{}".format(word, DST_EXTENSION)
