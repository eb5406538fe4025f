"""Shared test fixtures for the dst_merger test suite.

WHY: Every test module needs small, byte-exact DST designs. Building them
in one place keeps the header layout and record bytes consistent and
makes expected outputs easy to read.

HOW: make_header() builds a 512-byte DST-style header whose label field
identifies the letter. make_design() appends raw 3-byte records. The
letter_library fixture writes a tiny on-disk library in the real folder
layout (letters{n}/{L}{n}.dst, letters1112/{L}.dst).

RULES:
- Headers are exactly 512 bytes and differ per letter
- Record bytes are spelled out literally in tests that check output bytes
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable

import pytest

from dst_merger.core.letters import letter_path

HEADER_SIZE = 512

COLOR_CHANGE = b"\x00\x00\xf0"
END = b"\x00\x00\xf3"


def make_header(label: str = "A") -> bytes:
    """A 512-byte header in the DST text layout, padded with spaces."""
    text = "LA:{:<16}\rST:{:>7}\rCO:{:>3}\r".format(label, 2, 0).encode("ascii")
    return (text + b"\x1a").ljust(HEADER_SIZE, b" ")


def make_design(label: str, records: Iterable[bytes]) -> bytes:
    """A complete DST buffer: header for label followed by the given records."""
    return make_header(label) + b"".join(records)


# Per-letter stitch regions used across the suite. Each letter has its own
# movement bytes so order mistakes show up in byte comparisons.
LETTER_RECORDS: Dict[str, list] = {
    "A": [COLOR_CHANGE, b"\x01\x01\x03", b"\x02\x02\x03", END],
    "B": [COLOR_CHANGE, b"\x11\x11\x03", b"\x12\x12\x03", END],
    "C": [COLOR_CHANGE, b"\x21\x21\x03", COLOR_CHANGE, b"\x22\x22\x83", END],
}


def filtered(letter: str) -> bytes:
    """Expected filtered stitch stream for a letter in LETTER_RECORDS."""
    return b"".join(
        r for r in LETTER_RECORDS[letter] if r[2] not in (0xF0, 0xF3)
    )


@pytest.fixture
def design_a() -> bytes:
    return make_design("A", LETTER_RECORDS["A"])


@pytest.fixture
def design_b() -> bytes:
    return make_design("B", LETTER_RECORDS["B"])


@pytest.fixture
def design_c() -> bytes:
    return make_design("C", LETTER_RECORDS["C"])


def write_letter(root: Path, letter: str, word_length: int, data: bytes) -> Path:
    path = root / letter_path(letter, word_length)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture
def letter_library(tmp_path: Path) -> Path:
    """A letter library with A, B, C for word lengths 1–3 and A, B for 11/12."""
    root = tmp_path / "letters"
    for letter, records in LETTER_RECORDS.items():
        data = make_design(letter, records)
        for word_length in (1, 2, 3):
            write_letter(root, letter, word_length, data)
    for letter in ("A", "B"):
        write_letter(root, letter, 11, make_design(letter, LETTER_RECORDS[letter]))
    return root
