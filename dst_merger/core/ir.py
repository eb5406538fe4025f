"""Dataclasses for letter designs and the merged result.

WHY: Raw byte buffers carry no context. The pipeline needs to know which
letter a buffer belongs to, where its header ends, and what word a merged
design spells, so that errors and filenames can name them.

HOW: Two frozen dataclasses form the pipeline's data model:
  LetterDesign: one input design split into header block and stitch region
  MergedDesign: the merged header and stitch payload for a whole word

RULES:
- Both are immutable once constructed
- header is always the raw 512-byte DST header block, never reinterpreted
- MergedDesign.payload starts with 00 00 F0 and ends with 00 00 F3
"""

from __future__ import annotations

from dataclasses import dataclass

from dst_merger.core.letters import output_filename
from dst_merger.core.records import RECORD_SIZE


@dataclass(frozen=True)
class LetterDesign:
    """One input design split into its header block and stitch region.

    RULES:
    - letter: uppercase letter this design renders, or None if unknown
    - header: first 512 bytes of the source buffer
    - stitches: remaining bytes, a whole number of 3-byte records
    """

    letter: str | None
    header: bytes
    stitches: bytes

    @property
    def record_count(self) -> int:
        return len(self.stitches) // RECORD_SIZE


@dataclass(frozen=True)
class MergedDesign:
    """The merged design for a whole word.

    WHY: The delivery layer needs the final bytes, a filename, and a few
    numbers for status output. Keeping the header and payload separate
    lets tests check each half without slicing.

    RULES:
    - word: the word the design spells (may be empty when merged anonymously)
    - header: first letter's header block, verbatim
    - payload: wrapped stitch region (leading color change, trailing end)
    - data: complete file content, header followed by payload
    """

    word: str
    header: bytes
    payload: bytes
    data: bytes

    @property
    def filename(self) -> str:
        return output_filename(self.word or "design")

    @property
    def stitch_count(self) -> int:
        """Number of movement stitches, excluding the two wrapper records."""
        return len(self.payload) // RECORD_SIZE - 2

    def __len__(self) -> int:
        return len(self.data)
