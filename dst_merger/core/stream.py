"""Design buffer splitting and stitch stream filtering.

WHY: Each letter design carries its own color changes and end marker.
Concatenating raw stitch regions would stop the machine after the first
letter and prompt for thread changes mid-word. The filter reduces every
letter to a pure movement stream so the merger can wrap the whole word in
a single color and a single end marker.

HOW: split_design() cuts a buffer at the 512-byte header boundary and
checks the stitch region is a whole number of records. filter_stitches()
walks the region in 3-byte windows and keeps only movement stitches.

RULES:
- Stitch region length must be a multiple of 3 → else MalformedRecordStream
- Every color change and end marker is dropped, wherever it appears
- Movement stitch bytes pass through verbatim, in source order
"""

from __future__ import annotations

import logging

from dst_merger.core.errors import MalformedRecordStream
from dst_merger.core.ir import LetterDesign
from dst_merger.core.records import (
    HEADER_SIZE,
    RECORD_SIZE,
    RecordKind,
    classify,
    iter_records,
)

logger = logging.getLogger(__name__)


def _describe(letter: str | None) -> str:
    return "Letter '{}'".format(letter) if letter else "Design"


def split_design(buffer: bytes, letter: str | None = None) -> LetterDesign:
    """Split a raw DST buffer into header block and stitch region.

    WHY: The header and the stitch region are handled differently. The
    header is carried verbatim, the stitches are filtered. Validating the
    shape here lets the pipeline fail before any merging starts.

    RULES:
    - Buffers shorter than HEADER_SIZE are malformed
    - The stitch region must be a whole number of 3-byte records
    - The letter, when given, is named in the error message

    Args:
        buffer: Complete DST file content.
        letter: Letter the design renders, for error messages.

    Returns:
        LetterDesign with header and stitch bytes.

    Raises:
        MalformedRecordStream: If the buffer has the wrong shape.
    """
    data = bytes(buffer)
    if len(data) < HEADER_SIZE:
        raise MalformedRecordStream(
            "{} is {} bytes, shorter than the {}-byte DST header".format(
                _describe(letter), len(data), HEADER_SIZE
            )
        )

    stitches = data[HEADER_SIZE:]
    if len(stitches) % RECORD_SIZE:
        raise MalformedRecordStream(
            "{} has a {}-byte stitch region, not a multiple of {}".format(
                _describe(letter), len(stitches), RECORD_SIZE
            )
        )

    return LetterDesign(letter=letter, header=data[:HEADER_SIZE], stitches=stitches)


def filter_stitches(stitch_bytes: bytes) -> bytes:
    """Remove every color change and end marker from a stitch region.

    Args:
        stitch_bytes: Stitch region of one design, a multiple of 3 bytes.

    Returns:
        The movement stitch records only, in original order.

    Raises:
        MalformedRecordStream: If the length is not a multiple of 3.
    """
    if len(stitch_bytes) % RECORD_SIZE:
        raise MalformedRecordStream(
            "Stitch stream length {} is not a multiple of {}".format(
                len(stitch_bytes), RECORD_SIZE
            )
        )

    kept = bytearray()
    dropped = 0
    for record in iter_records(stitch_bytes):
        if classify(record) is RecordKind.MOVEMENT_STITCH:
            kept += record
        else:
            dropped += 1

    logger.debug(
        "Filtered stitch stream: kept %d records, dropped %d control records",
        len(kept) // RECORD_SIZE,
        dropped,
    )
    return bytes(kept)
