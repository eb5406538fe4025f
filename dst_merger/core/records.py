"""DST stitch record classification.

WHY: A DST stitch region mixes movement stitches with control records.
The merger keeps the former and drops the latter, so every record must be
classified exactly once and by one rule.

HOW: Only the third byte of a record is inspected. 0xF0 marks a color
change, 0xF3 marks the end of the design, anything else is a movement
stitch whose first two bytes are opaque payload.

RULES:
- The header block is HEADER_SIZE (512) bytes and is never parsed
- Records are exactly RECORD_SIZE (3) bytes
- classify() is total over 3-byte inputs and has no side effects
- b0 and b1 are never reinterpreted
"""

from __future__ import annotations

import enum
from collections.abc import Iterator

HEADER_SIZE = 512
"""Size of the DST header block in bytes."""

RECORD_SIZE = 3

COLOR_CHANGE_CODE = 0xF0
END_OF_DESIGN_CODE = 0xF3

COLOR_CHANGE_RECORD = bytes((0x00, 0x00, COLOR_CHANGE_CODE))
END_OF_DESIGN_RECORD = bytes((0x00, 0x00, END_OF_DESIGN_CODE))


class RecordKind(str, enum.Enum):
    """The three kinds of DST stitch record.

    HOW: Inherits from str so values serialize cleanly to JSON and logs.
    """

    MOVEMENT_STITCH = "movement_stitch"
    COLOR_CHANGE = "color_change"
    END_OF_DESIGN = "end_of_design"


def classify(record: bytes) -> RecordKind:
    """Classify one 3-byte stitch record by its control byte.

    Args:
        record: Exactly three bytes.

    Returns:
        The RecordKind of the record.

    Raises:
        ValueError: If record is not exactly three bytes long.
    """
    if len(record) != RECORD_SIZE:
        raise ValueError(
            "Stitch records are {} bytes, got {}".format(RECORD_SIZE, len(record))
        )
    control = record[2]
    if control == COLOR_CHANGE_CODE:
        return RecordKind.COLOR_CHANGE
    if control == END_OF_DESIGN_CODE:
        return RecordKind.END_OF_DESIGN
    return RecordKind.MOVEMENT_STITCH


def iter_records(data: bytes) -> Iterator[bytes]:
    """Yield consecutive, non-overlapping 3-byte records from offset 0.

    The caller guarantees len(data) is a multiple of RECORD_SIZE.
    """
    for offset in range(0, len(data), RECORD_SIZE):
        yield bytes(data[offset:offset + RECORD_SIZE])
