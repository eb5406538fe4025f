"""Stitch stream merging, header carrying, and the full merge pipeline.

WHY: A word is stitched as one continuous design. The machine needs one
thread color at the start and one end marker at the very end, with every
letter's movement stitches in between in reading order.

HOW: merge_streams() computes the payload length once (6 + sum of stream
lengths), allocates one bytearray, and writes the leading color change,
each filtered stream, and the trailing end marker sequentially.
attach_header() prepends the first letter's header block. merge_designs()
runs split → filter → merge → attach for a list of raw buffers.

RULES:
- Output stitch region: 00 00 F0 ++ streams in caller order ++ 00 00 F3
- No control records anywhere between the two wrapper records
- Only the first design's header survives; it is copied byte for byte
- KNOWN LIMITATION: the carried header still describes the first letter
  (stitch count, extents, label), not the merged word
- Zero inputs → EmptyMergeRequest; malformed inputs fail before merging
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from dst_merger.core.errors import EmptyMergeRequest
from dst_merger.core.ir import MergedDesign
from dst_merger.core.records import (
    COLOR_CHANGE_RECORD,
    END_OF_DESIGN_RECORD,
    HEADER_SIZE,
    RECORD_SIZE,
)
from dst_merger.core.stream import filter_stitches, split_design

logger = logging.getLogger(__name__)

_WRAPPER_SIZE = len(COLOR_CHANGE_RECORD) + len(END_OF_DESIGN_RECORD)


def merge_streams(ordered_streams: Sequence[bytes]) -> bytes:
    """Concatenate filtered stitch streams between one color change and one end marker.

    Args:
        ordered_streams: Filtered stitch streams in word order.

    Returns:
        The stitch payload (header excluded).

    Raises:
        EmptyMergeRequest: If ordered_streams is empty.
    """
    if not ordered_streams:
        raise EmptyMergeRequest("No DST designs to merge")

    total = _WRAPPER_SIZE + sum(len(stream) for stream in ordered_streams)
    payload = bytearray(total)

    offset = 0
    payload[offset:offset + RECORD_SIZE] = COLOR_CHANGE_RECORD
    offset += RECORD_SIZE

    for stream in ordered_streams:
        payload[offset:offset + len(stream)] = stream
        offset += len(stream)

    payload[offset:offset + RECORD_SIZE] = END_OF_DESIGN_RECORD
    return bytes(payload)


def attach_header(header_block: bytes, stitch_payload: bytes) -> bytes:
    """Prepend a DST header block to a stitch payload, unchanged.

    Raises:
        ValueError: If header_block is not exactly HEADER_SIZE bytes.
    """
    if len(header_block) != HEADER_SIZE:
        raise ValueError(
            "DST header block must be {} bytes, got {}".format(
                HEADER_SIZE, len(header_block)
            )
        )
    return bytes(header_block) + bytes(stitch_payload)


def merge_designs(
    buffers: Sequence[bytes],
    word: Optional[str] = None,
) -> MergedDesign:
    """Merge raw letter design buffers into one design.

    WHY: This is the single entry point the CLI and the HTTP API call once
    all letters have been fetched in word order.

    HOW: Splits every buffer first so a malformed letter fails the request
    before any merging. Then filters each stitch region, merges them in the
    given order, and carries the first header.

    RULES:
    - buffers are in word order; buffers[i] renders word[i] when word is given
    - A word must have exactly one letter per buffer
    - Stateless; the same inputs always produce byte-identical output

    Args:
        buffers: Complete DST file contents, one per letter, in order.
        word: The word being spelled, used for error messages and the filename.

    Returns:
        The MergedDesign.

    Raises:
        EmptyMergeRequest: If no buffers are given.
        MalformedRecordStream: If any buffer is not a valid DST design.
        ValueError: If word is given and its length differs from len(buffers).
    """
    if not buffers:
        raise EmptyMergeRequest("No DST designs to merge")
    if word and len(word) != len(buffers):
        raise ValueError(
            "Word '{}' has {} letters but {} designs were given".format(
                word, len(word), len(buffers)
            )
        )

    letters = list(word) if word else [None] * len(buffers)
    designs = [split_design(buffer, letter) for buffer, letter in zip(buffers, letters)]

    streams = [filter_stitches(design.stitches) for design in designs]
    payload = merge_streams(streams)
    header = designs[0].header

    merged = MergedDesign(
        word=word or "",
        header=header,
        payload=payload,
        data=attach_header(header, payload),
    )
    logger.info(
        "Merged %d design(s) into %s: %d stitches, %d bytes",
        len(designs),
        merged.filename,
        merged.stitch_count,
        len(merged),
    )
    return merged
