"""Core DST decode/filter/reassemble modules.

WHY: The core package is the stable heart of the merger: record
classification, stitch filtering, and the merge itself. The CLI and the
HTTP API both call into it and must never reimplement any of it.

HOW: records.py classifies 3-byte stitch records, stream.py splits design
buffers and filters stitch regions, merger.py assembles the merged design,
letters.py validates words and resolves letter file paths, ir.py holds the
dataclasses and errors.py the exception hierarchy.

RULES:
- Pure functions over bytes; no I/O, no module-level mutable state
- Header blocks are opaque and copied verbatim
"""

from dst_merger.core.errors import (
    DesignMergeError,
    EmptyMergeRequest,
    InvalidWordError,
    MalformedRecordStream,
    MissingLetterResource,
)
from dst_merger.core.merger import attach_header, merge_designs, merge_streams
from dst_merger.core.records import RecordKind, classify
from dst_merger.core.stream import filter_stitches, split_design

__all__ = [
    "DesignMergeError",
    "EmptyMergeRequest",
    "InvalidWordError",
    "MalformedRecordStream",
    "MissingLetterResource",
    "RecordKind",
    "attach_header",
    "classify",
    "filter_stitches",
    "merge_designs",
    "merge_streams",
    "split_design",
]
