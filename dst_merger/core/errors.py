"""Exception hierarchy for the merge pipeline.

WHY: Callers (CLI, HTTP API) need typed exceptions to turn failures into
the right exit code or status code, and a single base class to catch
"the merge failed" without swallowing programming errors.

HOW: DesignMergeError is the root. Input and data errors also subclass
ValueError so generic validation handlers keep working.

RULES:
- Every error is terminal for the request; no partial output, no retry
- Messages are human-readable and safe to show to the user verbatim
"""

from __future__ import annotations


class DesignMergeError(Exception):
    """Base class for all merge pipeline failures."""


class MissingLetterResource(DesignMergeError):
    """Raised when a requested letter's design could not be retrieved.

    WHY: One missing letter makes the whole word unusable. The message
    names the letter so the user knows which file is absent.

    RULES:
    - letter: the uppercase letter that failed
    - location: where it was looked for (path or URL), may be None
    - reason: short cause, e.g. "not found" or "HTTP 503"
    """

    def __init__(
        self,
        letter: str,
        location: str | None = None,
        reason: str = "not found",
    ) -> None:
        self.letter = letter
        self.location = location
        self.reason = reason
        message = f"Letter '{letter}' design {reason}"
        if location:
            message += f": {location}"
        super().__init__(message)


class MalformedRecordStream(DesignMergeError, ValueError):
    """Raised when a design is not a valid header plus whole 3-byte records."""


class EmptyMergeRequest(DesignMergeError, ValueError):
    """Raised when a merge is requested with zero designs."""


class InvalidWordError(DesignMergeError, ValueError):
    """Raised when the requested word has no usable letters or too many."""
