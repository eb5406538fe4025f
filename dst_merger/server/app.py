"""FastAPI application that delivers merged word designs as downloads.

WHY: The lettering front end (a text box and a button) needs a backend
that turns a word into one DST file the browser can download. External
tools (curl, automation) use the same endpoints.

HOW: POST /designs takes the word as a form field, GET /designs/{word}
takes it in the path for plain download links. Both fetch the letters
from the configured source, merge them, and return the bytes as an
attachment named {WORD}.dst. The merge is fast, so it runs inline and there
is no job queue.

RULES:
- InvalidWordError / EmptyMergeRequest → 400
- MissingLetterResource → 404 (message names the letter)
- MalformedRecordStream → 422
- No partial or corrupted design is ever returned
- The letter source is resolved per request from configuration
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import Response

from dst_merger import __version__
from dst_merger.config import DST_API_HOST, DST_API_PORT, load_letter_source
from dst_merger.core.errors import (
    DesignMergeError,
    EmptyMergeRequest,
    InvalidWordError,
    MalformedRecordStream,
    MissingLetterResource,
)
from dst_merger.core.ir import MergedDesign
from dst_merger.core.letters import letter_path, normalize_word, output_filename
from dst_merger.server.models import (
    ErrorResponse,
    HealthResponse,
    LetterFile,
    WordLettersResponse,
)
from dst_merger.sources.base import build_word

logger = logging.getLogger(__name__)

DST_MEDIA_TYPE = "application/octet-stream"

app = FastAPI(
    title="DST Word Merger API",
    description=(
        "Merge single-letter Tajima DST embroidery designs into one design "
        "that stitches a whole word, and download it."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

_MERGE_RESPONSES = {
    200: {
        "content": {DST_MEDIA_TYPE: {}},
        "description": "The merged DST design as an attachment.",
    },
    400: {"model": ErrorResponse, "description": "Invalid word"},
    404: {"model": ErrorResponse, "description": "A letter design is missing"},
    422: {"model": ErrorResponse, "description": "A letter design is malformed"},
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error_status(exc: DesignMergeError) -> int:
    """Map a pipeline error to its HTTP status code."""
    if isinstance(exc, (InvalidWordError, EmptyMergeRequest)):
        return 400
    if isinstance(exc, MissingLetterResource):
        return 404
    if isinstance(exc, MalformedRecordStream):
        return 422
    return 500


def _design_response(design: MergedDesign) -> Response:
    return Response(
        content=design.data,
        media_type=DST_MEDIA_TYPE,
        headers={
            "Content-Disposition": 'attachment; filename="{}"'.format(design.filename),
        },
    )


async def _merge_word(word: str) -> Response:
    """Run the full fetch → merge pipeline and wrap the result or the error."""
    source = load_letter_source()
    try:
        async with source:
            design = await build_word(word, source)
    except DesignMergeError as exc:
        status_code = _error_status(exc)
        if status_code >= 500:
            logger.exception("Merge failed for word %r", word)
        else:
            logger.warning("Merge rejected for word %r: %s", word, exc)
        raise HTTPException(status_code=status_code, detail=str(exc))

    return _design_response(design)


# ---------------------------------------------------------------------------
# Endpoints: Designs
# ---------------------------------------------------------------------------


@app.post(
    "/designs",
    tags=["designs"],
    summary="Merge a word into one DST design",
    description=(
        "Validate the word (1-12 letters A-Z; other characters are dropped), "
        "fetch one DST design per letter, merge them in word order, and "
        "return the merged file as a download."
    ),
    responses=_MERGE_RESPONSES,
)
async def create_design(
    word: Annotated[
        str,
        Form(description="Word to stitch, e.g. 'Hello'."),
    ],
) -> Response:
    return await _merge_word(word)


@app.get(
    "/designs/{word}",
    tags=["designs"],
    summary="Download the merged DST design for a word",
    description="Same as POST /designs, with the word in the path for plain links.",
    responses=_MERGE_RESPONSES,
)
async def download_design(word: str) -> Response:
    return await _merge_word(word)


@app.get(
    "/letters/{word}",
    response_model=WordLettersResponse,
    tags=["designs"],
    summary="List the letter files a word needs",
    description=(
        "Returns the normalized word and the library-relative DST file of "
        "each letter, without fetching anything."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid word"},
    },
)
async def list_word_letters(word: str) -> WordLettersResponse:
    try:
        normalized = normalize_word(word)
    except InvalidWordError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return WordLettersResponse(
        word=normalized,
        filename=output_filename(normalized),
        letters=[
            LetterFile(letter=letter, path=letter_path(letter, len(normalized)))
            for letter in normalized
        ],
    )


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the dst-merger-api console script."""
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=DST_API_HOST, port=DST_API_PORT)
