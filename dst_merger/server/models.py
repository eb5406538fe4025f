"""Pydantic response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for response serialization
and automatic OpenAPI documentation.

HOW: One model per JSON response shape. The merged design itself is
returned as raw bytes, so it has no model.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Error responses always use ErrorResponse
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class LetterFile(BaseModel):
    """One letter of a word and the library file it resolves to."""

    letter: str = Field(description="Uppercase letter A-Z.")
    path: str = Field(description="Library-relative path of the letter's DST file.")


class WordLettersResponse(BaseModel):
    """Letter files that would be merged for a word.

    WHY: Front ends and library maintainers can check which files a word
    needs before requesting the merge.
    """

    word: str = Field(description="Normalized word (uppercase A-Z only).")
    filename: str = Field(description="Filename the merged design is delivered as.")
    letters: List[LetterFile] = Field(description="Letter files in stitching order.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "word": "HI",
                "filename": "HI.dst",
                "letters": [
                    {"letter": "H", "path": "letters2/H2.dst"},
                    {"letter": "I", "path": "letters2/I2.dst"},
                ],
            }
        ]
    }}


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
