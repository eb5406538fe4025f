"""HTTP API for merging words into DST designs.

WHY: The web front end needs a backend that returns merged designs as
downloads. FastAPI provides request validation and OpenAPI docs.

HOW: app.py defines the FastAPI app, models.py the response schemas.
Run with ``dst-merger-api`` or ``uvicorn dst_merger.server.app:app``.
"""
