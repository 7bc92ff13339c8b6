"""FastAPI application exposing the converter over HTTP.

WHY: Browser front-ends and automation tools (curl, n8n) need to convert
uploads without installing the CLI. FastAPI provides request validation,
multipart parsing and automatic OpenAPI documentation.

HOW: POST /convert/{output_format} accepts a multipart file upload, runs
the core convert() and streams the result back with the target format's
content type. GET /formats lists the supported formats, GET /health is a
liveness probe.

RULES:
- The output format is validated before the upload is read
- UnsupportedFormatError and UnrecognizedInputError → 400
- DecodeError and EncodeError → 422
- Uploads larger than MAX_UPLOAD_BYTES → 413
- Error responses use the ErrorResponse schema
- Every failed conversion is logged at WARNING with the error message
- convert() runs in the threadpool, never on the event loop
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from file_converter import __version__
from file_converter.config import LOG_LEVEL, MAX_UPLOAD_BYTES, SERVER_HOST, SERVER_PORT
from file_converter.core.converter import convert, get_format, supported_formats
from file_converter.core.errors import (
    ConversionError,
    UnrecognizedInputError,
    UnsupportedFormatError,
)
from file_converter.server.models import ErrorResponse, FormatInfo, HealthResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="File Converter API",
    description=(
        "Convert structured data between JSON, CSV, XML and plain text. "
        "Upload a file to /convert/{output_format} and receive the converted "
        "document in the response body."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error_status(exc: ConversionError) -> int:
    """Map a conversion error to an HTTP status code."""
    if isinstance(exc, (UnsupportedFormatError, UnrecognizedInputError)):
        return 400
    return 422


def _output_filename(upload_name: Optional[str], extension: str) -> str:
    """Build the download filename: upload stem plus the target extension."""
    stem = Path(upload_name or "").stem or "converted"
    return "{}.{}".format(stem, extension)


# ---------------------------------------------------------------------------
# Endpoints: Conversion
# ---------------------------------------------------------------------------


@app.post(
    "/convert/{output_format}",
    tags=["conversion"],
    summary="Convert an uploaded file",
    description=(
        "Upload a JSON, CSV, XML or text file. The input format is detected "
        "from the content unless input_format is given. The response body is "
        "the converted document."
    ),
    response_class=Response,
    responses={
        200: {"description": "The converted document."},
        400: {"model": ErrorResponse, "description": "Unsupported output or input format"},
        413: {"model": ErrorResponse, "description": "Upload too large"},
        422: {"model": ErrorResponse, "description": "Input could not be parsed or converted"},
    },
)
async def convert_upload(
    output_format: str,
    file: Annotated[
        UploadFile,
        File(description="The document to convert."),
    ],
    input_format: Annotated[
        Optional[str],
        Form(description="Source format (json, csv, xml, txt). Detected when omitted."),
    ] = None,
) -> Response:
    try:
        target = get_format(output_format)
    except ConversionError as exc:
        logger.warning("Rejected conversion request: %s", exc)
        raise HTTPException(status_code=_error_status(exc), detail=str(exc))

    content = await file.read(MAX_UPLOAD_BYTES + 1)
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail="Upload exceeds the {} byte limit".format(MAX_UPLOAD_BYTES),
        )

    try:
        result = await run_in_threadpool(
            convert, content, target.extension, input_format=input_format or None
        )
    except ConversionError as exc:
        logger.warning("Conversion of %s to %s failed: %s", file.filename, target.extension, exc)
        raise HTTPException(status_code=_error_status(exc), detail=str(exc))

    filename = _output_filename(file.filename, target.extension)
    logger.info("Converted %s to %s (%d bytes)", file.filename, filename, len(result))
    return Response(
        content=result,
        media_type=target.content_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List supported formats",
    description="Returns every format accepted as input and output, with its content type.",
)
async def list_formats() -> List[FormatInfo]:
    return [
        FormatInfo(key=fmt.extension, name=fmt.name, content_type=fmt.content_type)
        for fmt in supported_formats()
    ]


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
    """Entry point for the file-converter-api console script."""
    import uvicorn
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
