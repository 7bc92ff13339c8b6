"""Pydantic response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for response serialization
and automatic OpenAPI documentation.

HOW: One model per JSON response body. Conversion results are raw bytes
and need no model; their error bodies share ErrorResponse.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- FormatInfo.key matches DataFormat values exactly
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FormatInfo(BaseModel):
    """Description of one supported format.

    Clients query /formats to discover valid targets for /convert/{format}.
    """

    key: str = Field(description="Format identifier used in API paths (e.g. 'csv').")
    name: str = Field(description="Human-readable format name.")
    content_type: str = Field(description="MIME type of converted output in this format.")

    model_config = {"json_schema_extra": {
        "examples": [
            {"key": "csv", "name": "CSV", "content_type": "text/csv"},
        ]
    }}


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
