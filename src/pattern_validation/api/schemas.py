"""
API Schemas for the pattern write path.

Request bodies reuse `WriteRequest`; responses are defined here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pattern_validation.core.contracts.post import StoredPattern, WriteRequest


class RestError(BaseModel):
    """Error body returned with HTTP 400 when a write is rejected."""

    code: str
    message: str
    data: dict[str, int] = Field(default_factory=lambda: {"status": 400})


class ValidationReport(BaseModel):
    """Dry-run outcome for `POST /patterns/validate`."""

    valid: bool
    error: RestError | None = None


class HealthInfo(BaseModel):
    status: str = "ok"
    environment: str
    version: str


__all__ = ["HealthInfo", "RestError", "StoredPattern", "ValidationReport", "WriteRequest"]
