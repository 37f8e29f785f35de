"""
Validation Failure Contract

Every rejection produced by the pre-save validators is a `ValidationFailure`:
a machine-readable code, a human message, and an HTTP status (always 400).
The host turns it into a REST error body via :meth:`ValidationFailure.to_rest_error`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FailureCode(str, Enum):
    """Machine-readable rejection codes."""

    EMPTY_CONTENT = "rest_pattern_empty"
    INVALID_BLOCKS = "rest_pattern_invalid_blocks"
    EMPTY_BLOCKS = "rest_pattern_empty_blocks"
    EMPTY_TITLE = "rest_pattern_empty_title"


FAILURE_MESSAGES: dict[FailureCode, str] = {
    FailureCode.EMPTY_CONTENT: "Pattern content cannot be empty.",
    FailureCode.INVALID_BLOCKS: "Pattern content contains invalid blocks.",
    FailureCode.EMPTY_BLOCKS: "Pattern content contains only empty blocks.",
    FailureCode.EMPTY_TITLE: "A pattern title is required.",
}


class ValidationFailure(BaseModel):
    """A terminal rejection of a pattern write."""

    model_config = ConfigDict(frozen=True)

    code: FailureCode
    message: str
    status: int = Field(default=400, description="HTTP status the host should respond with.")

    @classmethod
    def from_code(cls, code: FailureCode) -> ValidationFailure:
        """Build a failure carrying the standard message for ``code``."""
        return cls(code=code, message=FAILURE_MESSAGES[code])

    def to_rest_error(self) -> dict[str, Any]:
        """Render as ``{"code", "message", "data": {"status"}}``."""
        return {
            "code": self.code.value,
            "message": self.message,
            "data": {"status": self.status},
        }
