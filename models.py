"""
Lazy Cursors - Models

Error taxonomy and pydantic models shared by the cursor library.
"""

import logging
import os
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorKind(str, Enum):
    """Closed set of failure kinds raised by the library"""
    NULL_ARGUMENT = "null_argument"
    NEGATIVE_LIMIT = "negative_limit"
    UNSUPPORTED_INFINITE_SOURCE = "unsupported_infinite_source"
    INVALID_RANGE = "invalid_range"
    EXHAUSTED = "exhausted"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    ARITHMETIC_OVERFLOW = "arithmetic_overflow"


class CursorError(Exception):
    """Base class for every error raised by cursors, combinators and reducers."""

    kind: ErrorKind

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def to_report(self) -> "ErrorReport":
        """Describe this error as a serializable report"""
        return ErrorReport(
            error=self.message,
            error_code=self.kind.value,
            error_type=type(self).__name__,
            operation=self.operation,
            timestamp=datetime.now(timezone.utc),
        )


class NullArgumentError(CursorError, TypeError):
    """A required argument was None."""
    kind = ErrorKind.NULL_ARGUMENT


class NegativeLimitError(CursorError, ValueError):
    """A size or count argument was negative."""
    kind = ErrorKind.NEGATIVE_LIMIT


class UnsupportedInfiniteSourceError(CursorError, TypeError):
    """An infinite cursor reached an operation that needs a bounded one."""
    kind = ErrorKind.UNSUPPORTED_INFINITE_SOURCE


class InvalidRangeError(CursorError, ValueError):
    """A range's start lies past its last element."""
    kind = ErrorKind.INVALID_RANGE


class ExhaustedError(CursorError, LookupError):
    """Advance was requested past the end of a finite cursor."""
    kind = ErrorKind.EXHAUSTED


class IndexOutOfRangeError(CursorError, IndexError):
    """A negative or unreachable index was requested."""
    kind = ErrorKind.INDEX_OUT_OF_RANGE


class ArithmeticOverflowError(CursorError, OverflowError):
    """A range or position computation left the signed 64-bit domain."""
    kind = ErrorKind.ARITHMETIC_OVERFLOW


ERROR_CLASSES = {
    cls.kind: cls
    for cls in (
        NullArgumentError,
        NegativeLimitError,
        UnsupportedInfiniteSourceError,
        InvalidRangeError,
        ExhaustedError,
        IndexOutOfRangeError,
        ArithmeticOverflowError,
    )
}


class ErrorReport(BaseModel):
    """Error report model"""
    ok: bool = Field(False, description="Operation success status")
    error: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Error kind")
    error_type: str = Field(..., description="Exception class name")
    operation: Optional[str] = Field(None, description="Operation that failed")
    timestamp: datetime = Field(..., description="Error timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ok": False,
                "error": "limit: max_size must not be negative (got -1)",
                "error_code": "negative_limit",
                "error_type": "NegativeLimitError",
                "operation": "limit",
                "timestamp": "2024-01-01T12:00:00Z"
            }
        }
    )


class CursorSettings(BaseModel):
    """Library settings: logging and demo defaults"""
    log_level: str = Field(
        "INFO",
        description="Root log level for setup_logging()"
    )
    log_format: str = Field(
        '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
        description="logging format string"
    )
    default_separator: str = Field(
        ", ",
        description="Separator used by println_cursor when none is given"
    )
    demo_size: int = Field(
        10_000,
        description="Source size used by the demo script",
        gt=0
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is a standard level name"""
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "CursorSettings":
        """Build settings from LAZY_CURSORS_* environment variables"""
        values: dict[str, Any] = {}
        if "LAZY_CURSORS_LOG_LEVEL" in os.environ:
            values["log_level"] = os.environ["LAZY_CURSORS_LOG_LEVEL"]
        if "LAZY_CURSORS_SEPARATOR" in os.environ:
            values["default_separator"] = os.environ["LAZY_CURSORS_SEPARATOR"]
        if "LAZY_CURSORS_DEMO_SIZE" in os.environ:
            values["demo_size"] = os.environ["LAZY_CURSORS_DEMO_SIZE"]
        return cls(**values)


class CursorStatistics(BaseModel):
    """Summary of the values pulled through a StatisticsCursor"""
    label: str = Field(..., description="Name of the observed sequence")
    description: str = Field("", description="Distribution description")
    count: int = Field(..., description="Number of values pulled", ge=0)
    total: float = Field(..., description="Sum of values pulled")
    mean: Optional[float] = Field(None, description="Mean, or None when nothing was pulled")


class PerformanceReport(BaseModel):
    """Timing and memory of one measured operation"""
    operation: str = Field(..., description="Operation name")
    execution_time_ms: float = Field(..., description="Wall time in milliseconds", ge=0)
    memory_usage_mb: float = Field(..., description="Peak traced memory in MB", ge=0)
    success: bool = Field(..., description="Whether the operation completed")
    result: Any = Field(None, description="Operation result")
    error: Optional[str] = Field(None, description="Error message on failure")
