"""
Utility functions for the lazy cursor library.

Argument validation, checked 64-bit arithmetic, logging setup and
performance measurement shared by the cursor modules.
"""

import gc
import logging
import sys
import time
import tracemalloc
from typing import Any, Callable, Optional

from models import (
    ArithmeticOverflowError,
    CursorError,
    CursorSettings,
    ErrorReport,
    NullArgumentError,
    PerformanceReport,
)

logger = logging.getLogger(__name__)

# Signed 64-bit bounds for range arithmetic
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ---------- Logging ----------

def setup_logging(settings: Optional[CursorSettings] = None) -> logging.Logger:
    """Setup logging for the cursor library and return its logger"""
    settings = settings or CursorSettings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger('lazy_cursors')


# ---------- Validation ----------

def require_present(operation: str, **arguments: Any) -> None:
    """Raise NullArgumentError for the first argument that is None.

    Arguments are checked in the order they are passed, so the error names
    the left-most missing parameter.
    """
    for name, value in arguments.items():
        if value is None:
            raise NullArgumentError(f"{operation}: {name} must not be None", operation)


def describe_error(error: CursorError) -> ErrorReport:
    """Build an ErrorReport for a library error"""
    return error.to_report()


# ---------- Checked arithmetic ----------

def check_int64(value: int, operation: str) -> int:
    """Ensure value fits the signed 64-bit domain"""
    if value < INT64_MIN or value > INT64_MAX:
        raise ArithmeticOverflowError(
            f"{operation}: {value} overflows the 64-bit integer domain", operation
        )
    return value


def add_exact(a: int, b: int, operation: str = "add") -> int:
    return check_int64(a + b, operation)


def subtract_exact(a: int, b: int, operation: str = "subtract") -> int:
    return check_int64(a - b, operation)


# ---------- Performance ----------


def measure_performance(operation_name: str, func: Callable, *args, **kwargs) -> PerformanceReport:
    """Measure wall time and peak memory of a function call"""
    tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()
        report = PerformanceReport(
            operation=operation_name,
            execution_time_ms=execution_time_ms,
            memory_usage_mb=peak / 1024 / 1024,
            success=True,
            result=result
        )
        logger.debug(f"{operation_name} completed in {execution_time_ms:.2f}ms")
        return report

    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()
        report = PerformanceReport(
            operation=operation_name,
            execution_time_ms=execution_time_ms,
            memory_usage_mb=peak / 1024 / 1024,
            success=False,
            error=str(e)
        )
        logger.error(f"{operation_name} failed after {execution_time_ms:.2f}ms: {report.error}")
        raise

    finally:
        tracemalloc.stop()
