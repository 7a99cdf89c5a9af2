"""Monadic Error Handling System

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction

Usage:
    from formcheck import check

    match check(form):
        case Ok(controls):
            submit()
        case Err(errors):
            for error in errors:
                log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
    try_result,
    collect_results,
)

from .builders import (
    validation_error,
    required_control,
    invalid_format,
    file_not_found,
    file_read_error,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    "try_result",
    "collect_results",
    "validation_error",
    "required_control",
    "invalid_format",
    "file_not_found",
    "file_read_error",
]
