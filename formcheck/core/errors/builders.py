"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder creates an AppError
with the appropriate code and context.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode,
    field: str | None = None,
    origin: str = "",
    **metadata,
) -> AppError:
    """Create validation error."""
    meta = {"field": field, **metadata}
    return AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    )


def required_control(
    control_id: str | None,
    bindings: list[dict] | None = None,
    origin: str = "",
) -> AppError:
    """Required control that has no acceptable value."""
    fields = [b["bindingPath"] for b in bindings or []]
    target = ", ".join(fields) if fields else (control_id or "<anonymous>")
    return validation_error(
        f"Required control '{control_id}' has no value ({target})",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=fields[0] if fields else None,
        control_id=control_id,
        bindings=bindings or [],
        origin=origin,
    )


def invalid_format(
    field: str, expected: str, got: str | None = None, origin: str = ""
) -> Err[AppError]:
    msg = f"Invalid format for '{field}': expected {expected}"
    if got:
        msg += f", got '{got}'"
    return Err(validation_error(
        msg,
        code=ErrorCode.E2002_INVALID_FORMAT,
        field=field,
        expected=expected,
        origin=origin,
    ))


# =============================================================================
# Resource Errors (E6xxx)
# =============================================================================

def file_not_found(path: str, origin: str = "") -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E6001_FILE_NOT_FOUND,
        message=f"File not found: {path}",
        context=ErrorContext(origin=origin),
        metadata={"path": path},
    ))


def file_read_error(path: str, cause: Exception, origin: str = "") -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E6002_FILE_READ_ERROR,
        message=f"Could not read {path}: {cause}",
        context=ErrorContext(origin=origin),
        metadata={"path": path},
        cause=cause,
    ))
