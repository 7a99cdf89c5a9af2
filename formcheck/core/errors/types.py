"""Monadic Error Handling Types

Result/Either types for composable error propagation. Validation reports
are plain data; these types carry the failures hosts want to aggregate or
match on (configuration problems, failed capability reads, required controls left
empty).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
E = TypeVar("E")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation errors
    E6xxx: Resource errors
    E9xxx: Internal/Unknown errors
    """
    # Validation (E2xxx)
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2002_INVALID_FORMAT = 2002

    # Resource (E6xxx)
    E6001_FILE_NOT_FOUND = 6001
    E6002_FILE_READ_ERROR = 6002

    # Internal (E9xxx)
    E9001_UNEXPECTED_ERROR = 9001
    E9004_CAPABILITY_READ_FAILED = 9004

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 6000 <= code < 7000:
            return "resource"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing and debugging."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Base error with typed code, message, metadata and optional cause."""
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: Exception,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    message: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Convert exception to Err with full context."""
    return Err(AppError(
        code=code,
        message=message or str(exc),
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=exc,
    ))


def try_result(
    f: Callable[[], T],
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
) -> Result[T, AppError]:
    """Execute function and wrap result in Result.

    Catches exceptions and converts to Err.
    """
    try:
        return Ok(f())
    except Exception as e:
        return from_exception(e, code=code, origin=origin)


def collect_results(results: list[Result[T, AppError]]) -> Result[list[T], list[AppError]]:
    """Collect list of Results into Result of list.

    Returns Ok with all values if all are Ok.
    Returns Err with all errors if any are Err.
    """
    values: list[T] = []
    errors: list[AppError] = []

    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                errors.append(e)

    if errors:
        return Err(errors)
    return Ok(values)
