"""Monadic Error Handling System

Type-safe error handling used by the scalar rule evaluators.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with code, message and metadata
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction

Usage:
    from validated_scalars.core.errors import Ok, Err, Result, AppError, out_of_range

    def check_age(age: int) -> Result[int, AppError]:
        if age < 18:
            return out_of_range("Too young.", "Age", "min", 18)
        return Ok(age)

    match check_age(17):
        case Ok(age):
            print(age)
        case Err(error):
            log.error(error.message, code=error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
)

from .builders import (
    validation_error,
    invalid_type,
    out_of_range,
    invalid_format,
    invalid_precision,
    constraint_violation,
    direction_mismatch,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    # Validation (E2xxx)
    "validation_error",
    "invalid_type",
    "out_of_range",
    "invalid_format",
    "invalid_precision",
    "constraint_violation",
    "direction_mismatch",
]
