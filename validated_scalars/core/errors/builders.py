"""Validation Error Builders

Ergonomic constructors for the errors produced while checking scalar values
and scalar type definitions. Each builder returns ``Err[AppError]`` with the
appropriate code; metadata keys with ``None`` values are dropped.
"""
from typing import Any

from .types import AppError, ErrorCode, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    scalar: str | None = None,
    rule: str | None = None,
    **metadata: Any,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"scalar": scalar, "rule": rule, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_type(message: str, scalar: str, actual: str) -> Err[AppError]:
    return validation_error(
        message,
        code=ErrorCode.E2004_INVALID_TYPE,
        scalar=scalar,
        rule="type",
        actual=actual,
    )


def out_of_range(
    message: str, scalar: str, rule: str, bound: Any
) -> Err[AppError]:
    return validation_error(
        message,
        code=ErrorCode.E2003_OUT_OF_RANGE,
        scalar=scalar,
        rule=rule,
        bound=bound,
    )


def invalid_format(message: str, scalar: str, pattern: str) -> Err[AppError]:
    return validation_error(
        message,
        code=ErrorCode.E2002_INVALID_FORMAT,
        scalar=scalar,
        rule="regexp",
        pattern=pattern,
    )


def invalid_precision(
    message: str, scalar: str, rule: str, bound: int, decimals: int
) -> Err[AppError]:
    return validation_error(
        message,
        code=ErrorCode.E2006_INVALID_PRECISION,
        scalar=scalar,
        rule=rule,
        bound=bound,
        decimals=decimals,
    )


def constraint_violation(message: str, scalar: str) -> Err[AppError]:
    return validation_error(
        message,
        code=ErrorCode.E2005_CONSTRAINT_VIOLATION,
        scalar=scalar,
        rule="test",
    )


def direction_mismatch(scalar: str) -> Err[AppError]:
    return validation_error(
        f'"{scalar}" type must be Output Type but got input.',
        code=ErrorCode.E2030_DIRECTION_MISMATCH,
        scalar=scalar,
    )
