"""Monadic Error Handling Types

Result/Either types used by the rule evaluators. Checks return ``Ok`` with the
coerced value or ``Err`` with an ``AppError``; the GraphQL boundary turns an
``Err`` into a raised ``GraphQLTypeError``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, Union, final

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation errors (values and type definitions)
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003
    E2004_INVALID_TYPE = 2004
    E2005_CONSTRAINT_VIOLATION = 2005
    E2006_INVALID_PRECISION = 2006
    E2030_DIRECTION_MISMATCH = 2030
    E2040_INVALID_DEFINITION = 2040


@dataclass(frozen=True, slots=True)
class AppError:
    """Base application error.

    Carries a typed code, one human-readable message and structured metadata
    (scalar name, failed rule, bound) for diagnostics. ``origin`` names the
    layer the error was converted from, if any.
    """
    code: ErrorCode
    message: str
    origin: str = ""
    metadata: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result monad."""
    value: T


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result monad."""
    error: E

    def unwrap_err(self) -> E:
        return self.error


# Type alias for Result monad
Result = Union[Ok[T], Err[E]]
