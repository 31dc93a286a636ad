"""Errors raised by validated scalar types.

Two taxonomies:

- ``DefinitionError``: a malformed type definition, raised while the scalar
  type is being built. It subclasses ``AttributeError``.
- ``GraphQLTypeError``: a value that failed a rule (or crossed the boundary
  in a direction the scalar does not accept). It subclasses graphql-core's
  ``GraphQLError`` so the engine reports it as a query-level error.
"""
from __future__ import annotations

from typing import Any, Collection

from graphql import GraphQLError, Node

from .core.errors import AppError, ErrorCode
from .validation.rules import RuleKey


class DefinitionError(AttributeError):
    """Invalid scalar type definition."""

    code = ErrorCode.E2040_INVALID_DEFINITION


class GraphQLTypeError(GraphQLError):
    """A single validation failure for one scalar value.

    ``code`` and ``rule`` discriminate the failure from other engine errors;
    both are mirrored into the GraphQL ``extensions``.
    """

    code: ErrorCode
    rule: RuleKey | None
    scalar: str | None

    def __init__(
        self,
        message: str,
        nodes: Node | Collection[Node] | None = None,
        *,
        code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
        rule: RuleKey | str | None = None,
        scalar: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        rule = RuleKey(rule) if rule is not None else None
        extensions: dict[str, Any] = {"code": code.name}
        if rule is not None:
            extensions["rule"] = rule.value
        if scalar is not None:
            extensions["scalar"] = scalar
        super().__init__(
            message,
            nodes,
            original_error=original_error,
            extensions=extensions,
        )
        self.code = code
        self.rule = rule
        self.scalar = scalar

    @classmethod
    def from_app_error(
        cls, error: AppError, nodes: Node | Collection[Node] | None = None
    ) -> GraphQLTypeError:
        """Raise-ready failure built from an evaluator ``Err``."""
        return cls(
            error.message,
            nodes,
            code=error.code,
            rule=error.metadata.get("rule"),
            scalar=error.metadata.get("scalar"),
        )

    def to_app_error(self) -> AppError:
        """Convert back to AppError for the error handling system."""
        meta = {"scalar": self.scalar, "rule": self.rule.value if self.rule else None}
        return AppError(
            code=self.code,
            message=self.message,
            origin="graphql",
            metadata={k: v for k, v in meta.items() if v is not None},
        )
