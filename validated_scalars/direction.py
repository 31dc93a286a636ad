"""Directional dispatch of scalar handlers onto graphql-core hooks.

The direction a scalar validates in is fixed by the constructor that built it.
The three hooks react to it differently:

- ``serialize`` (value leaving toward the client): when output is checked, a
  failure is reported to the diagnostic sink and the raw value is still
  returned. When output is not checked, the raw value passes through.
- ``parse_value`` / ``parse_literal`` (value arriving from the client): when
  input is checked, failures propagate to the engine. When it is not, the
  value is rejected as arriving at an output-only type.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Protocol

from graphql import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    GraphQLScalarType,
    IntValueNode,
    StringValueNode,
    ValueNode,
    value_from_ast_untyped,
)

from .core.config import get_settings
from .core.errors import direction_mismatch
from .core.logging import scalars_logger
from .errors import GraphQLTypeError

_VALUE_NODES = (StringValueNode, IntValueNode, FloatValueNode, BooleanValueNode, EnumValueNode)


class Direction(str, Enum):
    """Which boundary crossings trigger validation."""
    INPUT = "input"
    OUTPUT = "output"
    BOTH = "both"

    @property
    def checks_input(self) -> bool:
        return self in (Direction.INPUT, Direction.BOTH)

    @property
    def checks_output(self) -> bool:
        return self in (Direction.OUTPUT, Direction.BOTH)


DIRECTION_INPUT = Direction.INPUT
DIRECTION_OUTPUT = Direction.OUTPUT
DIRECTION_BOTH = Direction.BOTH


class Handler(Protocol):
    def __call__(self, value: Any, node: ValueNode | None = None) -> Any: ...


class DiagnosticSink(Protocol):
    """Receives output failures that are not allowed to reach the client."""

    def __call__(self, scalar: str, value: Any, error: Exception) -> None: ...


def log_output_failure(scalar: str, value: Any, error: Exception) -> None:
    """Default sink: one ``scalar.output_invalid`` error event per failure."""
    event: dict[str, Any] = {"scalar": scalar, "error": str(error)}
    if isinstance(error, GraphQLTypeError):
        app_error = error.to_app_error()
        event["message"] = app_error.message
        event["code"] = app_error.code.name
        event["rule"] = app_error.metadata.get("rule")
        event["origin"] = app_error.origin
    if get_settings().LOG_OUTPUT_VALUES:
        event["value"] = value
    scalars_logger().error("scalar.output_invalid", **event)


def literal_value(node: ValueNode, variables: dict[str, Any] | None = None) -> Any:
    """Raw value carried by an inline literal."""
    if isinstance(node, _VALUE_NODES):
        return node.value
    return value_from_ast_untyped(node, variables)


def create_scalar_type(
    attrs: Mapping[str, Any],
    handler: Handler,
    direction: Direction = Direction.BOTH,
    *,
    on_output_error: DiagnosticSink | None = None,
) -> GraphQLScalarType:
    """Wrap ``handler`` into a graphql-core scalar honoring ``direction``."""
    direction = Direction(direction)
    name = attrs["name"]
    sink = on_output_error or log_output_failure

    def reject_input(node: ValueNode | None = None) -> GraphQLTypeError:
        return GraphQLTypeError.from_app_error(direction_mismatch(name).unwrap_err(), node)

    # Gets invoked when serializing the result to send it back to the client.
    def serialize(value: Any) -> Any:
        if direction.checks_output:
            try:
                return handler(value)
            except Exception as e:
                sink(name, value, e)
        # Always push forward the output, even on error
        return value

    # Gets invoked to parse client input that was passed through variables.
    def parse_value(value: Any) -> Any:
        if direction.checks_input:
            return handler(value)
        raise reject_input()

    # Gets invoked to parse client input that was passed inline in the query.
    def parse_literal(node: ValueNode, variables: dict[str, Any] | None = None) -> Any:
        if direction.checks_input:
            return handler(literal_value(node, variables), node)
        raise reject_input(node)

    return GraphQLScalarType(
        name=name,
        description=attrs.get("description"),
        serialize=serialize,
        parse_value=parse_value,
        parse_literal=parse_literal,
    )
