"""Scalar type constructors.

One constructor per kind and direction:

    create_string_type         create_int_type         create_float_type          (both)
    create_string_input_type   create_int_input_type   create_float_input_type    (input)
    create_string_output_type  create_int_output_type  create_float_output_type   (output)

Each takes the type attributes (a mapping, keyword arguments, or both) and
returns a ``graphql.GraphQLScalarType``:

    Email = create_string_input_type(
        name="Email",
        validate={"max": 254, "regexp": re.compile(r"^\\S+@\\S+\\.[a-z]{2,}$", re.I)},
        validation_messages={"regexp": "Not an email address."},
    )
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from graphql import GraphQLScalarType, ValueNode

from .core.errors import Err, Ok
from .definition import build_definition
from .direction import DiagnosticSink, Direction, Handler, create_scalar_type
from .errors import GraphQLTypeError
from .validation import ScalarKind, check_value


def _attrs(attrs: Mapping[str, Any] | None, extra: Mapping[str, Any]) -> dict[str, Any]:
    return {**(attrs or {}), **extra}


def _type_handler(kind: ScalarKind, attrs: Mapping[str, Any]) -> Handler:
    definition = build_definition(kind, attrs)

    def handler(value: Any, node: ValueNode | None = None) -> Any:
        match check_value(value, definition):
            case Err(error):
                raise GraphQLTypeError.from_app_error(error, node)
            case Ok(coerced) if definition.resolve is not None:
                return definition.resolve(coerced)
            case Ok(coerced):
                return coerced

    return handler


def string_type_handler(attrs: Mapping[str, Any]) -> Handler:
    """Checked handler for string scalars; returns the (resolved) string."""
    return _type_handler(ScalarKind.STRING, attrs)


def int_type_handler(attrs: Mapping[str, Any]) -> Handler:
    """Checked handler for integer scalars; returns an ``int`` unless resolved."""
    return _type_handler(ScalarKind.INT, attrs)


def float_type_handler(attrs: Mapping[str, Any]) -> Handler:
    """Checked handler for float scalars; returns a ``float`` unless resolved."""
    return _type_handler(ScalarKind.FLOAT, attrs)


def _constructor(
    name: str,
    handler_factory: Callable[[Mapping[str, Any]], Handler],
    direction: Direction,
    doc: str,
) -> Callable[..., GraphQLScalarType]:
    def create(
        attrs: Mapping[str, Any] | None = None,
        /,
        *,
        on_output_error: DiagnosticSink | None = None,
        **kwargs: Any,
    ) -> GraphQLScalarType:
        merged = _attrs(attrs, kwargs)
        return create_scalar_type(
            merged, handler_factory(merged), direction, on_output_error=on_output_error
        )

    create.__doc__ = doc
    create.__name__ = create.__qualname__ = name
    return create


create_string_type = _constructor(
    "create_string_type", string_type_handler, Direction.BOTH, "String scalar validated on input and output."
)
create_string_input_type = _constructor(
    "create_string_input_type", string_type_handler, Direction.INPUT, "String scalar validated on input only."
)
create_string_output_type = _constructor(
    "create_string_output_type", string_type_handler, Direction.OUTPUT, "String scalar validated on output only."
)

create_int_type = _constructor(
    "create_int_type", int_type_handler, Direction.BOTH, "Integer scalar validated on input and output."
)
create_int_input_type = _constructor(
    "create_int_input_type", int_type_handler, Direction.INPUT, "Integer scalar validated on input only."
)
create_int_output_type = _constructor(
    "create_int_output_type", int_type_handler, Direction.OUTPUT, "Integer scalar validated on output only."
)

create_float_type = _constructor(
    "create_float_type", float_type_handler, Direction.BOTH, "Float scalar validated on input and output."
)
create_float_input_type = _constructor(
    "create_float_input_type", float_type_handler, Direction.INPUT, "Float scalar validated on input only."
)
create_float_output_type = _constructor(
    "create_float_output_type", float_type_handler, Direction.OUTPUT, "Float scalar validated on output only."
)
