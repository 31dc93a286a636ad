"""Shared pytest fixtures for validated_scalars tests.

``schema`` mirrors the schema the scalars are exercised through end to end:
one query field per scalar type, each taking the scalar as an argument.
"""

from __future__ import annotations

import re
from typing import Any

import pytest
from graphql import (
    ExecutionResult,
    GraphQLArgument,
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    graphql_sync,
)

from validated_scalars import (
    create_float_type,
    create_int_input_type,
    create_int_output_type,
    create_int_type,
    create_string_input_type,
)


class RecordingSink:
    """Diagnostic sink that remembers every swallowed output failure."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any, Exception]] = []

    def __call__(self, scalar: str, value: Any, error: Exception) -> None:
        self.calls.append((scalar, value, error))


def _above(threshold: float):
    def test(value: str) -> bool:
        # Numeric scalars hand the predicate their string form
        return isinstance(value, str) and float(value) > threshold

    return test


INT_RULES = {"min": 10, "max": 100, "test": _above(50)}
INT_MESSAGES = {"min": "min error", "max": "max error", "test": "test error"}


@pytest.fixture
def output_failures() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def schema(output_failures: RecordingSink) -> GraphQLSchema:
    string_input = create_string_input_type(
        name="StringInputType",
        validate={
            "min": 5,
            "max": 15,
            "regexp": re.compile(r"^\w+@\w+\.[a-z]{2,}$", re.IGNORECASE),
            "test": lambda value: not value.endswith("@example.com"),
        },
        validation_messages={
            "min": "min error",
            "max": "max error",
            "regexp": "regexp error",
            "test": "test error",
        },
    )
    int_input = create_int_input_type(
        name="IntInputType", validate=INT_RULES, validation_messages=INT_MESSAGES
    )
    int_output = create_int_output_type(
        name="IntOutputType", validate=INT_RULES, validation_messages=INT_MESSAGES
    )
    int_both = create_int_type(
        name="IntBiDirectionalType",
        validate=INT_RULES,
        validation_messages=INT_MESSAGES,
        on_output_error=output_failures,
    )
    float_input = create_float_type(
        name="FloatInputType",
        validate={
            "min": 10.55,
            "max": 100.99,
            "min_decimals": 2,
            "max_decimals": 5,
            "test": _above(80),
        },
        validation_messages={
            "type": "type error",
            "min": "min error",
            "max": "max error",
            "min_decimals": "minDecimals error",
            "max_decimals": "maxDecimals error",
            "test": "test error",
        },
        on_output_error=output_failures,
    )

    def field(type_: Any, arg_name: str, arg_type: Any, resolve: Any) -> GraphQLField:
        return GraphQLField(type_, args={arg_name: GraphQLArgument(arg_type)}, resolve=resolve)

    return GraphQLSchema(
        query=GraphQLObjectType(
            "Query",
            {
                "testStringInputType": field(
                    GraphQLString, "string", string_input, lambda *_, **__: "OK"
                ),
                "testIntInputType": field(
                    GraphQLString, "int", int_input, lambda *_, **__: "OK"
                ),
                "testFloatInputType": field(
                    GraphQLString, "float", float_input, lambda *_, **__: "OK"
                ),
                "testIntInputOnlyType": field(
                    int_input, "int", int_input, lambda *_, **__: "not int"
                ),
                "testIntOutputOnlyType": field(
                    int_output, "int", int_output, lambda *_, **__: 100
                ),
                "testIntBiDirectionalType": field(
                    int_both, "int", int_both, lambda _obj, _info, int: 100 - int
                ),
                "testIntBiDirectionalEcho": field(
                    int_both, "int", int_both, lambda _obj, _info, int: int
                ),
            },
        )
    )


@pytest.fixture
def query(schema: GraphQLSchema):
    """Run a query against ``schema``."""

    def run(source: str, variables: dict[str, Any] | None = None) -> ExecutionResult:
        return graphql_sync(schema, source, variable_values=variables)

    return run
