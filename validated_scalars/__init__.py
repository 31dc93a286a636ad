"""Validated GraphQL scalar types.

Custom string, integer and float scalars for graphql-core schemas, each
carrying declarative rules (length, range, pattern, decimals, custom test)
checked on input, on output, or both.

Usage:
    from validated_scalars import create_int_input_type

    Age = create_int_input_type(
        name="Age",
        validate={"min": 0, "max": 150},
        validation_messages={"min": "Age cannot be negative."},
    )
"""
from .direction import (
    Direction,
    DIRECTION_INPUT,
    DIRECTION_OUTPUT,
    DIRECTION_BOTH,
    DiagnosticSink,
    create_scalar_type,
    log_output_failure,
)
from .errors import DefinitionError, GraphQLTypeError
from .definition import TypeDefinition, validate_definition, build_definition
from .factory import (
    string_type_handler,
    int_type_handler,
    float_type_handler,
    create_string_type,
    create_string_input_type,
    create_string_output_type,
    create_int_type,
    create_int_input_type,
    create_int_output_type,
    create_float_type,
    create_float_input_type,
    create_float_output_type,
)
from .validation import (
    RuleKey,
    StringRules,
    IntRules,
    FloatRules,
    merge_messages,
)

__all__ = [
    "Direction",
    "DIRECTION_INPUT",
    "DIRECTION_OUTPUT",
    "DIRECTION_BOTH",
    "DiagnosticSink",
    "create_scalar_type",
    "log_output_failure",
    "DefinitionError",
    "GraphQLTypeError",
    "TypeDefinition",
    "validate_definition",
    "build_definition",
    "string_type_handler",
    "int_type_handler",
    "float_type_handler",
    "create_string_type",
    "create_string_input_type",
    "create_string_output_type",
    "create_int_type",
    "create_int_input_type",
    "create_int_output_type",
    "create_float_type",
    "create_float_input_type",
    "create_float_output_type",
    "RuleKey",
    "StringRules",
    "IntRules",
    "FloatRules",
    "merge_messages",
]
