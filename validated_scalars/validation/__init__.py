"""Scalar Value Validation

Rule sets, default messages and the fail-fast rule evaluators.

Usage:
    from validated_scalars.validation import check_int

    match check_int("42", definition):
        case Ok(number):
            ...
        case Err(error):
            print(error.message)
"""
from .rules import (
    RuleKey,
    ScalarKind,
    RuleSet,
    StringRules,
    IntRules,
    FloatRules,
    RULES_BY_KIND,
)
from .messages import (
    DEFAULT_TEMPLATES,
    type_of,
    render_defaults,
    merge_messages,
)
from .assertions import (
    check_string,
    check_int,
    check_float,
    check_value,
)

__all__ = [
    "RuleKey",
    "ScalarKind",
    "RuleSet",
    "StringRules",
    "IntRules",
    "FloatRules",
    "RULES_BY_KIND",
    "DEFAULT_TEMPLATES",
    "type_of",
    "render_defaults",
    "merge_messages",
    "check_string",
    "check_int",
    "check_float",
    "check_value",
]
