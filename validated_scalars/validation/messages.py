"""Default error messages and message merging."""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping

from .rules import RuleKey, RuleSet, ScalarKind

_INVALID = '"{name}" is invalid.'

DEFAULT_TEMPLATES: dict[ScalarKind, dict[RuleKey, str]] = {
    ScalarKind.STRING: {
        RuleKey.TYPE: 'Expecting "{name}" to be a string but {type} was passed.',
        RuleKey.MIN: 'Minimum length for "{name}" is {min}.',
        RuleKey.MAX: 'Maximum length for "{name}" is {max}.',
        RuleKey.REGEXP: _INVALID,
        RuleKey.TEST: _INVALID,
    },
    ScalarKind.INT: {
        RuleKey.TYPE: 'Expecting "{name}" to be an integer but {type} was passed.',
        RuleKey.MIN: 'Minimum number for "{name}" is {min}.',
        RuleKey.MAX: 'Maximum number for "{name}" is {max}.',
        RuleKey.TEST: _INVALID,
    },
    ScalarKind.FLOAT: {
        RuleKey.TYPE: 'Expecting "{name}" to be a float but {type} was passed.',
        RuleKey.MIN: 'Minimum number for "{name}" is {min}.',
        RuleKey.MAX: 'Maximum number for "{name}" is {max}.',
        RuleKey.MIN_DECIMALS: 'The float number "{name}" should have at least {min_decimals} decimals.',
        RuleKey.MAX_DECIMALS: 'The float number "{name}" should not exceed {max_decimals} decimals.',
        RuleKey.TEST: _INVALID,
    },
}


def type_of(value: Any) -> str:
    """JSON-style type name of a raw value, as shown in ``type`` messages."""
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case str():
            return "string"
        case int() | float() | Decimal():
            return "number"
        case list() | tuple():
            return "array"
        case dict():
            return "object"
    return type(value).__name__.lower()


def render_defaults(
    kind: ScalarKind, name: str, rules: RuleSet, value: Any
) -> dict[RuleKey, str]:
    """Fill the kind's templates with the type name, bounds and value type."""
    fields = {"name": name, "type": type_of(value), **rules.model_dump(exclude={"test", "regexp"})}
    return {key: template.format(**fields) for key, template in DEFAULT_TEMPLATES[kind].items()}


def merge_messages(
    defaults: Mapping[RuleKey, str], overrides: Mapping[RuleKey, str] | None
) -> dict[RuleKey, str]:
    """Return a new mapping with ``overrides`` winning over ``defaults``.

    Neither argument is modified.
    """
    return {**defaults, **(overrides or {})}
