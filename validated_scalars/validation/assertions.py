"""Rule evaluation for string, integer and float scalars.

Each ``check_*`` function is pure: it takes the raw value and the scalar's
definition and returns ``Ok(coerced)`` or ``Err(AppError)`` for the first rule
the value breaks. Rules run in a fixed order and later rules rely on earlier
ones having held (``regexp`` assumes a string, ``max_decimals`` assumes a
float-shaped value).

Custom ``test`` predicates always receive a string: the value itself for
string scalars, the canonical string form of the coerced number otherwise.
"""
from __future__ import annotations

import math
import re
import sys
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Callable

from ..core.errors import (
    AppError,
    Ok,
    Result,
    constraint_violation,
    invalid_format,
    invalid_precision,
    invalid_type,
    out_of_range,
)
from .messages import merge_messages, render_defaults, type_of
from .rules import FloatRules, IntRules, RuleKey, ScalarKind, StringRules

if TYPE_CHECKING:
    from ..definition import TypeDefinition

_FLOAT_SHAPE = re.compile(r"^-?\d+\.\d+$")
_FLOAT_LIMIT = Decimal(sys.float_info.max)


def _message(definition: TypeDefinition, rule: RuleKey, value: Any) -> str:
    defaults = render_defaults(definition.kind, definition.name, definition.rules, value)
    return merge_messages(defaults, definition.messages)[rule]


def _parse_integer(value: Any) -> int | None:
    """Integer behind ``str(value)``, or None when it is not a finite whole number."""
    text = str(value).strip()
    if isinstance(value, bool) or "_" in text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    # beyond float range, so never expanded by int()
    if not number.is_finite() or abs(number) > _FLOAT_LIMIT:
        return None
    if number != number.to_integral_value():
        return None
    return int(number)


def _parse_float(value: Any) -> tuple[float, str] | None:
    """Float behind ``str(value)`` and its canonical form, when it has a fractional part."""
    text = str(value).strip()
    if isinstance(value, bool) or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number) or number.is_integer():
        return None
    canonical = repr(number)
    if not _FLOAT_SHAPE.match(canonical):
        return None
    return number, canonical


def check_string(value: Any, definition: TypeDefinition) -> Result[str, AppError]:
    rules: StringRules = definition.rules
    name = definition.name

    if not isinstance(value, str):
        return invalid_type(_message(definition, RuleKey.TYPE, value), name, type_of(value))
    if rules.min is not None and len(value) < rules.min:
        return out_of_range(_message(definition, RuleKey.MIN, value), name, "min", rules.min)
    if rules.max is not None and len(value) > rules.max:
        return out_of_range(_message(definition, RuleKey.MAX, value), name, "max", rules.max)
    if rules.regexp is not None and not rules.regexp.search(value):
        return invalid_format(_message(definition, RuleKey.REGEXP, value), name, rules.regexp.pattern)
    if rules.test is not None and not rules.test(value):
        return constraint_violation(_message(definition, RuleKey.TEST, value), name)
    return Ok(value)


def check_int(value: Any, definition: TypeDefinition) -> Result[int, AppError]:
    rules: IntRules = definition.rules
    name = definition.name

    number = _parse_integer(value)
    if number is None:
        return invalid_type(_message(definition, RuleKey.TYPE, value), name, type_of(value))
    if rules.min is not None and number < rules.min:
        return out_of_range(_message(definition, RuleKey.MIN, value), name, "min", rules.min)
    if rules.max is not None and number > rules.max:
        return out_of_range(_message(definition, RuleKey.MAX, value), name, "max", rules.max)
    if rules.test is not None and not rules.test(str(number)):
        return constraint_violation(_message(definition, RuleKey.TEST, value), name)
    return Ok(number)


def check_float(value: Any, definition: TypeDefinition) -> Result[float, AppError]:
    rules: FloatRules = definition.rules
    name = definition.name

    parsed = _parse_float(value)
    if parsed is None:
        return invalid_type(_message(definition, RuleKey.TYPE, value), name, type_of(value))
    number, canonical = parsed
    decimals = len(canonical.split(".")[1])

    if rules.min is not None and number < rules.min:
        return out_of_range(_message(definition, RuleKey.MIN, value), name, "min", rules.min)
    if rules.max is not None and number > rules.max:
        return out_of_range(_message(definition, RuleKey.MAX, value), name, "max", rules.max)
    if rules.min_decimals is not None and decimals < rules.min_decimals:
        return invalid_precision(
            _message(definition, RuleKey.MIN_DECIMALS, value), name,
            "min_decimals", rules.min_decimals, decimals,
        )
    if rules.max_decimals is not None and decimals > rules.max_decimals:
        return invalid_precision(
            _message(definition, RuleKey.MAX_DECIMALS, value), name,
            "max_decimals", rules.max_decimals, decimals,
        )
    if rules.test is not None and not rules.test(canonical):
        return constraint_violation(_message(definition, RuleKey.TEST, value), name)
    return Ok(number)


CHECKS: dict[ScalarKind, Callable[[Any, TypeDefinition], Result[Any, AppError]]] = {
    ScalarKind.STRING: check_string,
    ScalarKind.INT: check_int,
    ScalarKind.FLOAT: check_float,
}


def check_value(value: Any, definition: TypeDefinition) -> Result[Any, AppError]:
    """Run the checks for the definition's kind."""
    return CHECKS[definition.kind](value, definition)
