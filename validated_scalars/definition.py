"""Scalar type definitions and their construction-time checks.

A definition is checked once, when the scalar type is built. Any problem is a
``DefinitionError`` raised to the caller; nothing here runs per value.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from pydantic import ValidationError

from .errors import DefinitionError
from .validation.rules import RULES_BY_KIND, RuleKey, RuleSet, ScalarKind

ALLOWED_ATTRIBUTES: frozenset[str] = frozenset(
    {"name", "description", "validate", "validation_messages", "resolve"}
)


@dataclass(frozen=True, slots=True)
class TypeDefinition:
    """Immutable, checked definition closed over by a scalar type's hooks."""
    name: str
    kind: ScalarKind
    rules: RuleSet
    description: str | None = None
    messages: Mapping[RuleKey, str] = field(default_factory=lambda: MappingProxyType({}))
    resolve: Callable[[Any], Any] | None = None


def validate_definition(
    attrs: Mapping[str, Any], allowed: Iterable[str] = ALLOWED_ATTRIBUTES
) -> None:
    """Check the root attributes passed to a type creator function."""
    if not attrs.get("name"):
        raise DefinitionError("Must provide name.")
    allowed = frozenset(allowed)
    for attr in attrs:
        if attr not in allowed:
            raise DefinitionError(f'Unknown attribute "{attr}" set for "{attrs["name"]}" type.')


def _parse_rules(kind: ScalarKind, name: str, rules: Any) -> RuleSet:
    model = RULES_BY_KIND[kind]
    if rules is None:
        return model()
    if isinstance(rules, model):
        return rules
    try:
        return model.model_validate(rules)
    except ValidationError as e:
        first = e.errors()[0]
        rule = ".".join(str(part) for part in first["loc"]) or "validate"
        raise DefinitionError(
            f'Invalid rule "{rule}" set for "{name}" type: {first["msg"]}.'
        ) from e


def _parse_messages(
    kind: ScalarKind, name: str, messages: Mapping[str, str] | None
) -> Mapping[RuleKey, str]:
    known = RULES_BY_KIND[kind].rule_keys()
    parsed: dict[RuleKey, str] = {}
    for key, message in (messages or {}).items():
        try:
            rule = RuleKey(key)
        except ValueError:
            rule = None
        if rule not in known:
            raise DefinitionError(f'Unknown validation message "{key}" set for "{name}" type.')
        if not isinstance(message, str):
            raise DefinitionError(f'Validation message "{key}" for "{name}" type must be a string.')
        parsed[rule] = message
    return MappingProxyType(parsed)


def build_definition(kind: ScalarKind, attrs: Mapping[str, Any]) -> TypeDefinition:
    """Validate ``attrs`` and turn them into a ``TypeDefinition``."""
    validate_definition(attrs)
    name = attrs["name"]
    resolve = attrs.get("resolve")
    if resolve is not None and not callable(resolve):
        raise DefinitionError(f'Attribute "resolve" set for "{name}" type must be callable.')
    return TypeDefinition(
        name=name,
        kind=kind,
        rules=_parse_rules(kind, name, attrs.get("validate")),
        description=attrs.get("description"),
        messages=_parse_messages(kind, name, attrs.get("validation_messages")),
        resolve=resolve,
    )
