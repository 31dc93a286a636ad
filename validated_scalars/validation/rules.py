"""Rule sets for the three scalar kinds.

Rule sets are frozen pydantic models with unknown keys forbidden, so a typo
in a ``validate`` mapping fails when the scalar type is built instead of being
silently ignored at query time.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

Predicate = Callable[[str], Any]


class RuleKey(str, Enum):
    """Names of the rules a value is checked against, in no particular order."""
    TYPE = "type"
    MIN = "min"
    MAX = "max"
    REGEXP = "regexp"
    TEST = "test"
    MIN_DECIMALS = "min_decimals"
    MAX_DECIMALS = "max_decimals"


class ScalarKind(str, Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"


class RuleSet(BaseModel):
    """Base for kind-specific rule sets."""
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    test: Predicate | None = None

    @classmethod
    def rule_keys(cls) -> tuple[RuleKey, ...]:
        """Rule keys this kind can report, in evaluation order."""
        raise NotImplementedError


class StringRules(RuleSet):
    """Length bounds are counted in characters; ``regexp`` is searched, not anchored."""
    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)
    regexp: re.Pattern[str] | None = None

    @classmethod
    def rule_keys(cls) -> tuple[RuleKey, ...]:
        return (RuleKey.TYPE, RuleKey.MIN, RuleKey.MAX, RuleKey.REGEXP, RuleKey.TEST)


class IntRules(RuleSet):
    min: int | None = None
    max: int | None = None

    @classmethod
    def rule_keys(cls) -> tuple[RuleKey, ...]:
        return (RuleKey.TYPE, RuleKey.MIN, RuleKey.MAX, RuleKey.TEST)


class FloatRules(RuleSet):
    """Decimal bounds count digits after the point in the value's canonical form."""
    min: int | float | None = None
    max: int | float | None = None
    min_decimals: int | None = Field(default=None, ge=0)
    max_decimals: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_decimal_bounds(self) -> FloatRules:
        if (
            self.min_decimals is not None
            and self.max_decimals is not None
            and self.min_decimals > self.max_decimals
        ):
            raise ValueError("min_decimals cannot exceed max_decimals")
        return self

    @classmethod
    def rule_keys(cls) -> tuple[RuleKey, ...]:
        return (
            RuleKey.TYPE,
            RuleKey.MIN,
            RuleKey.MAX,
            RuleKey.MIN_DECIMALS,
            RuleKey.MAX_DECIMALS,
            RuleKey.TEST,
        )


RULES_BY_KIND: dict[ScalarKind, type[RuleSet]] = {
    ScalarKind.STRING: StringRules,
    ScalarKind.INT: IntRules,
    ScalarKind.FLOAT: FloatRules,
}
