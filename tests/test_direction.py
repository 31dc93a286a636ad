"""Tests for directional dispatch onto the graphql-core scalar hooks."""

import pytest
from graphql import GraphQLScalarType, parse_value
from structlog.testing import capture_logs

from validated_scalars import (
    DIRECTION_BOTH,
    DIRECTION_INPUT,
    DIRECTION_OUTPUT,
    Direction,
    GraphQLTypeError,
    create_int_input_type,
    create_int_output_type,
    create_int_type,
    create_scalar_type,
    create_string_input_type,
    create_string_output_type,
    int_type_handler,
    log_output_failure,
)
from validated_scalars.core.config import Settings
from validated_scalars.core.errors import ErrorCode

ATTRS = {"name": "Percent", "description": "Whole percentage", "validate": {"min": 0, "max": 100}}


class TestDirection:
    def test_constants(self) -> None:
        assert DIRECTION_INPUT == "input"
        assert DIRECTION_OUTPUT == "output"
        assert DIRECTION_BOTH == "both"

    @pytest.mark.parametrize(
        "direction, checks_input, checks_output",
        [
            (Direction.INPUT, True, False),
            (Direction.OUTPUT, False, True),
            (Direction.BOTH, True, True),
        ],
    )
    def test_checks(self, direction, checks_input, checks_output) -> None:
        assert direction.checks_input is checks_input
        assert direction.checks_output is checks_output


class TestCreateScalarType:
    def test_returns_named_scalar(self) -> None:
        scalar = create_int_type(ATTRS)
        assert isinstance(scalar, GraphQLScalarType)
        assert scalar.name == "Percent"
        assert scalar.description == "Whole percentage"

    def test_accepts_string_direction(self) -> None:
        scalar = create_scalar_type(ATTRS, int_type_handler(ATTRS), "input")
        assert scalar.serialize(500) == 500
        with pytest.raises(GraphQLTypeError):
            scalar.parse_value(500)

    def test_both_checks_input_and_output(self, output_failures) -> None:
        scalar = create_int_type(ATTRS, on_output_error=output_failures)
        assert scalar.parse_value("42") == 42
        assert scalar.parse_literal(parse_value("42")) == 42
        assert scalar.serialize("42") == 42
        assert output_failures.calls == []


class TestSerialize:
    def test_output_failure_returns_raw_value(self, output_failures) -> None:
        scalar = create_int_output_type(ATTRS, on_output_error=output_failures)
        assert scalar.serialize(150) == 150
        [(name, value, error)] = output_failures.calls
        assert (name, value) == ("Percent", 150)
        assert error.message == 'Maximum number for "Percent" is 100.'

    def test_output_success_returns_coerced_value(self, output_failures) -> None:
        scalar = create_int_output_type(ATTRS, on_output_error=output_failures)
        assert scalar.serialize("7") == 7

    def test_input_only_passes_output_through_unchecked(self, output_failures) -> None:
        scalar = create_int_input_type(ATTRS, on_output_error=output_failures)
        assert scalar.serialize("not a number") == "not a number"
        assert output_failures.calls == []

    def test_failing_resolve_is_swallowed_on_output(self, output_failures) -> None:
        def explode(value):
            raise RuntimeError("formatter broke")

        scalar = create_string_output_type(name="S", resolve=explode, on_output_error=output_failures)
        assert scalar.serialize("abc") == "abc"
        [(_, _, error)] = output_failures.calls
        assert isinstance(error, RuntimeError)

    def test_default_sink_logs(self) -> None:
        scalar = create_int_output_type(ATTRS)
        with capture_logs() as logs:
            assert scalar.serialize(-1) == -1
        [entry] = logs
        assert entry["event"] == "scalar.output_invalid"
        assert entry["log_level"] == "error"
        assert entry["scalar"] == "Percent"
        assert entry["rule"] == "min"
        assert entry["code"] == "E2003_OUT_OF_RANGE"
        assert entry["origin"] == "graphql"
        assert entry["value"] == -1


class TestParse:
    def test_input_failure_propagates(self) -> None:
        scalar = create_int_input_type(ATTRS)
        with pytest.raises(GraphQLTypeError, match='Minimum number for "Percent" is 0.') as exc_info:
            scalar.parse_value(-5)
        assert exc_info.value.rule == "min"
        assert exc_info.value.code is ErrorCode.E2003_OUT_OF_RANGE

    def test_literal_failure_carries_node(self) -> None:
        scalar = create_int_input_type(ATTRS)
        node = parse_value("101")
        with pytest.raises(GraphQLTypeError) as exc_info:
            scalar.parse_literal(node)
        assert exc_info.value.nodes == [node]

    @pytest.mark.parametrize("hook", ["parse_value", "parse_literal"])
    def test_output_only_rejects_input(self, hook) -> None:
        scalar = create_int_output_type(ATTRS)
        raw = parse_value("50") if hook == "parse_literal" else 50
        with pytest.raises(GraphQLTypeError) as exc_info:
            getattr(scalar, hook)(raw)
        assert exc_info.value.message == '"Percent" type must be Output Type but got input.'
        assert exc_info.value.code is ErrorCode.E2030_DIRECTION_MISMATCH

    def test_literal_passes_node_value(self) -> None:
        scalar = create_string_input_type(name="S", validate={"min": 2})
        assert scalar.parse_literal(parse_value('"ab"')) == "ab"

    def test_literal_list_fails_type_rule(self) -> None:
        scalar = create_string_input_type(name="S")
        with pytest.raises(GraphQLTypeError, match="but array was passed"):
            scalar.parse_literal(parse_value('["a"]'))

    def test_literal_boolean_fails_type_rule(self) -> None:
        scalar = create_int_input_type(name="N")
        with pytest.raises(GraphQLTypeError, match="but boolean was passed"):
            scalar.parse_literal(parse_value("true"))


class TestResolve:
    def test_applied_after_rules(self) -> None:
        scalar = create_string_input_type(name="Upper", validate={"max": 3}, resolve=str.upper)
        assert scalar.parse_value("abc") == "ABC"

    def test_receives_coerced_value(self) -> None:
        scalar = create_int_type(name="Double", resolve=lambda value: value * 2)
        assert scalar.parse_value("21") == 42
        assert scalar.parse_literal(parse_value("21")) == 42

    def test_not_called_when_rules_fail(self) -> None:
        calls = []
        scalar = create_int_input_type(ATTRS, resolve=calls.append)
        with pytest.raises(GraphQLTypeError):
            scalar.parse_value(1000)
        assert calls == []


class TestLogOutputFailure:
    def test_includes_value_by_default(self) -> None:
        error = GraphQLTypeError("bad", rule="test", scalar="S")
        with capture_logs() as logs:
            log_output_failure("S", "secret", error)
        assert logs[0]["value"] == "secret"
        assert logs[0]["message"] == "bad"

    def test_value_can_be_left_out(self, monkeypatch) -> None:
        monkeypatch.setattr(
            "validated_scalars.direction.get_settings",
            lambda: Settings(LOG_OUTPUT_VALUES=False),
        )
        with capture_logs() as logs:
            log_output_failure("S", "secret", ValueError("boom"))
        assert "value" not in logs[0]
        assert logs[0]["error"] == "boom"
        assert "rule" not in logs[0]
