"""Engine tests: operand entry, left-to-right evaluation, functions and modes."""

import math
import logging

import pytest

from scicalc.core.calculator import CalculatorEngine
from scicalc.core.operand import OperandText
from scicalc.core.state import AngleUnit, CalculatorState, Operator
from scicalc.core.tokens import Token, TokenKind, digit, operator, unary_function


# --- Operand entry ---

def test_digits_concatenate(engine, press):
    assert press("1", "2", "3") == "123"
    assert engine.current_input == "123"


def test_leading_zero_replaced(engine, press):
    press("0")
    assert engine.current_input == "0"
    press("0")
    assert engine.current_input == "0"
    press("5")
    assert engine.current_input == "5"


def test_second_decimal_point_ignored(engine, press):
    assert press("1", "decimal", "2", "decimal", "3") == "1.23"


def test_decimal_point_on_empty_input(engine, press):
    assert press("decimal") == "."
    assert press("5") == ".5"
    assert engine.current_input.value == pytest.approx(0.5)


def test_trailing_zero_kept_verbatim(press):
    assert press("1", "decimal", "2", "0") == "1.20"


def test_delete_last(engine, press):
    press("1", "2", "3")
    assert press("del") == "12"
    press("del")
    assert press("del") == ""
    assert engine.current_input == ""


def test_delete_on_empty_stays_empty(engine, press):
    press("del")
    assert engine.current_input == ""


def test_parentheses_are_text_only(engine, press):
    assert press("parenthesis-open", "2", "parenthesis-close") == "(2)"
    assert math.isnan(engine.current_input.value)


# --- Left-to-right evaluation ---

def test_chain_has_no_precedence(press):
    """2 + 3 x 4 is (2 + 3) x 4."""
    assert press("2", "add", "3", "multiply", "4", "equals") == "20"


def test_operator_evaluates_pending_operation(engine, press):
    press("2", "add", "3", "multiply")
    assert engine.current_input == "5"
    assert engine.previous_input == "5"
    assert engine.pending_operator is Operator.MULTIPLY
    assert engine.awaiting_fresh_operand


def test_first_operator_stores_left_operand(engine, press):
    press("4", "2", "subtract")
    assert engine.previous_input == "42"
    assert engine.current_input == "42"
    assert engine.pending_operator is Operator.SUBTRACT


def test_division_by_zero_gives_zero(press):
    assert press("5", "divide", "0", "equals") == "0"


def test_power(press):
    assert press("2", "power", "1", "0", "equals") == "1024"


def test_combination_and_permutation(engine, press):
    assert press("5", "ncr", "2", "equals") == "10"
    press("ac")
    assert press("5", "npr", "2", "equals") == "20"


def test_decimal_results(press):
    assert press("1", "divide", "4", "equals") == "0.25"


def test_equals_without_operator_is_idempotent(engine, press):
    press("7")
    press("equals")
    assert engine.current_input == "7"
    press("equals")
    assert engine.current_input == "7"
    assert engine.pending_operator is None


def test_repeated_equals_does_not_repeat_operation(press):
    assert press("2", "add", "3", "equals", "equals") == "5"


def test_equals_uses_current_operand_twice(press):
    assert press("2", "add", "equals") == "4"


def test_digit_after_equals_starts_new_operand(engine, press):
    press("2", "add", "3", "equals")
    assert press("7") == "7"
    assert not engine.awaiting_fresh_operand


def test_result_feeds_next_operator(press):
    assert press("2", "add", "3", "equals", "multiply", "4", "equals") == "20"


def test_operand_typed_after_equals_is_dropped_by_next_operator(press):
    # The stored result stays the left operand: 5 + 1, not 7 + 1
    assert press("2", "add", "3", "equals", "7", "add", "1", "equals") == "6"


def test_operator_without_any_operand_is_not_recorded(engine, press):
    press("add")
    assert engine.pending_operator is None
    assert engine.previous_input == ""
    assert engine.awaiting_fresh_operand
    assert press("5", "equals") == "5"


def test_invalid_operand_propagates_nan(press):
    assert press("parenthesis-open", "2", "add", "3", "equals") == "NaN"


# --- Unary functions ---

@pytest.mark.parametrize("typed, name, expected", [
    ("16", "sqrt", "4"),
    ("3", "square", "9"),
    ("5", "negate", "-5"),
    ("1500", "exp", "1.5e+3"),
    ("5", "factorial", "120"),
    ("0", "ln", "-Infinity"),
])
def test_unary_functions(engine, typed, name, expected):
    for d in typed:
        engine.process(digit(d))
    assert engine.process(unary_function(name)) == expected


def test_ln_of_negative_is_nan(engine, press):
    press("5", "neg")
    assert press("ln") == "NaN"


def test_negate_empty_input_is_nan(press):
    assert press("neg") == "NaN"


def test_unary_function_keeps_pending_chain(engine, press):
    press("2", "add", "9", "sqrt")
    assert not engine.awaiting_fresh_operand
    assert press("equals") == "5"


def test_exp_result_parses_back(engine, press):
    press("1", "5", "0", "0", "exp", "add", "1", "equals")
    assert engine.current_input == "1501"


def test_unknown_unary_function_ignored(engine, press, caplog):
    press("4")
    with caplog.at_level(logging.WARNING, logger="scicalc"):
        engine.apply_unary_function("cbrt")
    assert engine.current_input == "4"
    assert "cbrt" in caplog.text


# --- Trigonometry and modes ---

def test_sine_in_degrees(engine, press):
    press("3", "0", "sin")
    assert engine.current_input.value == pytest.approx(0.5)


def test_inverse_sine_in_degrees(engine, press):
    press("shift", "0", "decimal", "5", "sin")
    assert engine.current_input.value == pytest.approx(30)


def test_tangent_in_degrees(engine, press):
    press("4", "5", "tan")
    assert engine.current_input.value == pytest.approx(1)


def test_inverse_out_of_domain_is_nan(engine, press):
    assert press("shift", "2", "sin") == "NaN"


def test_explicit_inverse_overrides_shift(engine, press):
    press("1")
    engine.apply_trig_function("cos", inverse=True)
    assert engine.current_input == "0"


def test_radians_are_not_converted(engine, press):
    press("rad", "1", "sin")
    assert engine.current_input.value == pytest.approx(math.sin(1))
    press("ac", "shift", "1", "sin")
    assert engine.current_input.value == pytest.approx(math.pi / 2)


def test_gradians_behave_like_radians(engine, press):
    press("gra", "1", "sin")
    assert engine.angle_unit is AngleUnit.GRADIANS
    assert engine.current_input.value == pytest.approx(math.sin(1))


def test_shift_stays_active_until_toggled(engine, press):
    press("shift")
    assert engine.shift_active
    press("1", "sin")
    assert engine.shift_active
    press("shift")
    assert not engine.shift_active


def test_alpha_toggle(engine, press):
    press("alpha")
    assert engine.alpha_active
    press("alpha")
    assert not engine.alpha_active


# --- Memory, answer, clear ---

def test_memory_survives_clear(engine, press):
    press("5", "s-sum", "ac")
    assert engine.memory == 5.0
    assert engine.current_input == ""
    assert engine.previous_input == ""
    assert engine.pending_operator is None


def test_memory_accumulates(engine, press):
    press("5", "s-sum", "ac", "2", "s-sum")
    assert engine.memory == 7.0


def test_clear_keeps_modes(engine, press):
    press("rad", "shift", "ac")
    assert engine.angle_unit is AngleUnit.RADIANS
    assert engine.shift_active


def test_clear_resets_calculation(engine, press):
    press("2", "add", "3")
    assert press("ac") == ""
    assert not engine.awaiting_fresh_operand


def test_recall_answer(engine, press):
    press("2", "add", "3", "equals", "7")
    assert press("ans") == "5"


def test_recall_answer_without_previous_is_empty(engine, press):
    press("4")
    assert press("ans") == ""


# --- Dispatch ---

def test_process_returns_display(engine):
    assert engine.process(digit(8)) == "8"


def test_unrecognized_token_ignored(engine, press, caplog):
    press("4", "add", "2")
    before = engine.state.snapshot()
    with caplog.at_level(logging.WARNING, logger="scicalc"):
        assert engine.process("bogus") == "2"
    assert engine.state.snapshot() == before
    assert "Unrecognized token" in caplog.text


def test_navigation_changes_nothing(engine, press):
    press("4")
    before = engine.state.snapshot()
    assert press("nav-left", "nav-up") == "4"
    assert engine.state.snapshot() == before


def test_engine_drives_given_state(config):
    state = CalculatorState(AngleUnit.RADIANS)
    state.current_input = OperandText("9")
    engine = CalculatorEngine(config, state)
    engine.process(Token(TokenKind.UNARY_FUNCTION, "sqrt"))
    assert state.current_input == "3"


def test_operator_token_by_name(engine):
    engine.process(digit(6))
    engine.process(operator("divide"))
    engine.process(digit(4))
    assert engine.process(Token(TokenKind.EQUALS)) == "1.5"


# --- Tokens built without the factories ---

@pytest.mark.parametrize("token", [
    Token(TokenKind.DIGIT),
    Token(TokenKind.DIGIT, "12"),
    Token(TokenKind.SET_ANGLE_UNIT, "bogus"),
    Token(TokenKind.OPERATOR, "modulo"),
    Token(TokenKind.TRIG_FUNCTION, ["sin"]),
    Token(TokenKind.EQUALS, "now"),
    Token("digit", "4"),
])
def test_malformed_token_ignored(engine, press, caplog, token):
    press("4", "add", "2")
    before = engine.state.snapshot()
    with caplog.at_level(logging.WARNING, logger="scicalc"):
        assert engine.process(token) == "2"
    assert engine.state.snapshot() == before
    assert "Unrecognized token" in caplog.text


def test_operator_token_with_name_payload(engine):
    engine.process(digit(5))
    engine.process(Token(TokenKind.OPERATOR, "add"))
    assert engine.pending_operator is Operator.ADD
    engine.process(digit(3))
    assert engine.process(Token(TokenKind.EQUALS)) == "8"


def test_angle_unit_token_with_name_payload(engine):
    engine.process(Token(TokenKind.SET_ANGLE_UNIT, "radians"))
    assert engine.angle_unit is AngleUnit.RADIANS


def test_digit_token_with_int_payload(engine):
    assert engine.process(Token(TokenKind.DIGIT, 7)) == "7"
