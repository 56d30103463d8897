"""
Token-driven scientific calculator engine.

This module contains the CalculatorEngine class, which folds input tokens
into a running calculation and produces the display string after each one.
"""

import logging

from scicalc.config.settings import CalculatorConfig

from . import math_functions
from .display import format_for_display
from .operand import OperandText
from .state import AngleUnit, CalculatorState, Operator
from .tokens import TokenKind, UnknownTokenError, normalize

logger = logging.getLogger(__name__)


# ============================================================================
# CLASS: CalculatorEngine
# Purpose: Incremental left-to-right calculator
# Responsibilities:
#   - Build operands digit by digit as literal text
#   - Evaluate the pending operator as soon as the next one arrives
#   - Apply unary and trig functions to the operand being typed
#   - Produce the display string of the current operand
# ============================================================================
class CalculatorEngine:
    """
    Calculator with immediate, precedence-free evaluation.

    Operation model:
        1. Digits accumulate in current_input (as text)
        2. An operator stores the left operand, or evaluates the pending
           operation first: 2 + 3 x 4 = (2 + 3) x 4 = 20
        3. Equals evaluates the pending operation and clears it
        4. Functions replace current_input with their result

    After every operator or equals the fresh-operand flag is set, so the
    next digit starts a new operand instead of extending the result.
    """

    def __init__(self, config=None, state=None):
        """
        Initializes the engine.

        Args:
            config (CalculatorConfig): Settings (defaults if None)
            state (CalculatorState): Existing state to drive (new one if None)
        """
        self.config = config if config else CalculatorConfig()
        self.state = state if state else CalculatorState(AngleUnit(self.config.default_angle_unit))
        self._handlers = {
            TokenKind.DIGIT: self.apply_digit,
            TokenKind.DECIMAL_POINT: self.apply_decimal_point,
            TokenKind.OPERATOR: self.apply_binary_operator,
            TokenKind.EQUALS: self.apply_equals,
            TokenKind.CLEAR: self.clear_all,
            TokenKind.DELETE_LAST: self.delete_last_char,
            TokenKind.TOGGLE_SHIFT: self.toggle_shift,
            TokenKind.TOGGLE_ALPHA: self.toggle_alpha,
            TokenKind.SET_ANGLE_UNIT: self.set_angle_unit,
            TokenKind.TRIG_FUNCTION: self.apply_trig_function,
            TokenKind.UNARY_FUNCTION: self.apply_unary_function,
            TokenKind.MEMORY_ADD: self.memory_add,
            TokenKind.RECALL_ANSWER: self.recall_answer,
            TokenKind.PAREN_OPEN: self.open_paren,
            TokenKind.PAREN_CLOSE: self.close_paren,
            TokenKind.NAVIGATE: self.navigate,
        }

    # ========================================================================
    # READ-ONLY PROJECTIONS
    # ========================================================================
    @property
    def current_input(self):
        return self.state.current_input

    @property
    def previous_input(self):
        return self.state.previous_input

    @property
    def pending_operator(self):
        return self.state.pending_operator

    @property
    def awaiting_fresh_operand(self):
        return self.state.awaiting_fresh_operand

    @property
    def shift_active(self):
        return self.state.shift_active

    @property
    def alpha_active(self):
        return self.state.alpha_active

    @property
    def angle_unit(self):
        return self.state.angle_unit

    @property
    def memory(self):
        return self.state.memory

    # ========================================================================
    # TOKEN DISPATCH
    # ========================================================================
    def process(self, token):
        """
        Applies one token and returns the new display string.

        Args:
            token (Token): Token to apply

        Returns:
            str: Display string after the token

        Unrecognized tokens are logged and ignored; state is unchanged.
        """
        try:
            token = normalize(token)
        except UnknownTokenError as e:
            logger.warning("Unrecognized token %r ignored: %s", token, e)
            return self.display()

        handler = self._handlers[token.kind]
        if token.arg is None:
            handler()
        else:
            handler(token.arg)
        return self.display()

    def display(self):
        """Display string of the operand being typed."""
        return format_for_display(self.state.current_input, self.config)

    # ========================================================================
    # OPERAND ENTRY
    # ========================================================================
    def apply_digit(self, d):
        """
        Adds a digit to the operand.

        Behavior:
            - After an operator/equals: the digit starts a new operand
            - Operand "0" or empty: the digit replaces it (no leading zeros)
            - Otherwise: the digit is appended
        """
        state = self.state
        d = str(d)
        if state.awaiting_fresh_operand:
            state.current_input = OperandText(d)
            state.awaiting_fresh_operand = False
        elif state.current_input in ("0", ""):
            state.current_input = OperandText(d)
        else:
            state.current_input = state.current_input.append(d)

    def apply_decimal_point(self):
        """Appends "." unless the operand already has one."""
        state = self.state
        if not state.current_input.has_decimal_point:
            state.current_input = state.current_input.append(".")

    def open_paren(self):
        # Parentheses are kept as text only, never evaluated
        self.state.current_input = self.state.current_input.append("(")

    def close_paren(self):
        self.state.current_input = self.state.current_input.append(")")

    def delete_last_char(self):
        """Drops the last character; a single character leaves the operand empty."""
        self.state.current_input = self.state.current_input.drop_last()

    # ========================================================================
    # BINARY OPERATIONS
    # ========================================================================
    def _evaluate_pending(self):
        state = self.state
        result = math_functions.compute(
            state.pending_operator,
            state.previous_input.value,
            state.current_input.value,
        )
        state.current_input = OperandText.from_number(result)
        state.previous_input = state.current_input
        logger.debug("Evaluated %s -> %s", state.pending_operator.value, state.current_input)

    def apply_binary_operator(self, op):
        """
        Selects a binary operator.

        Args:
            op (Operator): Operator awaiting its right operand

        Behavior:
            - No left operand stored yet: the current operand becomes it
            - Otherwise, if an operator is pending: it is evaluated now and
              the result becomes both operands
            - The new operator is then pending and the next digit starts a
              fresh operand

        With nothing typed and nothing stored there is no left operand, so
        the operator is not recorded.
        """
        op = Operator(op)
        state = self.state
        if state.previous_input.is_empty:
            state.previous_input = state.current_input
        elif state.pending_operator is not None:
            self._evaluate_pending()

        if state.previous_input.is_empty:
            logger.debug("Operator %s ignored: no left operand", op.value)
        else:
            state.pending_operator = op
        state.awaiting_fresh_operand = True

    def apply_equals(self):
        """Evaluates the pending operation, if any, and clears it."""
        state = self.state
        if not state.previous_input.is_empty and state.pending_operator is not None:
            self._evaluate_pending()
        state.pending_operator = None
        state.awaiting_fresh_operand = True

    # ========================================================================
    # FUNCTIONS
    # ========================================================================
    def apply_unary_function(self, name):
        """
        Replaces the operand with f(operand).

        Args:
            name (str): "ln", "sqrt", "square", "negate", "exp" or "factorial"

        The fresh-operand flag is left as it is.
        """
        if name not in math_functions.UNARY_FUNCTIONS:
            logger.warning("Function %s not implemented", name)
            return
        result = math_functions.apply_unary(name, self.state.current_input.value)
        if isinstance(result, str):
            self.state.current_input = OperandText(result)
        else:
            self.state.current_input = OperandText.from_number(result)

    def apply_trig_function(self, name, inverse=None):
        """
        Applies sin/cos/tan (or their inverses) to the operand.

        Args:
            name (str): "sin", "cos" or "tan"
            inverse (bool): Use asin/acos/atan; defaults to the shift flag

        Only degrees are converted: in degree mode forward arguments are
        converted to radians and inverse results back to degrees. Radians
        and gradians are used as they are.
        """
        if name not in math_functions.TRIG_FUNCTIONS:
            logger.warning("Function %s not implemented", name)
            return
        if inverse is None:
            inverse = self.state.shift_active
        result = math_functions.trig(
            name,
            self.state.current_input.value,
            inverse=inverse,
            degrees=self.state.angle_unit is AngleUnit.DEGREES,
        )
        self.state.current_input = OperandText.from_number(result)

    # ========================================================================
    # MODES
    # ========================================================================
    def toggle_shift(self):
        """Flips shift: trig keys switch to their inverses."""
        self.state.shift_active = not self.state.shift_active

    def toggle_alpha(self):
        """Flips the alpha modifier."""
        self.state.alpha_active = not self.state.alpha_active

    def set_angle_unit(self, unit):
        """Sets the angle unit from an AngleUnit or its name."""
        self.state.angle_unit = AngleUnit(unit)

    def navigate(self, direction):
        # Cursor keys have no effect on the calculation
        logger.info("Navigation %s", direction)

    # ========================================================================
    # MEMORY / CLEAR
    # ========================================================================
    def memory_add(self):
        self.state.memory += self.state.current_input.value

    def recall_answer(self):
        """Copies the stored left operand (last result) into the operand."""
        self.state.current_input = OperandText(self.state.previous_input)

    def clear_all(self):
        """Resets the calculation (AC); memory and modes survive."""
        self.state.reset()
